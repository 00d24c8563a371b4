from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .api import AncestorIndexSession, IndexPolicy
from .exceptions import KthAncestorError
from .index.backend import DEFAULT_INDEX_BACKEND, available_backends
from .index.data_structures import DEFAULT_STRIDE
from .logger import set_logging_level
from .tree import TreeNode


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="kthancestor")
    p.add_argument("--log-level", default=None, help="package log level, e.g. DEBUG")
    sub = p.add_subparsers(dest="cmd", required=True)

    q = sub.add_parser("query", help="print the k-th ancestor of a node")
    q.add_argument("tree", help="path to a JSON tree literal")
    q.add_argument("node_id")  # parsed as JSON when possible, so 96 is an int
    q.add_argument("k", type=int)
    q.add_argument("--stride", type=int, default=DEFAULT_STRIDE)
    q.add_argument("--backend", choices=available_backends(), default=DEFAULT_INDEX_BACKEND)
    q.add_argument("--explain", action="store_true", help="also print status and lookup counts")

    s = sub.add_parser("stats", help="print index statistics")
    s.add_argument("tree", help="path to a JSON tree literal")
    s.add_argument("--stride", type=int, default=DEFAULT_STRIDE)
    return p


def parse_node_id(raw: str) -> Any:
    try:
        value = json.loads(raw)
    except ValueError:
        return raw
    # Only ints and strings; true and 1.0 would hash equal to 1
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        return raw
    return value


def load_tree(path: str) -> TreeNode:
    with open(path, encoding="utf-8") as f:
        return TreeNode.from_literal(json.load(f))


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        if args.log_level:
            set_logging_level(args.log_level)
        root = load_tree(args.tree)
        if args.cmd == "query":
            session = AncestorIndexSession.build(
                root, IndexPolicy(stride=args.stride, backend=args.backend)
            )
        else:
            session = AncestorIndexSession.build(root, IndexPolicy(stride=args.stride))
    except (OSError, ValueError, KthAncestorError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.cmd == "query":
        node_id = parse_node_id(args.node_id)
        ancestor = session.kth_parent(node_id, args.k)
        if args.explain:
            r = session.explain(node_id, args.k)
            print(f"status={r.status} direct_steps={r.direct_steps} skip_jumps={r.skip_jumps}")
        if ancestor is None:
            print("not found")
            return 1
        print(json.dumps(ancestor))
        return 0
    if args.cmd == "stats":
        print(f"nodes={session.node_count}")
        print(f"skip_entries={session.skip_entry_count}")
        print(f"stride={session.stride}")
        print(f"height={root.height()}")
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
