from __future__ import annotations

import random

from kthancestor import TreeNode


def single_node_tree() -> TreeNode:
    return TreeNode.from_literal({"id": 1, "children": []})


def small_tree() -> TreeNode:
    """1 -> 2 -> {3, 4}"""
    return TreeNode.from_literal(
        {"id": 1, "children": [{"id": 2, "children": [{"id": 3, "children": []}, {"id": 4, "children": []}]}]}
    )


def chain_tree(n: int, start: int = 1) -> TreeNode:
    """start -> start+1 -> ... -> start+n-1, built without recursion."""
    node = TreeNode(start + n - 1)
    for i in range(start + n - 2, start - 1, -1):
        node = TreeNode(i, (node,))
    return node


def hundred_node_tree() -> TreeNode:
    """100 nodes: spine 1 -> ... -> 96, leaves 97 and 98 under 10, 99 under 50, 100 under 96.

    Node i on the spine sits at depth i - 1, so the 90th ancestor of 96 is 6.
    """
    extra = {10: [97, 98], 50: [99], 96: [100]}
    node = TreeNode(96, tuple(TreeNode(x) for x in extra[96]))
    for i in range(95, 0, -1):
        leaves = tuple(TreeNode(x) for x in extra.get(i, []))
        node = TreeNode(i, (node,) + leaves)
    return node


def random_tree(n: int, seed: int, fanout_window: int = 4) -> tuple[TreeNode, dict[int, int | None]]:
    """Random tree on ids 0..n-1 plus its parent map.

    Each node's parent is drawn from the `fanout_window` previous ids, which
    keeps trees deep enough for skip jumps to matter.
    """
    rng = random.Random(seed)
    parent: dict[int, int | None] = {0: None}
    children: dict[int, list[int]] = {i: [] for i in range(n)}
    for i in range(1, n):
        p = rng.randint(max(0, i - fanout_window), i - 1)
        parent[i] = p
        children[p].append(i)

    built: dict[int, TreeNode] = {}
    for i in range(n - 1, -1, -1):
        built[i] = TreeNode(i, tuple(built.pop(c) for c in children[i]))
    return built[0], parent


def reference_kth_parent(parent: dict[int, int | None], node_id: int, k: int) -> int | None:
    if node_id not in parent or k < 0:
        return None
    x: int | None = node_id
    for _ in range(k):
        x = parent[x]  # type: ignore[index]
        if x is None:
            return None
    return x


def reference_depth(parent: dict[int, int | None], node_id: int) -> int:
    d = 0
    x = parent[node_id]
    while x is not None:
        d += 1
        x = parent[x]
    return d
