"""Static rooted tree consumed by the indexer.

A `TreeNode` owns its children; there are no parent back-references. Trees are
usually written as literals, either the mapping form

    {"id": 1, "children": [{"id": 2, "children": []}]}

or the sequence form, where the first element is the id and the rest are
children:

    [1, [2, [4], [5]], [3]]

Both forms may be mixed within one literal.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import TreeLiteralError

NodeId = Hashable


@dataclass(frozen=True, eq=False, repr=False)
class TreeNode:
    """A node identifier plus its ordered, owned children.

    Equality is identity and `repr` is shallow; the generated versions recurse
    through every descendant.
    """

    id: NodeId
    children: tuple["TreeNode", ...] = ()

    def __post_init__(self) -> None:
        if self.id is None:
            raise TreeLiteralError("node id must not be None")
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id!r}, children={len(self.children)})"

    def __len__(self) -> int:
        """Number of nodes in this subtree, including self."""
        return sum(1 for _ in self.walk())

    def __bool__(self) -> bool:
        return True

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator["TreeNode"]:
        """Yield the subtree in depth-first pre-order without recursing."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        best = 0
        stack: list[tuple[TreeNode, int]] = [(self, 0)]
        while stack:
            node, d = stack.pop()
            if d > best:
                best = d
            for child in node.children:
                stack.append((child, d + 1))
        return best

    # --- Literals ---
    @classmethod
    def from_literal(cls, literal: Any) -> "TreeNode":
        """Build a tree from a mapping- or sequence-form literal.

        Children are assembled bottom-up from an explicit stack, so deep chains
        are not limited by the interpreter recursion limit.
        """
        done: list[TreeNode] = []
        stack: list[tuple[Any, bool]] = [(literal, False)]
        while stack:
            item, closing = stack.pop()
            if closing:
                # Finished children sit at the tail of `done`, in order.
                node_id, n_children = item
                kids = tuple(done[len(done) - n_children:])
                del done[len(done) - n_children:]
                done.append(cls(node_id, kids))
                continue
            node_id, children = _split_literal(item)
            stack.append(((node_id, len(children)), True))
            stack.extend((child, False) for child in reversed(children))
        return done[0]

    def to_literal(self) -> dict[str, Any]:
        """Return the mapping-form literal of this subtree."""
        out: dict[str, Any] = {"id": self.id, "children": []}
        stack: list[tuple[TreeNode, list[Any]]] = [(c, out["children"]) for c in reversed(self.children)]
        # Pre-order with reversed pushes keeps sibling order in each children list.
        while stack:
            node, sink = stack.pop()
            entry: dict[str, Any] = {"id": node.id, "children": []}
            sink.append(entry)
            for child in reversed(node.children):
                stack.append((child, entry["children"]))
        return out


def _split_literal(item: Any) -> tuple[NodeId, Sequence[Any]]:
    if isinstance(item, TreeNode):
        raise TreeLiteralError("literal already contains a TreeNode; pass it directly")
    if isinstance(item, Mapping):
        if "id" not in item:
            raise TreeLiteralError(f"mapping literal has no 'id': {item!r}")
        children = item.get("children") or []
        if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
            raise TreeLiteralError(f"children of {item['id']!r} must be a list")
        node_id = item["id"]
    elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
        if not item:
            raise TreeLiteralError("sequence literal must start with a node id")
        node_id, children = item[0], item[1:]
    else:
        raise TreeLiteralError(f"unsupported tree literal: {item!r}")
    if node_id is None:
        raise TreeLiteralError("node id must not be None")
    if not isinstance(node_id, Hashable):
        raise TreeLiteralError(f"node id must be hashable, got {node_id!r}")
    return node_id, children
