"""Plain parent-pointer walks over a DirectIndex.

These are O(depth) and serve as the reference the skip-index query is checked
against, and as the `direct` query backend.
"""
from __future__ import annotations

from typing import Optional

from .data_structures import NO_PARENT, AncestorIndex, DirectIndex, NodeId


def direct_path(node_id: NodeId, direct: DirectIndex) -> list[NodeId]:
    """Ancestors of `node_id` from its parent up to the root.

    Raises KeyError for ids that were never indexed.
    """
    d: list[NodeId] = []
    x = direct[node_id]
    while x is not NO_PARENT:
        d.append(x)
        x = direct[x]
    return d


def depth(node_id: NodeId, direct: DirectIndex) -> int:
    # Root is depth 0
    return len(direct_path(node_id, direct))


def naive_kth_parent(node_id: NodeId, k: int, direct: DirectIndex) -> Optional[NodeId]:
    """Walk `k` parent pointers one at a time."""
    if node_id not in direct or k < 0:
        return None
    x = node_id
    for _ in range(k):
        x = direct[x]
        if x is NO_PARENT:
            return None
    return x


class DirectWalkBackend:
    """Query backend that ignores the skip index."""

    backend_id = "direct"

    def kth_parent(self, node_id: NodeId, k: int, index: AncestorIndex) -> Optional[NodeId]:
        return naive_kth_parent(node_id, k, index.direct)
