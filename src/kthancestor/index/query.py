"""K-th ancestor queries against an AncestorIndex.

The walk always takes one direct step first, since skip entries are keyed by
the sampled node itself. After that it prefers a `stride`-level jump whenever
at least `stride` levels remain and the current node is sampled, and falls back
to single parent steps otherwise. Strides are uniform, so the greedy choice
never overshoots.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .data_structures import NO_PARENT, AncestorIndex, NodeId

STATUS_FOUND = "found"
STATUS_UNKNOWN_ID = "unknown_id"
STATUS_NEGATIVE_K = "negative_k"
STATUS_EXCEEDS_ROOT = "exceeds_root"


@dataclass
class QueryResult:
    """Outcome of one k-th ancestor lookup.

    `ancestor` is None unless `status` is "found". `direct_steps` and
    `skip_jumps` count the index lookups the walk performed.
    """

    status: str
    ancestor: Optional[NodeId] = None
    direct_steps: int = 0
    skip_jumps: int = 0

    @property
    def found(self) -> bool:
        return self.status == STATUS_FOUND

    @property
    def lookups(self) -> int:
        return self.direct_steps + self.skip_jumps


def explain_kth_parent(node_id: NodeId, k: int, index: AncestorIndex) -> QueryResult:
    """Run a k-th ancestor query and report how it resolved."""
    direct, skip = index
    if node_id not in direct:
        return QueryResult(STATUS_UNKNOWN_ID)
    if k == 0:
        return QueryResult(STATUS_FOUND, node_id)
    if k < 0:
        return QueryResult(STATUS_NEGATIVE_K)

    stride = skip.stride
    current = direct[node_id]
    k -= 1
    steps, jumps = 1, 0
    while k > 0:
        if current is NO_PARENT:
            return QueryResult(STATUS_EXCEEDS_ROOT, None, steps, jumps)
        if k >= stride and skip.get(current, NO_PARENT) is not NO_PARENT:
            current = skip[current]
            k -= stride
            jumps += 1
        else:
            current = direct[current]
            k -= 1
            steps += 1

    if current is NO_PARENT:
        return QueryResult(STATUS_EXCEEDS_ROOT, None, steps, jumps)
    return QueryResult(STATUS_FOUND, current, steps, jumps)


def kth_parent(node_id: NodeId, k: int, index: AncestorIndex) -> Optional[NodeId]:
    """Return the ancestor `k` levels above `node_id`, or None.

    None covers an unknown `node_id`, a negative `k` and a `k` deeper than the
    node. `kth_parent(node_id, 0, index)` is `node_id` for any indexed node.
    """
    return explain_kth_parent(node_id, k, index).ancestor


class SkipJumpBackend:
    """Query backend using the skip index (the default)."""

    backend_id = "skip"

    def kth_parent(self, node_id: NodeId, k: int, index: AncestorIndex) -> Optional[NodeId]:
        return kth_parent(node_id, k, index)
