from __future__ import annotations

from typing import Iterable, Optional

from ..index.ancestry import depth as _depth
from ..index.backend import create_query_backend
from ..index.data_structures import AncestorIndex, NodeId
from ..index.indexer import build_index
from ..index.query import QueryResult, explain_kth_parent
from ..logger import init_logger
from ..tree import TreeNode
from .policy import IndexPolicy

logger = init_logger(__name__)


class AncestorIndexSession:
    """High-level wrapper pairing a built AncestorIndex with its policy.

    The index is read-only once built, so one session may serve queries from
    any number of threads. `rebuild` returns a new session and leaves this one
    untouched.

    Parameters:
        index: An index produced by `build_index`.
        policy: Settings the index was built with; defaults to `IndexPolicy()`
            with the index's own stride.
    """

    def __init__(self, index: AncestorIndex, policy: Optional[IndexPolicy] = None):
        if policy is None:
            policy = IndexPolicy(stride=index.stride)
        elif policy.stride != index.stride:
            raise ValueError(
                f"policy stride {policy.stride} does not match index stride {index.stride}"
            )
        self._index = index
        self._policy = policy
        self._backend = create_query_backend(policy.backend)

    # --- Construction ---
    @classmethod
    def build(cls, root: TreeNode, policy: Optional[IndexPolicy] = None) -> "AncestorIndexSession":
        """Index `root` according to `policy` and wrap the result.

        Parameters:
            root: Tree to index.
            policy: Stride and backend selection (defaults to `IndexPolicy()`).

        Returns:
            AncestorIndexSession over the new index.
        """
        policy = policy or IndexPolicy()
        index = build_index(root, policy.stride)
        session = cls(index, policy)
        logger.debug(
            "session ready: %d nodes, backend=%s, stride=%d",
            session.node_count,
            session.backend_id,
            session.stride,
        )
        return session

    def rebuild(self, root: TreeNode) -> "AncestorIndexSession":
        """Index a new tree with this session's policy."""
        return type(self).build(root, self._policy)

    # --- Introspection ---
    @property
    def index(self) -> AncestorIndex:
        return self._index

    @property
    def policy(self) -> IndexPolicy:
        return self._policy

    @property
    def stride(self) -> int:
        return self._index.stride

    @property
    def backend_id(self) -> str:
        return self._backend.backend_id

    @property
    def node_count(self) -> int:
        return len(self._index.direct)

    @property
    def skip_entry_count(self) -> int:
        return len(self._index.skip)

    def __contains__(self, node_id: NodeId) -> bool:
        return node_id in self._index.direct

    # --- Queries ---
    def kth_parent(self, node_id: NodeId, k: int) -> Optional[NodeId]:
        """Ancestor `k` levels above `node_id`, or None."""
        return self._backend.kth_parent(node_id, k, self._index)

    def explain(self, node_id: NodeId, k: int) -> QueryResult:
        """Skip-index query with status and lookup counts."""
        return explain_kth_parent(node_id, k, self._index)

    def kth_parents(self, queries: Iterable[tuple[NodeId, int]]) -> list[Optional[NodeId]]:
        """Answer a batch of (node_id, k) queries, preserving order."""
        return [self.kth_parent(node_id, k) for node_id, k in queries]

    def depth(self, node_id: NodeId) -> Optional[int]:
        if node_id not in self._index.direct:
            return None
        return _depth(node_id, self._index.direct)
