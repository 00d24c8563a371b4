"""kthancestor: skip-indexed k-th ancestor queries over static rooted trees."""

from .api import AncestorIndexSession, IndexPolicy
from .exceptions import InvalidStrideError, KthAncestorError, TreeLiteralError
from .index import (
    BACKEND_DIRECT,
    BACKEND_SKIP,
    DEFAULT_INDEX_BACKEND,
    DEFAULT_STRIDE,
    NO_PARENT,
    AncestorIndex,
    DirectIndex,
    QueryResult,
    SkipIndex,
    build_index,
    create_query_backend,
    explain_kth_parent,
    kth_parent,
    register_query_backend,
)
from .tree import TreeNode

__version__ = "0.1.0"

__all__ = [
    "AncestorIndex",
    "AncestorIndexSession",
    "BACKEND_DIRECT",
    "BACKEND_SKIP",
    "DEFAULT_INDEX_BACKEND",
    "DEFAULT_STRIDE",
    "DirectIndex",
    "IndexPolicy",
    "InvalidStrideError",
    "KthAncestorError",
    "NO_PARENT",
    "QueryResult",
    "SkipIndex",
    "TreeLiteralError",
    "TreeNode",
    "build_index",
    "create_query_backend",
    "explain_kth_parent",
    "kth_parent",
    "register_query_backend",
]
