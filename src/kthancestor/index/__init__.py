"""Indexing and query primitives for k-th ancestor lookups."""

from .backend import (
    BACKEND_DIRECT,
    BACKEND_SKIP,
    DEFAULT_INDEX_BACKEND,
    create_query_backend,
    register_query_backend,
)
from .data_structures import (
    DEFAULT_STRIDE,
    NO_PARENT,
    AncestorIndex,
    DirectIndex,
    SkipIndex,
)
from .indexer import build_index
from .query import QueryResult, explain_kth_parent, kth_parent

__all__ = [
    "BACKEND_DIRECT",
    "BACKEND_SKIP",
    "DEFAULT_INDEX_BACKEND",
    "DEFAULT_STRIDE",
    "NO_PARENT",
    "AncestorIndex",
    "DirectIndex",
    "QueryResult",
    "SkipIndex",
    "build_index",
    "create_query_backend",
    "explain_kth_parent",
    "kth_parent",
    "register_query_backend",
]
