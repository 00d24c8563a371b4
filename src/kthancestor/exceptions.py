"""Exception hierarchy for kthancestor.

Query misses are not exceptional and never raise; see
`kthancestor.index.query.QueryResult` for the reason a lookup came back empty.
"""
from __future__ import annotations


class KthAncestorError(Exception):
    """Base class for all kthancestor errors."""
    pass


class InvalidStrideError(KthAncestorError, ValueError):
    """Raised when a skip-index stride is not a positive integer."""

    def __init__(self, stride: object):
        self.stride = stride
        super().__init__(f"stride must be an integer >= 1, got {stride!r}")


class TreeLiteralError(KthAncestorError, ValueError):
    """Raised when a tree literal cannot be turned into a TreeNode."""
    pass
