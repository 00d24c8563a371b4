"""Index structures produced by the indexer and read by the query engine."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Union

from ..exceptions import InvalidStrideError
from ..tree import NodeId

DEFAULT_STRIDE = 10


class Sentinel(Enum):
    """Markers that live outside the identifier domain."""

    NO_PARENT = "no_parent"

    def __repr__(self) -> str:
        return self.name


NO_PARENT = Sentinel.NO_PARENT

ParentRef = Union[NodeId, Sentinel]


def validate_stride(stride: object) -> int:
    """Return `stride` if it is an int >= 1, else raise InvalidStrideError."""
    if isinstance(stride, bool) or not isinstance(stride, int) or stride < 1:
        raise InvalidStrideError(stride)
    return stride


class DirectIndex(Mapping):
    """Read-only map of node id -> parent id (`NO_PARENT` for the root)."""

    __slots__ = ("_parents",)

    def __init__(self, parents: Mapping[NodeId, ParentRef]):
        self._parents = MappingProxyType(dict(parents))

    def __getitem__(self, node_id: NodeId) -> ParentRef:
        return self._parents[node_id]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._parents)

    def __len__(self) -> int:
        return len(self._parents)

    def __repr__(self) -> str:
        return f"DirectIndex({len(self)} nodes)"

    def is_root(self, node_id: NodeId) -> bool:
        return self._parents.get(node_id, None) is NO_PARENT


class SkipIndex(Mapping):
    """Read-only map of sampled node id -> ancestor `stride` levels above.

    The root is seeded with `NO_PARENT`. Every other key is a node whose
    path-local countdown reached zero while indexing.
    """

    __slots__ = ("_jumps", "_stride")

    def __init__(self, jumps: Mapping[NodeId, ParentRef], stride: int = DEFAULT_STRIDE):
        self._stride = validate_stride(stride)
        self._jumps = MappingProxyType(dict(jumps))

    @property
    def stride(self) -> int:
        """Sampling increment this index was built with."""
        return self._stride

    def __getitem__(self, node_id: NodeId) -> ParentRef:
        return self._jumps[node_id]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._jumps)

    def __len__(self) -> int:
        return len(self._jumps)

    def __repr__(self) -> str:
        return f"SkipIndex({len(self)} entries, stride={self._stride})"


class AncestorIndex(NamedTuple):
    """The (DirectIndex, SkipIndex) pair returned by `build_index`."""

    direct: DirectIndex
    skip: SkipIndex

    @property
    def stride(self) -> int:
        return self.skip.stride
