from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

from ..index.backend import DEFAULT_INDEX_BACKEND
from ..index.data_structures import DEFAULT_STRIDE, validate_stride


@dataclass
class IndexPolicy:
    """Build and query settings for an AncestorIndexSession."""

    stride: int = DEFAULT_STRIDE
    backend: str = DEFAULT_INDEX_BACKEND

    def __post_init__(self) -> None:
        validate_stride(self.stride)

    @classmethod
    def recommended(cls, height: int) -> "IndexPolicy":
        """Stride near sqrt(height) for a tree of the given height.

        A query then costs at most about `height / stride` jumps plus `2 * stride`
        single steps.
        """
        return cls(stride=max(1, isqrt(max(0, int(height)))), backend=DEFAULT_INDEX_BACKEND)

    def as_runtime_dict(self) -> dict[str, int | str]:
        return {
            "stride": int(self.stride),
            "backend": self.backend,
        }
