"""Backend contract and factory for k-th ancestor query strategies."""
from __future__ import annotations

from typing import Callable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .data_structures import AncestorIndex, NodeId


BACKEND_SKIP = "skip"
BACKEND_DIRECT = "direct"
DEFAULT_INDEX_BACKEND = BACKEND_SKIP


class AncestorQueryBackend(Protocol):
    """Protocol implemented by query backends."""

    backend_id: str

    def kth_parent(self, node_id: "NodeId", k: int, index: "AncestorIndex") -> Optional["NodeId"]: ...


_BACKEND_FACTORIES: dict[str, Callable[[], AncestorQueryBackend]] = {}


def register_query_backend(backend_id: str, factory: Callable[[], AncestorQueryBackend]) -> None:
    """Register a backend factory by its stable backend ID."""
    _BACKEND_FACTORIES[backend_id] = factory


def _ensure_builtin_backends() -> None:
    from .ancestry import DirectWalkBackend
    from .query import SkipJumpBackend

    # Earlier registrations under a built-in id win.
    _BACKEND_FACTORIES.setdefault(BACKEND_SKIP, SkipJumpBackend)
    _BACKEND_FACTORIES.setdefault(BACKEND_DIRECT, DirectWalkBackend)


def available_backends() -> list[str]:
    _ensure_builtin_backends()
    return sorted(_BACKEND_FACTORIES)


def create_query_backend(backend_id: str = DEFAULT_INDEX_BACKEND) -> AncestorQueryBackend:
    """Instantiate a backend by ID. Unknown values fall back to default."""
    _ensure_builtin_backends()
    factory = _BACKEND_FACTORIES.get(backend_id) or _BACKEND_FACTORIES[DEFAULT_INDEX_BACKEND]
    return factory()
