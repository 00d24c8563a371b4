from .session import AncestorIndexSession
from .policy import IndexPolicy

__all__ = ["AncestorIndexSession", "IndexPolicy"]
