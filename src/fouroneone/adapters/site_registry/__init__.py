"""Site registry adapters."""

from .memory import InMemorySiteRegistry
from .sql import SqlAlchemySiteRegistry

__all__ = ["InMemorySiteRegistry", "SqlAlchemySiteRegistry"]
