"""Config store adapters."""

from .memory import InMemoryConfigStore
from .sql import SqlAlchemyConfigStore

__all__ = ["InMemoryConfigStore", "SqlAlchemyConfigStore"]
