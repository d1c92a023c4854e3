"""Pytest fixtures for ConfigStore contract tests.

Provided fixtures
-----------------
- **store**: Parametrized factory that returns an empty `ConfigStore` per
  test, for the `"memory"` and `"sqlite"` implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fouroneone.adapters.config_store import InMemoryConfigStore, SqlAlchemyConfigStore

if TYPE_CHECKING:
    from fouroneone.interfaces.config_store import ConfigStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest) -> ConfigStore:
    """Return a fresh, empty config store for the requested backend."""
    match request.param:
        case "memory":
            return InMemoryConfigStore()
        case "sqlite":
            return SqlAlchemyConfigStore(
                request.getfixturevalue("sqlite_engine_file")
            )
        case _:
            raise ValueError(f"unknown store type: {request.param}")
