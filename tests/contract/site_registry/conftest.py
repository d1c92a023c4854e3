"""Pytest fixtures for SiteRegistry contract tests.

Provided fixtures
-----------------
- **registry**: Parametrized factory that returns an empty `SiteRegistry`
  per test, for the `"memory"` and `"sqlite"` implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fouroneone.adapters.site_registry import (
    InMemorySiteRegistry,
    SqlAlchemySiteRegistry,
)

if TYPE_CHECKING:
    from fouroneone.interfaces.site_registry import SiteRegistry


@pytest.fixture(params=["memory", "sqlite"])
def registry(request: pytest.FixtureRequest) -> SiteRegistry:
    """Return a fresh, empty site registry for the requested backend."""
    match request.param:
        case "memory":
            return InMemorySiteRegistry()
        case "sqlite":
            return SqlAlchemySiteRegistry(
                request.getfixturevalue("sqlite_engine_file")
            )
        case _:
            raise ValueError(f"unknown registry type: {request.param}")
