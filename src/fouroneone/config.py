"""Configuration utilities for fouroneone.

This module centralizes the environment-backed settings and the programmatic
Alembic configuration. Settings are read once by the caller and passed along
explicitly; nothing here keeps process-wide state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

from .errors import FouroneoneError

DB_URL_ENV = "FOURONEONE_DB_URL"
ENVIRONMENT_ENV = "FOURONEONE_ENV"
TESTING_ENV = "FOURONEONE_TESTING"
TIMEZONE_ENV = "FOURONEONE_TIMEZONE"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

_TRUTHY = {"1", "true", "yes", "on"}


class DatabaseUrlNotSetError(FouroneoneError):
    """Raised when the FOURONEONE_DB_URL environment variable is not set."""


class Environment(str, Enum):
    """Deployment environment the application runs in."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TESTING = "testing"

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Parse an environment name, defaulting to production.

        Unknown or empty values map to `PRODUCTION` so a typo never turns on
        development behavior.
        """
        raw = (value or "").strip().lower()
        for member in cls:
            if member.value == raw:
                return member
        return cls.PRODUCTION


@dataclass(frozen=True, slots=True)
class Settings:
    """Explicit application settings.

    Conventions:
      - `environment` selects development/testing behavior.
      - `testing` is also set by `FOURONEONE_TESTING` independently of
        `environment`, so test runners can flag themselves without changing it.
      - `default_timezone` is only a fallback; the database-backed config
        store takes precedence (see `fouroneone.timezones`).
    """

    environment: Environment = Environment.PRODUCTION
    testing: bool = False
    db_url: str | None = None
    default_timezone: str = "UTC"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to `os.environ`.

        Returns:
            A populated `Settings` instance.
        """
        env = os.environ if environ is None else environ
        environment = Environment.from_string(env.get(ENVIRONMENT_ENV))
        testing = (
            env.get(TESTING_ENV, "").strip().lower() in _TRUTHY
            or environment is Environment.TESTING
        )
        return cls(
            environment=environment,
            testing=testing,
            db_url=env.get(DB_URL_ENV) or None,
            default_timezone=env.get(TIMEZONE_ENV) or "UTC",
        )


def is_development(settings: Settings) -> bool:
    """Return whether we're running in a development environment."""
    return settings.environment is Environment.DEVELOPMENT


def is_testing(settings: Settings) -> bool:
    """Return whether we're running in a test environment."""
    return settings.testing


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `FOURONEONE_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `FOURONEONE_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for fouroneone's migrations.

    Args:
        db_url: SQLAlchemy database URL. Can be `None` only in contexts where
            Alembic won't need to connect to the DB (e.g. `heads`).
        stdout: Text stream Alembic will write status lines to.

    Returns:
        An `alembic.config.Config` pointing to the packaged migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("fouroneone.adapters.db.alembic")),
    )
    return cfg
