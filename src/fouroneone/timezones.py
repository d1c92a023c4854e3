"""Timezone resolution: logged-in user first, then database-backed config.

The user and the config store arrive in a `Session` the caller builds per
request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from zoneinfo import available_timezones

from fouroneone.interfaces.config_store import ConfigStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"
TIMEZONE_CONFIG_KEY = "timezone"


@dataclass(frozen=True, slots=True)
class User:
    """The logged-in user, as far as timezone resolution is concerned."""

    name: str
    timezone: str


@dataclass(frozen=True, slots=True)
class Session:
    """Per-request context: who is logged in and where config lives."""

    config: ConfigStore
    user: User | None = None


@cache
def _known_timezones() -> frozenset[str]:
    return frozenset(available_timezones())


def validate_timezone(timezone: str | None, default: str = DEFAULT_TIMEZONE) -> str:
    """Return `timezone` if it is a known IANA identifier, else `default`."""
    if timezone is not None and timezone in _known_timezones():
        return timezone
    if timezone:
        logger.warning("Unknown timezone %r, using %s", timezone, default)
    return default


def get_default_timezone(config: ConfigStore, default: str = DEFAULT_TIMEZONE) -> str:
    """Return the validated ``timezone`` setting from `config`.

    Args:
        config: Database-backed config store.
        default: Used when the setting is missing or invalid.
    """
    return validate_timezone(config.get(TIMEZONE_CONFIG_KEY), default)


def get_timezone(session: Session) -> str:
    """Return the user's timezone when logged in, else the configured default.

    Note:
        The user's own timezone is returned as stored; it is validated when
        the user saves it, not here.
    """
    if session.user is not None:
        return session.user.timezone
    return get_default_timezone(session.config)
