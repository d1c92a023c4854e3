"""Interface for the site registry."""

from __future__ import annotations

import abc
from dataclasses import dataclass

# --- Read Model ---


@dataclass(frozen=True, slots=True)
class Site:
    """A 411 site as served to browsers.

    Conventions:
      - `host` is canonical lowercase without a port (e.g. "alerts.example.com").
      - `name` is the human-readable site title.
    """

    name: str
    host: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "host", normalize_host(self.host))


def normalize_host(host: str) -> str:
    """Lowercase `host` and strip any ``:port`` suffix."""
    host = host.strip().lower()
    if host.startswith("["):  # IPv6 literal, e.g. "[::1]:8080"
        return host.split("]", 1)[0] + "]"
    return host.split(":", 1)[0]


# --- Interface ---


class SiteRegistry(abc.ABC):
    """Interface for looking up and registering sites."""

    @abc.abstractmethod
    def get_current(self, host: str) -> Site | None:
        """Return the site serving `host`, or None if no site matches.

        Note:
            `host` lookup is case-insensitive and ignores a ``:port`` suffix.
        """

    @abc.abstractmethod
    def add(self, site: Site) -> None:
        """Register `site`.

        Raises:
            DuplicateSiteError: If a site already serves `site.host`.
        """

    @abc.abstractmethod
    def list_sites(self) -> list[Site]:
        """Return all registered sites ordered by host."""
