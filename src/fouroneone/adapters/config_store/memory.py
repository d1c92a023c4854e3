"""In-memory ConfigStore implementation for tests and one-off scripts."""

from collections.abc import Mapping

from fouroneone.interfaces.config_store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """Dict-backed config store."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def items(self) -> dict[str, str]:
        return dict(self._values)
