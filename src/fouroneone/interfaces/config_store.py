"""Interface for the database-backed key/value configuration store."""

from __future__ import annotations

import abc


class ConfigStore(abc.ABC):
    """Contract for a string key/value configuration store.

    Missing keys read as None through `get` and as `KeyError` through
    subscription, like a dict.
    """

    @abc.abstractmethod
    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value stored under `key`, or `default` if unset."""

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abc.abstractmethod
    def items(self) -> dict[str, str]:
        """Return all stored key/value pairs."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __getitem__(self, key: object) -> str:
        if not isinstance(key, str) or (value := self.get(key)) is None:
            raise KeyError(key)
        return value
