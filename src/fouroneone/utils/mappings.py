"""Key access with defaults for mappings and sequences."""

from collections.abc import Container, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def exists(container: object, key: Any) -> bool:
    """Return whether `container` holds `key`.

    Args:
        container: A mapping, a list/tuple, or any other `Container`.
        key: The key (or index, for sequences) to look for.

    Returns:
        bool: True if the key exists, False otherwise (including when
        `container` is not a container at all).

    Note:
        Sequences are checked by index, not by value: ``exists(["a"], 0)`` is
        True and ``exists(["a"], "a")`` is False. Negative indexes do not count.
        Strings and bytes are treated as plain values, not sequences.
    """
    if isinstance(container, Mapping):
        return key in container
    if isinstance(container, (str, bytes, bytearray)):
        return False
    if isinstance(container, Sequence):
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return 0 <= key < len(container)
    if isinstance(container, Container):
        return key in container
    return False


def get(container: object, key: Any, default: T | None = None) -> Any | T | None:
    """Return ``container[key]`` if the key exists, otherwise `default`.

    A key that exists with a value of None returns None, not `default`.
    """
    if exists(container, key):
        return container[key]  # type: ignore[index]
    return default
