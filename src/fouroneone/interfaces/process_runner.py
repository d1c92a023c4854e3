"""Interface for running external programs."""

from __future__ import annotations

import abc
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

# pylint: disable=too-few-public-methods

#: Exit code (0-255) of a normally terminated child, or None when the child
#: could not be started, could not be waited for, or was killed by a signal.
ProcessResult: TypeAlias = int | None


@dataclass(frozen=True, slots=True)
class ProcessSpec:
    """What to run: executable, arguments and environment.

    Conventions:
      - `arguments` are the arguments after the program name; the child sees
        ``argv == [executable_path, *arguments]``.
      - `environment` is the complete child environment. An empty mapping
        means an empty environment, not the caller's (see
        `inherited_environment`).
      - Both are copied on construction, so later changes to the caller's
        list or dict do not leak into a running invocation.
      - `executable_path` must be non-empty; `ValueError` otherwise.
    """

    executable_path: str
    arguments: tuple[str, ...] = ()
    environment: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "executable_path", os.fspath(self.executable_path))
        if not self.executable_path:
            raise ValueError("executable_path must not be empty")
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(
            self, "environment", MappingProxyType(dict(self.environment))
        )

    @property
    def argv(self) -> list[str]:
        """Argument vector handed to the child, program name first."""
        return [self.executable_path, *self.arguments]


def inherited_environment(**overrides: str) -> dict[str, str]:
    """Return a copy of the caller's environment with `overrides` applied."""
    env = dict(os.environ)
    env.update(overrides)
    return env


class ProcessRunner(abc.ABC):
    """Contract for running an external program to completion."""

    @abc.abstractmethod
    def run(self, spec: ProcessSpec) -> ProcessResult:
        """Run `spec` and block until the child terminates.

        Args:
            spec: The program to run.

        Returns:
            The child's exit code, or None if it could not be started, could
            not be waited for, or did not exit normally.
        """

    def __call__(
        self,
        executable_path: str,
        arguments: Sequence[str] = (),
        environment: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        return self.run(
            ProcessSpec(executable_path, tuple(arguments), environment or {})
        )
