"""POSIX process runner.

Runs a child with `os.posix_spawn` and waits for that pid with
`os.waitpid`. The child shares the caller's stdin, stdout and stderr;
nothing is captured.

Outcomes:

| Child                          | Result          |
|--------------------------------|-----------------|
| exited normally with code c    | c (0..255)      |
| could not be found or started  | None            |
| could not be waited for        | None            |
| terminated by a signal         | None            |

A failed wait (e.g. ``ECHILD`` when the caller ignores ``SIGCHLD``) is a
failure, never an exit code.
"""

from __future__ import annotations

import logging
import os
import shutil
import signal
from collections.abc import Mapping, Sequence

from fouroneone.interfaces.process_runner import (
    ProcessResult,
    ProcessRunner,
    ProcessSpec,
)

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


def resolve_executable(name: str, environment: Mapping[str, str]) -> str | None:
    """Return the path to spawn for `name`, or None if it cannot be found.

    Names containing a slash are used as given. Bare names are searched on
    the child environment's ``PATH``, or `os.defpath` when it has none.
    """
    if os.sep in name:
        return name
    return shutil.which(name, path=environment.get("PATH", os.defpath))


class PosixProcessRunner(ProcessRunner):
    """Blocking runner built on `os.posix_spawn` and `os.waitpid`.

    Only the calling thread blocks while the child runs. Each call waits for
    its own pid, so one instance can be shared between threads.
    """

    def run(self, spec: ProcessSpec) -> ProcessResult:
        path = resolve_executable(spec.executable_path, spec.environment)
        if path is None:
            logger.debug("%s not found on PATH", spec.executable_path)
            return None

        try:
            pid = os.posix_spawn(path, spec.argv, dict(spec.environment))
        except OSError as e:
            logger.debug("Could not start %s: %s", spec.executable_path, e)
            return None

        try:
            _, status = os.waitpid(pid, 0)
        except ChildProcessError as e:
            logger.debug("Could not wait for pid %d: %s", pid, e)
            return None

        if os.WIFSIGNALED(status):
            signum = os.WTERMSIG(status)
            logger.debug(
                "pid %d killed by signal %d (%s)",
                pid,
                signum,
                signal.strsignal(signum) or "unknown",
            )
            return None
        if not os.WIFEXITED(status):  # pragma: no cover
            logger.debug("pid %d ended abnormally (status %#x)", pid, status)
            return None

        code = os.WEXITSTATUS(status)
        logger.debug("pid %d exited with code %d", pid, code)
        return code


_default_runner = PosixProcessRunner()


def run(
    executable_path: str,
    arguments: Sequence[str] = (),
    environment: Mapping[str, str] | None = None,
) -> ProcessResult:
    """Run an executable to completion and return its exit code.

    Args:
        executable_path: Path to the executable. A bare name is searched on
            the child environment's ``PATH``, or `os.defpath` when it has none.
        arguments: Arguments after the program name.
        environment: Complete child environment. None or an empty mapping
            runs the child with an empty environment; pass
            `inherited_environment()` to inherit the caller's.

    Returns:
        The exit code, or None if the child could not be started, could not
        be waited for, or did not exit normally.

    Example:
        ```py
        >>> run("/bin/sh", ["-c", "exit 42"], {})
        42
        ```
    """
    return _default_runner(executable_path, arguments, environment)
