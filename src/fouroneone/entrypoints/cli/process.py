"""``fouroneone exec``: run a program and exit with its status."""

from __future__ import annotations

import click

from fouroneone.adapters.process_runner import run
from fouroneone.interfaces.process_runner import inherited_environment

from .helpers import error

#: Exit status used when the program could not be run or did not exit normally.
EXIT_NOT_RUN = 127


def parse_env_pairs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Click callback turning repeated NAME=VALUE options into a dict."""
    env: dict[str, str] = {}
    for item in value:
        name, sep, val = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=VALUE, got {item!r}")
        env[name] = val
    return env


@click.command(
    "exec",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--env",
    "-e",
    "env",
    multiple=True,
    callback=parse_env_pairs,
    help="Set NAME=VALUE in the child environment. Repeatable.",
)
@click.option(
    "--inherit-env/--empty-env",
    default=False,
    show_default=True,
    help="Start from the current environment instead of an empty one.",
)
@click.argument("executable")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def exec_command(
    ctx: click.Context,
    env: dict[str, str],
    inherit_env: bool,
    executable: str,
    arguments: tuple[str, ...],
) -> None:
    """Run EXECUTABLE with ARGUMENTS and exit with its exit code.

    \b
    Exits with 127 if the program could not be started or was killed by a
    signal. Options after EXECUTABLE are passed to the program untouched.
    """
    if not executable:
        raise click.BadParameter("must not be empty", param_hint="EXECUTABLE")
    environment = inherited_environment(**env) if inherit_env else env
    code = run(executable, arguments, environment)
    if code is None:
        error(f"{executable} could not be run or did not exit normally")
        ctx.exit(EXIT_NOT_RUN)
    ctx.exit(code)
