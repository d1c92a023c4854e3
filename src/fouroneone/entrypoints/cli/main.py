"""fouroneone CLI entry point.

Defines the top-level ``fouroneone`` command (via Click-Extra), configures
logging once for every subcommand, and registers the subcommands.

Available commands
- ``fouroneone exec``     run a program and exit with its exit code.
- ``fouroneone dates``    parse/format timestamps.
- ``fouroneone config``   read/write database-backed settings.
- ``fouroneone timezone`` show the resolved display timezone.
- ``fouroneone site``     manage the site registry.
- ``fouroneone db``       forward-only schema management.

Examples
    $ fouroneone --version
    $ fouroneone exec /bin/sh -c 'exit 3'; echo $?
    $ fouroneone dates format --timezone Europe/Paris 1700000000
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from fouroneone import __version__
from fouroneone.config import Settings
from fouroneone.logging import config_console_handler, config_flight_recorder, log_startup

from .dates import dates as dates_group
from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .process import exec_command
from .settings import config as config_group
from .settings import timezone as timezone_command
from .sites import site as site_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """fouroneone command-line interface.

    Helpers behind the 411 alerting service: run external programs, manage
    the sites and settings stored in the database, and parse or format
    timestamps the same way the web interface does.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink("https://github.com/etsy/411"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("fouroneone", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="FOURONEONE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING or ERROR occurs (or on exit with "
        "--force-flush). Console verbosity is unchanged."
    ),
    default=True,
    envvar="FOURONEONE_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit even without errors.",
    default=False,
    envvar="FOURONEONE_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable, or a comma/space list in "
        "FOURONEONE_LOGGER_LEVELS."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="FOURONEONE_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def fouroneone(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """fouroneone command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, flush_on_close=force_flush)
        )

    # Root captures everything; handlers filter.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    settings = Settings.from_env()
    ctx.obj = settings

    log_startup(
        logger,
        app_version=__version__,
        settings=settings,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


fouroneone.add_command(exec_command)
fouroneone.add_command(dates_group)
fouroneone.add_command(config_group)
fouroneone.add_command(timezone_command)
fouroneone.add_command(site_group)
fouroneone.add_command(db_group)
