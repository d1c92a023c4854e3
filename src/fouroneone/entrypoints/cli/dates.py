"""``fouroneone dates``: parse and format timestamps from the shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from fouroneone import dates as dates_lib
from fouroneone.timezones import validate_timezone

if TYPE_CHECKING:
    from fouroneone.config import Settings

FORMATTERS = {
    "date": dates_lib.format_date,
    "time": dates_lib.format_time,
    "datetime": dates_lib.format_datetime,
}

TIMEZONE_HELP = "IANA timezone. Defaults to FOURONEONE_TIMEZONE, then UTC."


def _resolve_timezone(settings: Settings, timezone: str | None) -> str:
    if timezone is None:
        return validate_timezone(settings.default_timezone)
    if validate_timezone(timezone, default="") != timezone:
        raise click.BadParameter(
            f"Unknown timezone: {timezone}", param_hint="--timezone"
        )
    return timezone


@click.group(cls=clickx.ExtraGroup)
def dates() -> None:
    """Date parsing and formatting."""


@dates.command("parse")
@click.option(
    "--format",
    "-f",
    "fmt",
    default=None,
    help="'#' for milliseconds, '@' for unix seconds, a strptime format, "
    "or omit for free-form dates.",
)
@click.option("--timezone", "-z", default=None, help=TIMEZONE_HELP)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def parse(
    settings: Settings, fmt: str | None, timezone: str | None, values: tuple[str, ...]
) -> None:
    """Print each VALUE as a unix timestamp in milliseconds, one per line."""
    tz = _resolve_timezone(settings, timezone)
    for ms in dates_lib.parse_dates(fmt, values, timezone=tz):
        click.echo(ms)


@dates.command("format")
@click.option(
    "--part",
    type=click.Choice(sorted(FORMATTERS)),
    default="datetime",
    show_default=True,
    help="Which part of the timestamp to print.",
)
@click.option("--timezone", "-z", default=None, help=TIMEZONE_HELP)
@click.argument("timestamps", nargs=-1, type=float, required=True)
@click.pass_obj
def format_(
    settings: Settings,
    part: str,
    timezone: str | None,
    timestamps: tuple[float, ...],
) -> None:
    """Print each unix TIMESTAMP (seconds) in a consistent format."""
    tz = _resolve_timezone(settings, timezone)
    formatter = FORMATTERS[part]
    for ts in timestamps:
        click.echo(formatter(ts, tz))
