"""``fouroneone config`` and ``fouroneone timezone``: database-backed settings."""

from __future__ import annotations

import click
import click_extra as clickx

from fouroneone.adapters.config_store import SqlAlchemyConfigStore
from fouroneone.errors import PromptAbortedError
from fouroneone.timezones import (
    TIMEZONE_CONFIG_KEY,
    Session,
    User,
    get_timezone,
    validate_timezone,
)
from fouroneone.utils.prompt import prompt

from .db import get_engine
from .helpers import error, success


@click.group(cls=clickx.ExtraGroup)
def config() -> None:
    """Read and write instance settings stored in the database."""


@config.command("get")
@click.argument("key", required=False)
def get_(key: str | None) -> None:
    """Print the value of KEY, or every KEY=VALUE pair when KEY is omitted."""
    store = SqlAlchemyConfigStore(get_engine())
    if key is None:
        for name, value in store.items().items():
            click.echo(f"{name}={value}")
        return
    if (value := store.get(key)) is None:
        raise click.ClickException(f"{key} is not set.")
    click.echo(value)


@config.command("set")
@click.argument("key")
@click.argument("value", required=False)
@click.pass_context
def set_(ctx: click.Context, key: str, value: str | None) -> None:
    """Store VALUE under KEY, prompting for VALUE when omitted."""
    if value is None:
        try:
            value = prompt(
                key,
                input_stream=click.get_text_stream("stdin"),
                output_stream=click.get_text_stream("stderr"),
            )
        except PromptAbortedError as e:
            error(str(e))
            ctx.exit(1)
    if key == TIMEZONE_CONFIG_KEY and validate_timezone(value, default="") != value:
        raise click.BadParameter(f"Unknown timezone: {value}", param_hint="VALUE")
    SqlAlchemyConfigStore(get_engine()).set(key, value)
    success(f"{key} updated")


@click.command("timezone")
@click.option("--user", "user_name", default=None, help="Resolve as this user.")
@click.option(
    "--user-timezone",
    default=None,
    help="The user's own timezone (required with --user).",
)
def timezone(user_name: str | None, user_timezone: str | None) -> None:
    """Print the timezone dates are displayed in.

    Without --user this is the instance default from the database (UTC when
    unset or invalid).
    """
    if (user_name is None) != (user_timezone is None):
        raise click.UsageError("--user and --user-timezone must be given together.")
    user = User(user_name, user_timezone) if user_name and user_timezone else None
    session = Session(config=SqlAlchemyConfigStore(get_engine()), user=user)
    click.echo(get_timezone(session))
