"""``fouroneone site``: manage the sites served by this instance."""

from __future__ import annotations

import click
import click_extra as clickx

from fouroneone.adapters.site_registry import SqlAlchemySiteRegistry
from fouroneone.errors import DuplicateSiteError
from fouroneone.interfaces.site_registry import Site
from fouroneone.sites import get_host, get_site_name

from .db import get_engine
from .helpers import success


@click.group(cls=clickx.ExtraGroup)
def site() -> None:
    """Site registry commands."""


@site.command()
@click.argument("name")
@click.argument("host")
def add(name: str, host: str) -> None:
    """Register a site NAME served at HOST."""
    registry = SqlAlchemySiteRegistry(get_engine())
    new_site = Site(name=name, host=host)
    try:
        registry.add(new_site)
    except DuplicateSiteError as e:
        raise click.ClickException(str(e)) from e
    success(f"Registered {new_site.name} at {new_site.host}")


@site.command("list")
def list_() -> None:
    """List registered sites as HOST<TAB>NAME."""
    for entry in SqlAlchemySiteRegistry(get_engine()).list_sites():
        click.echo(f"{entry.host}\t{entry.name}")


@site.command()
@click.argument("host")
def show(host: str) -> None:
    """Show the site name and host displayed for requests to HOST.

    Unknown hosts show the instance defaults.
    """
    current = SqlAlchemySiteRegistry(get_engine()).get_current(host)
    click.echo(f"Name: {get_site_name(current)}")
    click.echo(f"Host: {get_host(current)}")
