"""SQLAlchemy-backed SiteRegistry reading the ``sites`` table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from fouroneone.adapters.db.schema import sites_table
from fouroneone.errors import DuplicateSiteError
from fouroneone.interfaces.site_registry import Site, SiteRegistry, normalize_host

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class SqlAlchemySiteRegistry(SiteRegistry):
    """Site registry persisted in the ``sites`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_current(self, host: str) -> Site | None:
        stmt = select(sites_table.c.name, sites_table.c.host).where(
            sites_table.c.host == normalize_host(host)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).one_or_none()
        return None if row is None else Site(name=row.name, host=row.host)

    def add(self, site: Site) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    sites_table.insert().values(name=site.name, host=site.host)
                )
        except IntegrityError as e:
            raise DuplicateSiteError(site.host) from e

    def list_sites(self) -> list[Site]:
        stmt = select(sites_table.c.name, sites_table.c.host).order_by(
            sites_table.c.host
        )
        with self._engine.connect() as conn:
            return [Site(name=row.name, host=row.host) for row in conn.execute(stmt)]
