"""SQLAlchemy-backed ConfigStore reading the ``config`` table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from fouroneone.adapters.db.schema import config_table
from fouroneone.interfaces.config_store import ConfigStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlAlchemyConfigStore(ConfigStore):
    """Config store persisted in the ``config`` table.

    Every call runs in its own short transaction; nothing is cached, so a
    value changed by another process is visible on the next read.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, key: str, default: str | None = None) -> str | None:
        stmt = select(config_table.c.value).where(config_table.c.key == key)
        with self._engine.connect() as conn:
            value = conn.execute(stmt).scalar_one_or_none()
        return default if value is None else value

    def set(self, key: str, value: str) -> None:
        with self._engine.begin() as conn:
            if conn.dialect.name == "sqlite":  # pylint: disable=magic-value-comparison
                stmt = sqlite_insert(config_table).values(key=key, value=value)
                conn.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[config_table.c.key],
                        set_={"value": stmt.excluded.value},
                    )
                )
            else:
                result = conn.execute(
                    update(config_table)
                    .where(config_table.c.key == key)
                    .values(value=value)
                )
                if result.rowcount == 0:
                    conn.execute(config_table.insert().values(key=key, value=value))
        logger.debug("Config %s updated", key)

    def items(self) -> dict[str, str]:
        stmt = select(config_table.c.key, config_table.c.value).order_by(
            config_table.c.key
        )
        with self._engine.connect() as conn:
            return {row.key: row.value for row in conn.execute(stmt)}
