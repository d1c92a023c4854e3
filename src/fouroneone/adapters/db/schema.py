"""Tables for the database-backed config store and site registry.

| Table  | Key          | Purpose                                  |
|--------|--------------|------------------------------------------|
| config | key          | instance-wide settings (e.g. timezone)   |
| sites  | site_id      | sites served by this instance, by host   |
"""

from __future__ import annotations

from sqlalchemy import Column, Identity, Integer, String, Table, Text

from fouroneone.adapters.db.metadata import metadata

__all__ = ["config_table", "sites_table"]

config_table = Table(
    "config",
    metadata,
    Column("key", String(128), primary_key=True, comment="Setting name."),
    Column("value", Text, nullable=False, comment="Setting value."),
)

sites_table = Table(
    "sites",
    metadata,
    Column(
        "site_id",
        Integer,
        Identity(start=1),
        primary_key=True,
        comment="Surrogate key.",
    ),
    Column("name", String(255), nullable=False, comment="Display name."),
    Column(
        "host",
        String(255),
        nullable=False,
        unique=True,
        comment="Lowercase host name without port.",
    ),
)
