"""Packaged Alembic migration scripts (see `fouroneone.config.build_alembic_config`)."""
