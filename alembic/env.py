from __future__ import annotations

from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import create_engine, pool

from storefront_catalog.infra.config import database_url
from storefront_catalog.infra.db.models.base import Base
from storefront_catalog.infra.db.models.item import ItemRow  # noqa: F401  (registers the items table)


if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

# Shared by offline and online runs
MIGRATION_OPTIONS: dict[str, Any] = {
    "target_metadata": Base.metadata,
    "compare_type": True,
}


def run_offline() -> None:
    """Emit SQL for the items schema without connecting (``alembic upgrade --sql``)."""
    context.configure(
        url=database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    """Apply migrations over a throwaway, unpooled connection."""
    engine = create_engine(database_url(), poolclass=pool.NullPool)

    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **MIGRATION_OPTIONS)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
