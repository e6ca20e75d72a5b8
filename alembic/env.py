"""Alembic environment for the users/payments schema; the URL comes from Settings."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from app.core.config import get_settings
from app.models import Base, Payment, User  # noqa: F401  (registers both tables)

config = context.config
if config.config_file_name is not None and config.has_section("formatters"):
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _migration_options(url: str) -> dict:
    # SQLite cannot ALTER constraints in place; batch mode rebuilds the table instead.
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_offline(url: str) -> None:
    """Emit SQL to stdout without a connection (alembic upgrade --sql)."""
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_migration_options(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    engine = create_engine(url, poolclass=NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, **_migration_options(url))
        with context.begin_transaction():
            context.run_migrations()


database_url = get_settings().DATABASE_URL
if context.is_offline_mode():
    run_offline(database_url)
else:
    run_online(database_url)
