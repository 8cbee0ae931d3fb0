"""
Alembic Environment Configuration

Runs catalog migrations against settings.database_url (the same URL the
application uses), never a URL hard-coded in alembic.ini.

COMMANDS:
- alembic upgrade head                           # Apply all migrations
- alembic downgrade -1                           # Roll back one migration
- alembic revision --autogenerate -m "message"   # Diff models against the DB
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from catalog.config import get_settings
from catalog.database import Base
from catalog.models import Author, Book, Genre  # noqa: F401 - needed for autogenerate

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Models imported above have registered their tables here
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Emit migration SQL without a database connection.

    Usage:
        alembic upgrade head --sql > migration.sql
    """
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # Don't pool connections for migrations
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            # SQLite cannot ALTER most constraints in place
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
