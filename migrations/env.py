from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from frameforge_contracts.core.config import configs
from frameforge_contracts.core.db import to_sync_url
from frameforge_contracts.models.orm import Base

# Import all models to register them with SQLAlchemy
from frameforge_contracts.models.orm import (  # noqa: F401
    NotificationLog,
    User,
    VideoJob,
)

config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url():
    # An explicit sqlalchemy.url (set by frameforge_contracts.migrate) wins
    # over the environment-derived one
    return to_sync_url(config.get_main_option("sqlalchemy.url") or configs.DATABASE_URI)


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        transaction_per_migration=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode.

    Each revision runs in its own transaction; PostgreSQL rolls back DDL, so
    a failing script leaves the schema at the previous revision.
    """
    connectable = create_engine(
        get_url(),
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            transaction_per_migration=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
