from alembic import context
from sqlmodel import SQLModel
from spaceship.core.config import normalize_database_url, settings
from spaceship.core.database import build_engine

# Import all models here so Alembic can detect them
from spaceship.models import Image, Planet, Astronaut  # noqa: F401

# this is the Alembic Config object
config = context.config

# A URL set on the Alembic config (tests, programmatic runs) wins over settings
if config.get_main_option("sqlalchemy.url"):
    db_url = normalize_database_url(config.get_main_option("sqlalchemy.url"))
else:
    db_url = settings.sqlalchemy_url
config.set_main_option("sqlalchemy.url", db_url)

# Import metadata for autogenerate
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = build_engine(db_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
