from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, create_engine, Session
from pathlib import Path
from typing import Any
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False, enforce_foreign_keys: bool = True, **kwargs: Any) -> Engine:
    """
    Create the database engine (the application's store handle).

    SQLite connections enforce foreign keys by default so every planet must
    reference an existing image and every astronaut an existing planet, as on
    PostgreSQL. Extra keyword arguments go to `create_engine` (e.g. poolclass).
    """
    logger.info(f"Connecting to database: {database_url[:20]}...")  # Log partial URL

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            **kwargs,
        )
        db_file = make_url(database_url).database
        if db_file and db_file != ":memory:":
            # Parent directory is created on first connect, not at import
            @event.listens_for(engine, "do_connect")
            def _create_parent_dir(dialect, connection_record, cargs, cparams):
                Path(db_file).parent.mkdir(parents=True, exist_ok=True)
        if enforce_foreign_keys:
            @event.listens_for(engine, "connect")
            def _enable_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()
        return engine

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
        **kwargs,
    )


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    # Register table models with SQLModel metadata
    from spaceship import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database schema initialized")


def get_session(request: Request):
    """Dependency for getting database sessions bound to the application's engine."""
    with Session(request.app.state.engine) as session:
        yield session
