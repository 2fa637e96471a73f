"""Database connection and session management.

This module builds SQLAlchemy engines and session factories from
``Settings`` and exposes the health check used to pick a storage backend.
"""

import logging
from typing import Any

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lutorlandia.config import Settings
from lutorlandia.models import Base

logger = logging.getLogger(__name__)


def _configure_sqlite(
    dbapi_connection: Any, connection_record: Any  # noqa: ARG001
) -> None:
    """Enable foreign keys on every SQLite connection.

    Args:
        dbapi_connection: The DBAPI connection
        connection_record: Connection record (required by SQLAlchemy event API)
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """Create and configure the database engine.

    Args:
        settings: Settings carrying a non-empty ``database_url``

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ValueError: If no database URL is configured
    """
    url = settings.database_url
    if not url:
        raise ValueError("database_url is not configured")

    if url.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        engine = create_engine(url, echo=settings.database_echo, **options)
        event.listen(engine, "connect", _configure_sqlite)
    else:
        # Non-SQLite (e.g., MySQL, PostgreSQL): honor pool settings
        engine = create_engine(
            url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle,
            pool_timeout=settings.database_pool_timeout,
        )

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Build the session factory used by ``SqlStorage``."""

    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create any missing tables.

    Note:
        Existing tables are left alone. Schema changes go through the
        alembic revisions under ``alembic/versions``.
    """
    Base.metadata.create_all(bind=engine)


def check_database_health(engine: Engine) -> bool:
    """Check if the database is reachable.

    Returns:
        bool: True if ``SELECT 1`` succeeds, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("database health check failed: %s", exc)
        return False
    return True


def get_table_names(engine: Engine) -> list[str]:
    """Get list of all table names in the database."""

    return inspect(engine).get_table_names()
