"""Storage factory for the Lutorlandia backend.

Backend selection happens exactly once, before the API serves its first
request:

    storage = build_storage(settings)

An unset ``database_url`` selects ``MemoryStorage``. Otherwise the engine is
built and health-checked synchronously; a healthy database gets its missing tables
created and backs a ``SqlStorage``, an unreachable one is logged and
replaced by ``MemoryStorage`` for the life of the process.

For testing, construct ``MemoryStorage`` or ``SqlStorage`` directly.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from lutorlandia.config import Settings
from lutorlandia.database import (
    check_database_health,
    create_db_engine,
    create_session_factory,
    init_db,
)
from lutorlandia.interfaces import IStorage
from lutorlandia.repository import MemoryStorage, SqlStorage
from lutorlandia.security import hash_password

logger = logging.getLogger(__name__)


def create_memory_storage() -> MemoryStorage:
    """Create an empty in-memory store."""

    return MemoryStorage()


def create_sql_storage(settings: Settings) -> SqlStorage | None:
    """Create a SQL store if the configured database answers.

    Args:
        settings: Settings with ``database_url`` set

    Returns:
        SqlStorage bound to a fresh engine, or None when the database cannot
        be reached
    """
    try:
        engine = create_db_engine(settings)
    except (ImportError, SQLAlchemyError, ValueError) as exc:
        # Covers malformed URLs and missing DBAPI drivers
        logger.warning("could not configure database engine: %s", exc)
        return None

    if not check_database_health(engine):
        engine.dispose()
        return None

    init_db(engine)
    return SqlStorage(create_session_factory(engine))


def ensure_operator(storage: IStorage, settings: Settings) -> None:
    """Create the configured operator account if it does not exist yet."""

    if not settings.admin_password:
        logger.warning("admin_password not set; no operator account will be provisioned")
        return
    if storage.get_user_by_username(settings.admin_username) is not None:
        return
    storage.create_user(settings.admin_username, hash_password(settings.admin_password))
    logger.info("provisioned operator account %r", settings.admin_username)


def build_storage(settings: Settings) -> IStorage:
    """Select and initialize the storage backend for this process.

    Args:
        settings: Application settings

    Returns:
        The storage every request will use until shutdown
    """
    storage: IStorage
    if not settings.database_url:
        logger.info("no database_url configured; using in-memory storage")
        storage = create_memory_storage()
    else:
        sql_storage = create_sql_storage(settings)
        if sql_storage is None:
            logger.warning("database unreachable; falling back to in-memory storage")
            storage = create_memory_storage()
        else:
            logger.info("using SQL storage")
            storage = sql_storage

    ensure_operator(storage, settings)
    return storage
