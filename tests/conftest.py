"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`lutorlandia` package without requiring an editable install in CI, and
provides a ``storage`` fixture that runs each test against both backends.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lutorlandia.config import Settings  # noqa: E402
from lutorlandia.database import create_db_engine, create_session_factory, init_db  # noqa: E402
from lutorlandia.repository import MemoryStorage, SqlStorage  # noqa: E402


def make_sql_storage() -> SqlStorage:
    """Fresh SqlStorage on a private in-memory SQLite database."""
    engine = create_db_engine(Settings(database_url="sqlite://", _env_file=None))
    init_db(engine)
    return SqlStorage(create_session_factory(engine))


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Each storage contract test runs once per backend."""
    backend = MemoryStorage() if request.param == "memory" else make_sql_storage()
    try:
        yield backend
    finally:
        backend.close()
