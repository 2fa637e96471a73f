"""Alembic revisions must produce the schema the models describe."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from lutorlandia.config import get_settings
from lutorlandia.database import get_table_names
from lutorlandia.models import Base

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_upgrade_matches_models(tmp_path, monkeypatch):
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    get_settings.cache_clear()
    try:
        command.upgrade(Config(str(PROJECT_ROOT / "alembic.ini")), "head")
    finally:
        get_settings.cache_clear()

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert set(Base.metadata.tables) | {"alembic_version"} == set(get_table_names(engine))
        inspector = inspect(engine)
        for name, table in Base.metadata.tables.items():
            columns = {column["name"] for column in inspector.get_columns(name)}
            assert columns == {column.name for column in table.columns}, name
    finally:
        engine.dispose()
