"""Tests for one-time storage backend selection."""

import logging

from lutorlandia.config import Settings
from lutorlandia.factory import build_storage, ensure_operator
from lutorlandia.repository import MemoryStorage, SqlStorage
from lutorlandia.security import verify_password


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestBuildStorage:
    def test_no_database_url_uses_memory(self):
        storage = build_storage(_settings())
        assert isinstance(storage, MemoryStorage)
        assert storage.backend_name == "memory"

    def test_reachable_database_uses_sql(self, tmp_path):
        storage = build_storage(_settings(database_url=f"sqlite:///{tmp_path / 'site.db'}"))
        try:
            assert isinstance(storage, SqlStorage)
            assert storage.backend_name == "sql"
            # Tables were created on the way in
            assert storage.list_staff_members() == []
        finally:
            storage.close()

    def test_unreachable_database_falls_back_to_memory(self, tmp_path, caplog):
        url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'site.db'}"
        with caplog.at_level(logging.WARNING, logger="lutorlandia"):
            storage = build_storage(_settings(database_url=url))
        assert isinstance(storage, MemoryStorage)
        assert "falling back to in-memory storage" in caplog.text

    def test_unknown_driver_falls_back_to_memory(self):
        storage = build_storage(_settings(database_url="nosuchdb://user@host/site"))
        assert isinstance(storage, MemoryStorage)


class TestEnsureOperator:
    def test_provisions_configured_account(self):
        storage = build_storage(_settings(admin_password="hunter22"))
        user = storage.get_user_by_username("lutorlandia")
        assert user is not None
        assert verify_password("hunter22", user.password_hash)

    def test_is_idempotent(self):
        settings = _settings(admin_username="admin", admin_password="hunter22")
        storage = MemoryStorage()
        ensure_operator(storage, settings)
        first = storage.get_user_by_username("admin")
        ensure_operator(storage, settings)
        assert storage.get_user_by_username("admin") == first

    def test_skipped_without_password(self, caplog):
        storage = MemoryStorage()
        with caplog.at_level(logging.WARNING, logger="lutorlandia"):
            ensure_operator(storage, _settings())
        assert storage.get_user_by_username("lutorlandia") is None
        assert "admin_password not set" in caplog.text
