"""Tests for DatabaseManager against real SQLite files."""

import sqlite3

import pytest

from context import RequestContext
from db.manager import DatabaseManager
from errors import StoreUnavailable
from services.base import Services


class TestDatabaseManager:
    """Tests for DatabaseManager.connect error handling."""

    def test_connect_creates_database_file(self, test_config):
        manager = DatabaseManager(test_config)

        with manager.connect() as conn:
            conn.execute("SELECT 1")

        assert test_config.db_path.exists()

    def test_unopenable_path_raises_store_unavailable(self, tmp_path, test_config):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        test_config.db_data_dir = blocker / "db"

        with pytest.raises(StoreUnavailable):
            with DatabaseManager(test_config).connect():
                pass

    def test_missing_schema_raises_store_unavailable(self, test_config):
        services = Services(test_config)

        with pytest.raises(StoreUnavailable):
            services.reports.summary(RequestContext(user_id=1))

    def test_migrations_apply_to_file_database(self, test_config):
        from cli.migrate import cmd_apply

        manager = DatabaseManager(test_config)
        cmd_apply(None, manager)
        services = Services(test_config, db_manager=manager)

        user = services.users.create("alice")
        summary = services.reports.summary(RequestContext(user_id=user.id))

        assert summary.balance == 0

    def test_corrupt_database_file_raises_store_unavailable(self, test_config):
        test_config.db_path.parent.mkdir(parents=True, exist_ok=True)
        test_config.db_path.write_bytes(b"x" * 512)
        services = Services(test_config)

        with pytest.raises(StoreUnavailable):
            services.reports.summary(RequestContext(user_id=1))

    def test_integrity_error_passes_through(self, test_config):
        manager = DatabaseManager(test_config)

        with pytest.raises(sqlite3.IntegrityError):
            with manager.connect() as conn:
                conn.execute("CREATE TABLE t (name TEXT UNIQUE)")
                conn.execute("INSERT INTO t VALUES ('a')")
                conn.execute("INSERT INTO t VALUES ('a')")
