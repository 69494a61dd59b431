"""Unit tests for the application settings."""

from __future__ import annotations

import pytest

from pgadapter_sample.core.config import Settings

ENV_VARS = (
    "DATABASE_URL",
    "PGADAPTER_HOST",
    "PGADAPTER_PORT",
    "PGADAPTER_EMBEDDED",
    "SPANNER_DATABASE",
    "SPANNER_EMULATOR_HOST",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestSettings:
    def test_defaults(self):
        settings = make_settings()

        assert settings.pgadapter.embedded is True
        assert settings.pgadapter.port == 5432
        assert settings.pgadapter.use_bundled_emulator is False
        assert settings.spanner.emulator_host is None
        assert settings.logging.level == "INFO"
        assert settings.database.auto_migrate is True

    def test_database_url_points_at_pgadapter(self):
        settings = make_settings(PGADAPTER_HOST="127.0.0.1", PGADAPTER_PORT=15432, SPANNER_DATABASE="music")

        assert settings.database.url == "postgresql+psycopg://127.0.0.1:15432/music"

    def test_database_url_follows_published_port(self):
        settings = make_settings()
        settings.pgadapter_port = 40000

        assert settings.pgadapter.port == 40000
        assert settings.database.url.endswith(":40000/my-database")

    def test_explicit_database_url_wins(self):
        settings = make_settings(DATABASE_URL="sqlite+aiosqlite:///sample.db")

        assert settings.database.url == "sqlite+aiosqlite:///sample.db"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPANNER_EMULATOR_HOST", "localhost:9010")
        monkeypatch.setenv("PGADAPTER_EMBEDDED", "false")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = make_settings()

        assert settings.spanner.emulator_host == "localhost:9010"
        assert settings.pgadapter.embedded is False
        assert settings.logging.level == "DEBUG"
