from __future__ import annotations

from src.main.config import AppSettings, get_settings, load_settings
from src.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DB_MONGO_URI", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    settings = get_settings()
    assert settings.database.mongo_uri.startswith("mongodb://")
    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.health.default_timeout > 0
    assert settings.health.http_dependencies == {}


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("DB_MONGO_URI", "mongodb://test")
    monkeypatch.setenv("SERVICE_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("HEALTH_REDIS_URL", "redis://cache:6379/0")
    monkeypatch.setenv("GIT_COMMIT", "abc1234")

    settings = AppSettings()

    assert settings.database.mongo_uri == "mongodb://test"
    assert settings.service.title == "Testing"
    assert settings.service.git_commit == "abc1234"
    assert settings.logging.level.value == "DEBUG"
    assert settings.health.redis_url == "redis://cache:6379/0"


def test_load_settings_reads_files_in_order(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("DB_MONGO_URI", raising=False)
    base = tmp_path / "base.env"
    base.write_text(
        "DATABASE__MONGO_URI=mongodb://base:27017\n"
        "HEALTH__DEFAULT_TIMEOUT=2.5\n",
        encoding="utf-8",
    )
    local = tmp_path / "local.env"
    local.write_text("DATABASE__MONGO_URI=mongodb://local:27017\n", encoding="utf-8")

    settings = load_settings([base, local])

    assert settings.database.mongo_uri == "mongodb://local:27017"
    assert settings.health.default_timeout == 2.5


def test_load_settings_overrides_win(tmp_path) -> None:
    config_file = tmp_path / "host.env"
    config_file.write_text("ENVIRONMENT=staging\n", encoding="utf-8")

    settings = load_settings(
        [config_file],
        {"environment": EnumEnvironment.TESTING, "service": {"title": "Override"}},
    )

    assert settings.environment == EnumEnvironment.TESTING
    assert settings.service.title == "Override"
