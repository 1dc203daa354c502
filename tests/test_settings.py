"""Environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

from secure_api.config.settings import Settings

ENV_VARS = (
    "PORT",
    "LOG_BASE_DIR",
    "LOG_DIR_NAME",
    "RATE_LIMIT_WINDOW_SECONDS",
    "RATE_LIMIT_MAX_REQUESTS",
)


def _clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)

    config = Settings()

    assert config.port == 5000
    assert config.rate_limit.window_seconds == 180
    assert config.rate_limit.max_requests == 100
    assert config.rate_limit.message == "Trop de tentatives veuillez reessayer ulterieurement"
    assert config.log_directory == Path(".") / "logs"


def test_environment_overrides(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_BASE_DIR", str(tmp_path))
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "7")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "30")

    config = Settings()

    assert config.port == 8080
    assert config.log_directory == tmp_path / "logs"
    assert config.rate_limit.max_requests == 7
    assert config.rate_limit.window_seconds == 30


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("PORT=6001\n", encoding="utf-8")

    assert Settings().port == 6001
