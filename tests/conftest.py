"""Shared fixtures building an application against a temporary log directory."""

from __future__ import annotations

import io
import json
from pathlib import Path
import sys
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from secure_api.config.settings import RateLimitConfig, Settings  # noqa: E402
from secure_api.main import create_app  # noqa: E402
from secure_api.services.event_log import EventLogger  # noqa: E402

TEST_RATE_LIMIT = 5
TEST_WINDOW_SECONDS = 180


def read_records(path: Path) -> list[dict]:
    """Return the JSON records written to a log file."""

    if not path.exists():
        return []
    with path.open(encoding="utf-8") as handle:
        return [json.loads(line) for line in handle if line.strip()]


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    return Settings(
        log_base_dir=str(tmp_path),
        rate_limit=RateLimitConfig(
            window_seconds=TEST_WINDOW_SECONDS,
            max_requests=TEST_RATE_LIMIT,
        ),
    )


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def event_logger(app_settings: Settings, console: io.StringIO) -> Iterator[EventLogger]:
    logger = EventLogger.open(app_settings.log_directory, stream=console)
    yield logger
    logger.close()


@pytest.fixture
def app(app_settings, event_logger):
    return create_app(app_settings, event_logger=event_logger)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def combined_log(app_settings: Settings) -> Path:
    return app_settings.log_directory / "combined.log"


@pytest.fixture
def error_log(app_settings: Settings) -> Path:
    return app_settings.log_directory / "error.log"
