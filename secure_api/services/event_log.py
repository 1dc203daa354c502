"""Operational event log written to append-only files and the console."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import IO, Optional

ERROR_LOG_FILENAME = "error.log"
COMBINED_LOG_FILENAME = "combined.log"
DEFAULT_LOGGER_NAME = "secure_api.events"


class LogLevel(str, Enum):
    """Levels accepted by the event log."""

    INFO = "info"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        return logging.ERROR if self is LogLevel.ERROR else logging.INFO


class JsonLineFormatter(logging.Formatter):
    """Render a record as a single JSON line with level, message and timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "timestamp": timestamp.isoformat(timespec="milliseconds").replace(
                "+00:00", "Z"
            ),
        }
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


class SimpleConsoleFormatter(logging.Formatter):
    """Render ``<level>: <message>`` for the console mirror."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.levelname.lower()}: {record.getMessage()}"


class EventLogger:
    """Process event log owning the error, combined and console handlers.

    Records at every level go to ``combined.log`` and the console; records at
    error level are additionally appended to ``error.log``. Files are opened
    in append mode and never truncated.
    """

    def __init__(
        self,
        directory: Path,
        *,
        level: str = LogLevel.INFO.value,
        stream: Optional[IO[str]] = None,
        name: str = DEFAULT_LOGGER_NAME,
    ) -> None:
        self.directory = Path(directory)
        self.error_log_path = self.directory / ERROR_LOG_FILENAME
        self.combined_log_path = self.directory / COMBINED_LOG_FILENAME

        self._logger = logging.getLogger(name)
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        error_handler = logging.FileHandler(
            self.error_log_path, mode="a", encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JsonLineFormatter())

        combined_handler = logging.FileHandler(
            self.combined_log_path, mode="a", encoding="utf-8"
        )
        combined_handler.setFormatter(JsonLineFormatter())

        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setFormatter(SimpleConsoleFormatter())

        self._handlers: list[logging.Handler] = [
            error_handler,
            combined_handler,
            console_handler,
        ]
        for handler in self._handlers:
            self._logger.addHandler(handler)

        self._logger.setLevel(LogLevel(level.lower()).numeric)
        self._logger.propagate = False
        self._closed = False

    @classmethod
    def open(
        cls,
        directory: Path | str,
        *,
        level: str = LogLevel.INFO.value,
        stream: Optional[IO[str]] = None,
    ) -> "EventLogger":
        """Create the log directory if needed and attach the handlers.

        Raises ``OSError`` when the directory cannot be created so that
        startup aborts before the listener binds.
        """

        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(path, level=level, stream=stream)

    def log(self, level: LogLevel | str, message: str) -> None:
        """Write ``message`` at ``level``."""

        resolved = level if isinstance(level, LogLevel) else LogLevel(level.lower())
        self._logger.log(resolved.numeric, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def flush(self) -> None:
        for handler in self._handlers:
            handler.flush()

    def close(self) -> None:
        """Flush and detach the handlers; further calls are no-ops."""

        if self._closed:
            return
        self.flush()
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = [
    "COMBINED_LOG_FILENAME",
    "ERROR_LOG_FILENAME",
    "EventLogger",
    "JsonLineFormatter",
    "LogLevel",
    "SimpleConsoleFormatter",
]
