"""Structured logging helpers with correlation, request and session metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from service_skill_engine.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_session_id: ContextVar[Optional[str]] = ContextVar("session_id", default=None)

PACKAGE_LOGGER_NAME = "service_skill_engine"

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent

LOG_FILE_NAME = "service_skill.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _resolve_log_level() -> int:
    level_name = str(getattr(settings, "SKILL_LOG_LEVEL", "info")).upper()
    return getattr(logging, level_name, logging.INFO)


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "SKILL_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    data_dir = Path(getattr(settings, "DATA_DIR", Path("/data")))
    # Precedence: explicit override → repo root logs → DATA_DIR/logs → package-local logs
    candidates.append(ROOT_DIR / "logs")
    candidates.append(data_dir / "logs")
    candidates.append(BASE_DIR / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except (PermissionError, OSError):
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


class VersionedJsonFormatter(JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class RequestContextFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach the transport correlation id and the skill request and session ids."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.request_id = get_request_id() or "-"
        record.session_id = get_session_id() or "-"
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the transport-level correlation id (HTTP header or generated)."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def bind_request_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the request id context variable."""

    return _request_id.set(value)


def reset_request_id(token: Token[Optional[str]]) -> None:
    """Reset the request id context variable to a previous state."""

    _request_id.reset(token)


def get_request_id() -> Optional[str]:
    """Return the current request id if bound."""

    return _request_id.get()


def bind_session_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the skill session id for downstream logging."""

    return _session_id.set(value)


def reset_session_id(token: Token[Optional[str]]) -> None:
    """Reset the session id context variable."""

    _session_id.reset(token)


def get_session_id() -> Optional[str]:
    """Return the current session id if bound."""

    return _session_id.get()


@contextmanager
def request_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a request id."""

    token = bind_request_id(value)
    try:
        yield
    finally:
        reset_request_id(token)


@contextmanager
def session_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a session id."""

    token = bind_session_id(value)
    try:
        yield
    finally:
        reset_session_id(token)


def _build_formatter() -> VersionedJsonFormatter:
    return VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(request_id)s",
                "%(session_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "request_id": "rid",
            "session_id": "sid",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=str(getattr(settings, "SKILL_LOG_SCHEMA_VERSION", "1.0.0")),
    )


def configure_logging(stream: Optional[TextIO] = None) -> logging.Logger:
    """Install the shared handlers on the package logger (idempotent).

    ``stream`` defaults to stdout. Only the first call decides the stream, so
    entry points that need stdout for their own output configure stderr first.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(_resolve_log_level())
    if logger.handlers:
        return logger

    formatter = _build_formatter()
    context_filter = RequestContextFilter()

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.addFilter(context_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if getattr(settings, "SKILL_LOG_TO_FILE", False):
        log_file_path = _resolve_logs_dir() / LOG_FILE_NAME
        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.addFilter(context_filter)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that propagates to the shared package handlers."""

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_log_level())
    return logger


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "RequestContextFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "reset_correlation_id",
    "get_correlation_id",
    "bind_request_id",
    "bind_session_id",
    "reset_request_id",
    "reset_session_id",
    "get_request_id",
    "get_session_id",
    "request_id_context",
    "session_id_context",
    "configure_logging",
    "get_logger",
]
