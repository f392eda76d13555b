"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real values are used when present.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep tests off the filesystem and independent of a deployed application id
os.environ.setdefault("SKILL_LOG_TO_FILE", "false")
os.environ.setdefault("SKILL_LOG_LEVEL", "info")

# pylint: disable=wrong-import-position
from service_skill_engine.core.logging import get_correlation_id, get_request_id, get_session_id
from service_skill_engine.services import ServiceContainer, build_default_services, runtime


class RecordingSkillLogger:
    """In-memory skill logger capturing messages for assertions."""

    def __init__(self, fail_init: bool = False) -> None:
        self.fail_init = fail_init
        self.init_calls = 0
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.records: list[dict[str, str | None]] = []

    async def init(self) -> None:
        self.init_calls += 1
        if self.fail_init:
            raise OSError("log sink unavailable")

    def _record(self, level: str, message: str) -> None:
        self.records.append(
            {
                "level": level,
                "message": message,
                "cid": get_correlation_id(),
                "rid": get_request_id(),
                "sid": get_session_id(),
            }
        )

    def log_info(self, message: str) -> None:
        self.infos.append(message)
        self._record("info", message)

    def log_error(self, message: str) -> None:
        self.errors.append(message)
        self._record("error", message)


@pytest.fixture
def skill_logger() -> RecordingSkillLogger:
    """Fresh recording logger per test."""
    return RecordingSkillLogger()


@pytest.fixture
def services(skill_logger: RecordingSkillLogger) -> ServiceContainer:
    """Default service container wired to the recording logger."""
    return build_default_services(skill_logger=skill_logger)


@pytest.fixture(autouse=True)
def _reset_runtime_registry() -> Iterator[None]:
    """Each test starts without a registered service container."""
    runtime.clear_services()
    yield
    runtime.clear_services()


def make_event(
    request_type: str,
    *,
    intent: dict | None = None,
    new: bool = False,
    session_id: str = "session-1",
    application_id: str = "amzn1.ask.skill.test",
    request_id: str = "request-1",
) -> dict:
    """Build a raw skill event payload with platform wire keys."""
    request: dict = {"type": request_type, "requestId": request_id}
    if intent is not None:
        request["intent"] = intent
    return {
        "version": "1.0",
        "session": {
            "new": new,
            "sessionId": session_id,
            "application": {"applicationId": application_id},
            "attributes": {},
        },
        "request": request,
    }


def lookup_intent(value: str | None, name: str = "GetServiceInfo") -> dict:
    """Intent payload carrying a ``Service`` slot."""
    return {"name": name, "slots": {"Service": {"name": "Service", "value": value}}}
