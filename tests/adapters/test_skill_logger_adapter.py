"""Tests for the structured skill logger adapter."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import asyncio
import logging

import pytest

from service_skill_engine.adapters import skill_logger as skill_logger_module
from service_skill_engine.adapters.skill_logger import SkillLoggerAdapter


def test_init_configures_logging_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def _configure() -> logging.Logger:
        calls.append(1)
        return logging.getLogger("service_skill_engine")

    monkeypatch.setattr(skill_logger_module, "configure_logging", _configure)
    adapter = SkillLoggerAdapter()
    assert adapter.initialized is False

    asyncio.run(adapter.init())
    asyncio.run(adapter.init())

    assert adapter.initialized is True
    assert calls == [1]


def test_init_failure_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom() -> logging.Logger:
        raise PermissionError("Unable to create a writable logs directory")

    monkeypatch.setattr(skill_logger_module, "configure_logging", _boom)
    adapter = SkillLoggerAdapter()

    with pytest.raises(PermissionError):
        asyncio.run(adapter.init())
    assert adapter.initialized is False


def test_log_levels_reach_logger(caplog: pytest.LogCaptureFixture) -> None:
    adapter = SkillLoggerAdapter("service_skill_engine.tests.adapter")
    with caplog.at_level(logging.INFO, logger="service_skill_engine.tests.adapter"):
        adapter.log_info("Term ec2 requested")
        adapter.log_error("Error in handling request: boom")

    levels = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.INFO, "Term ec2 requested") in levels
    assert (logging.ERROR, "Error in handling request: boom") in levels
