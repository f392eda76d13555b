"""Skill logger adapter implementing the logging port on the structured logger."""

from __future__ import annotations

import asyncio
import logging

from service_skill_engine.core.logging import configure_logging, get_logger
from service_skill_engine.core.ports import SkillLoggerPort


class SkillLoggerAdapter(SkillLoggerPort):
    """Leveled logging sink whose handlers are installed on first ``init``."""

    def __init__(self, name: str = "service_skill_engine.skill") -> None:
        self._logger: logging.Logger = get_logger(name)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """Whether ``init`` has completed at least once."""
        return self._initialized

    async def init(self) -> None:
        if self._initialized:
            return
        # Handler setup may touch the filesystem; keep it off the event loop.
        await asyncio.to_thread(configure_logging)
        self._initialized = True

    def log_info(self, message: str) -> None:
        self._logger.info(message)

    def log_error(self, message: str) -> None:
        self._logger.error(message)


__all__ = ["SkillLoggerAdapter"]
