"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol


class SkillLoggerPort(Protocol):
    """Port exposing the leveled logging sink used while handling a turn."""

    async def init(self) -> None:
        """Prepare the sink; must complete before delivery is guaranteed."""
        ...

    def log_info(self, message: str) -> None:
        """Record an informational message."""
        ...

    def log_error(self, message: str) -> None:
        """Record an error message."""
        ...


__all__ = ["SkillLoggerPort"]
