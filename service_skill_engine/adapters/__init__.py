"""Infrastructure adapter exports."""

from .skill_logger import SkillLoggerAdapter

__all__ = ["SkillLoggerAdapter"]
