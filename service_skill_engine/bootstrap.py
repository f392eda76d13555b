"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from service_skill_engine.adapters.skill_logger import SkillLoggerAdapter
from service_skill_engine.core.config import config
from service_skill_engine.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(
        skill_logger=SkillLoggerAdapter(),
        application_id=config.SKILL_APPLICATION_ID,
    )


__all__ = ["build_default_service_container"]
