"""Application service layer scaffolding for skill handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from service_skill_engine.core.models import CatalogEntry
from service_skill_engine.core.ports import SkillLoggerPort

from .catalog import SERVICE_CATALOG

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    skill_logger: Optional[SkillLoggerPort] = None
    intent_router: Optional["IntentRouter"] = None
    catalog: tuple[CatalogEntry, ...] = SERVICE_CATALOG
    application_id: Optional[str] = None

    def require_skill_logger(self) -> SkillLoggerPort:
        """Return the configured skill logger or raise if missing."""
        if self.skill_logger is None:
            raise RuntimeError("SkillLoggerPort has not been configured.")
        return self.skill_logger

    def require_intent_router(self) -> "IntentRouter":
        """Return the configured intent router or raise if missing."""
        if self.intent_router is None:
            raise RuntimeError("IntentRouter has not been configured.")
        return self.intent_router


def build_default_router() -> "IntentRouter":
    """Return an intent router wired with the built-in and lookup handlers."""

    # pylint: disable=import-outside-toplevel
    from service_skill_engine.core.intents import BuiltinIntent

    from .intent_router import IntentRouter
    from .intents import handle_help_intent, handle_service_lookup, handle_stop_intent

    return IntentRouter(
        {
            BuiltinIntent.HELP.value: handle_help_intent,
            BuiltinIntent.STOP.value: handle_stop_intent,
            BuiltinIntent.CANCEL.value: handle_stop_intent,
        },
        fallback=handle_service_lookup,
    )


def build_default_services(
    *,
    skill_logger: Optional[SkillLoggerPort] = None,
    application_id: Optional[str] = None,
) -> ServiceContainer:
    """Return a service container with the default intent router wiring."""

    return ServiceContainer(
        skill_logger=skill_logger,
        intent_router=build_default_router(),
        application_id=application_id,
    )


__all__ = ["ServiceContainer", "build_default_router", "build_default_services"]
