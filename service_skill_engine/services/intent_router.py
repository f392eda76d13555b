"""Intent router and supporting handler result model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Mapping, MutableMapping, Optional

from service_skill_engine.core.models import SkillIntent, SkillSession, SpeechletResponse

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


@dataclass(slots=True)
class SkillTurn:
    """Handler output: session attributes to echo back plus the speechlet."""

    speechlet: SpeechletResponse
    session_attributes: dict[str, Any] = field(default_factory=dict)


IntentHandler = Callable[[SkillIntent, SkillSession, "ServiceContainer"], SkillTurn]


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no handler or fallback is registered for the requested intent."""


class IntentRouter:
    """Dispatch intents to handlers registered by intent name."""

    def __init__(
        self,
        handlers: Mapping[str, IntentHandler] | None = None,
        fallback: Optional[IntentHandler] = None,
    ) -> None:
        self._handlers: MutableMapping[str, IntentHandler] = dict(handlers or {})
        self._fallback = fallback

    def register(self, intent_name: str, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent_name``."""

        self._handlers[str(intent_name)] = handler

    def unregister(self, intent_name: str) -> None:
        """Remove a handler if present."""

        self._handlers.pop(str(intent_name), None)

    def set_fallback(self, handler: Optional[IntentHandler]) -> None:
        """Set the handler used for intent names with no registered handler."""

        self._fallback = handler

    def resolve(self, intent_name: str) -> IntentHandler:
        """Return the handler for ``intent_name``, falling back when unregistered."""

        handler = self._handlers.get(intent_name, self._fallback)
        if handler is None:
            raise IntentHandlerNotFoundError(f"No handler registered for intent {intent_name}")
        return handler

    def dispatch(
        self, intent: SkillIntent, session: SkillSession, services: "ServiceContainer"
    ) -> SkillTurn:
        """Invoke the handler for ``intent.name`` with the provided services."""

        return self.resolve(intent.name)(intent, session, services)

    def handlers(self) -> Mapping[str, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
    "IntentHandler",
    "SkillTurn",
]
