"""Fixed-text turns: welcome on launch, help, and goodbye on stop/cancel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_skill_engine.core import messages
from service_skill_engine.core.models import SkillIntent, SkillSession
from service_skill_engine.services.intent_router import SkillTurn
from service_skill_engine.services.response_builder import build_speechlet_response

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from service_skill_engine.services import ServiceContainer


def build_welcome_turn() -> SkillTurn:
    """Greeting offered when the skill is launched without a request."""
    return SkillTurn(
        speechlet=build_speechlet_response(
            messages.TITLE_MESSAGE,
            messages.GREETING_MESSAGE,
            messages.REPROMPT_MESSAGE,
            False,
        ),
    )


def build_help_turn() -> SkillTurn:
    """Help text; ends the session with no reprompt."""
    return SkillTurn(
        speechlet=build_speechlet_response(
            messages.HELP_CARD_TITLE,
            messages.HELP_MESSAGE,
            None,
            True,
        ),
    )


def build_goodbye_turn() -> SkillTurn:
    """Goodbye text; ends the session with no reprompt."""
    return SkillTurn(
        speechlet=build_speechlet_response(
            messages.SESSION_ENDED_CARD_TITLE,
            messages.GOODBYE_MESSAGE,
            None,
            True,
        ),
    )


# ========== Intent Handlers ==========


def handle_help_intent(
    intent: SkillIntent, session: SkillSession, services: "ServiceContainer"
) -> SkillTurn:
    """Answer the built-in help intent regardless of slots."""
    _ = (intent, session, services)
    return build_help_turn()


def handle_stop_intent(
    intent: SkillIntent, session: SkillSession, services: "ServiceContainer"
) -> SkillTurn:
    """Answer the built-in stop and cancel intents."""
    _ = (intent, session, services)
    return build_goodbye_turn()


__all__ = [
    "build_welcome_turn",
    "build_help_turn",
    "build_goodbye_turn",
    "handle_help_intent",
    "handle_stop_intent",
]
