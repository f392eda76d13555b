"""Service lookup intent: describe the service named in the ``Service`` slot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_skill_engine.core.exceptions import MissingSlotError
from service_skill_engine.core.intents import SERVICE_SLOT_NAME
from service_skill_engine.core.models import SkillIntent, SkillSession
from service_skill_engine.services.intent_resolver import resolve_description
from service_skill_engine.services.intent_router import SkillTurn
from service_skill_engine.services.response_builder import build_speechlet_response

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from service_skill_engine.services import ServiceContainer


def handle_service_lookup(
    intent: SkillIntent, session: SkillSession, services: "ServiceContainer"
) -> SkillTurn:
    """Resolve the requested service and speak its catalog description.

    The card is titled with the intent name and the session stays open so the
    user can ask about another service.
    """
    slot = intent.get_slot(SERVICE_SLOT_NAME)
    if slot is None:
        raise MissingSlotError(intent.name, SERVICE_SLOT_NAME)

    skill_logger = services.require_skill_logger()
    skill_logger.log_info(f"Term {slot.value} requested")
    speech_output = resolve_description(slot.value, services.catalog)
    skill_logger.log_info(
        f"Received data from table for sessionId={session.session_id}: {speech_output}"
    )
    return SkillTurn(
        speechlet=build_speechlet_response(intent.name, speech_output, "", False),
    )


__all__ = ["handle_service_lookup"]
