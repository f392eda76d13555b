"""Helpers that format speechlet responses and the final reply envelope."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from service_skill_engine.core.models import (
    OutputSpeech,
    Reprompt,
    SimpleCard,
    SkillReply,
    SpeechletResponse,
)


def build_speechlet_response(
    card_title: str,
    speech_output: str,
    reprompt_text: Optional[str],
    should_end_session: bool,
) -> SpeechletResponse:
    """Build the logical reply; a ``None`` reprompt means no re-ask is offered."""
    reprompt = None
    if reprompt_text is not None:
        reprompt = Reprompt(output_speech=OutputSpeech(text=reprompt_text))
    return SpeechletResponse(
        output_speech=OutputSpeech(text=speech_output),
        card=SimpleCard(title=card_title, content=speech_output),
        reprompt=reprompt,
        should_end_session=should_end_session,
    )


def build_response(
    session_attributes: Mapping[str, Any], speechlet_response: SpeechletResponse
) -> dict[str, Any]:
    """Wrap ``speechlet_response`` with ``session_attributes`` into the wire envelope."""
    reply = SkillReply(
        session_attributes=dict(session_attributes),
        response=speechlet_response,
    )
    return reply.to_payload()


__all__ = ["build_speechlet_response", "build_response"]
