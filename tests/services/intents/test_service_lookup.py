"""Tests for the service lookup intent handler."""

from __future__ import annotations

import pytest

from service_skill_engine.core.exceptions import MissingSlotError
from service_skill_engine.core.models import SkillIntent, SkillSession
from service_skill_engine.services import ServiceContainer
from service_skill_engine.services.intents.service_lookup import handle_service_lookup

# pylint: disable=missing-function-docstring


def _intent(value: str | None) -> SkillIntent:
    return SkillIntent.model_validate(
        {"name": "GetServiceInfo", "slots": {"Service": {"name": "Service", "value": value}}}
    )


def test_lookup_speaks_catalog_description(services: ServiceContainer, skill_logger) -> None:
    session = SkillSession.model_validate({"sessionId": "s-42"})
    turn = handle_service_lookup(_intent("ec2"), session, services)

    assert turn.speechlet.card.title == "GetServiceInfo"
    assert turn.speechlet.output_speech.text == "EC2 description"
    assert turn.speechlet.reprompt is not None
    assert turn.speechlet.reprompt.output_speech.text == ""
    assert turn.speechlet.should_end_session is False
    assert turn.session_attributes == {}
    assert skill_logger.infos == [
        "Term ec2 requested",
        "Received data from table for sessionId=s-42: EC2 description",
    ]


def test_lookup_miss_speaks_fallback(services: ServiceContainer) -> None:
    turn = handle_service_lookup(_intent("unknown-service"), SkillSession(), services)
    assert turn.speechlet.output_speech.text == "No service found in our record"


def test_lookup_slot_without_value_speaks_fallback(services: ServiceContainer) -> None:
    turn = handle_service_lookup(_intent(None), SkillSession(), services)
    assert turn.speechlet.output_speech.text == "No service found in our record"


def test_lookup_without_service_slot_raises(services: ServiceContainer) -> None:
    with pytest.raises(MissingSlotError) as exc_info:
        handle_service_lookup(SkillIntent(name="GetServiceInfo"), SkillSession(), services)
    assert exc_info.value.slot_name == "Service"


def test_lookup_requires_skill_logger() -> None:
    with pytest.raises(RuntimeError):
        handle_service_lookup(_intent("ec2"), SkillSession(), ServiceContainer())
