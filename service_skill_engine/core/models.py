"""Core data transfer objects shared across layers.

Inbound events and outbound replies use the voice platform's camelCase keys on
the wire; the models expose snake_case attributes and map them via aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from service_skill_engine.core.exceptions import SkillError


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------- inbound event ----------


class SkillApplication(_WireModel):
    """Skill application the event was addressed to."""

    application_id: Optional[str] = Field(default=None, alias="applicationId")


class SkillSession(_WireModel):
    """Conversation context for the current turn."""

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    new: bool = False
    application: SkillApplication = Field(default_factory=SkillApplication)
    attributes: Optional[dict[str, Any]] = None


class SkillSlot(_WireModel):
    """Named parameter extracted from the spoken request."""

    name: Optional[str] = None
    value: Optional[str] = None


class SkillIntent(_WireModel):
    """Recognized user intent with its slots."""

    name: str
    slots: Optional[dict[str, SkillSlot]] = None

    def get_slot(self, slot_name: str) -> SkillSlot | None:
        """Return the slot named ``slot_name`` if the intent carries it."""
        if not self.slots:
            return None
        return self.slots.get(slot_name)


class SkillRequest(_WireModel):
    """Request body of an inbound skill event."""

    type: str
    request_id: Optional[str] = Field(default=None, alias="requestId")
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[SkillIntent] = None
    reason: Optional[str] = None


class SkillEvent(_WireModel):
    """Full inbound event envelope."""

    version: str = "1.0"
    session: SkillSession = Field(default_factory=SkillSession)
    request: SkillRequest

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "SkillEvent":
        """Build a SkillEvent from a raw event payload."""
        return cls.model_validate(data)


# ---------- outbound reply ----------


class OutputSpeech(_WireModel):
    """Plain text to be spoken."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SimpleCard(_WireModel):
    """Card shown in the companion app."""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class Reprompt(_WireModel):
    """Speech used when the user does not answer."""

    output_speech: OutputSpeech = Field(alias="outputSpeech")


class SpeechletResponse(_WireModel):
    """Logical reply payload before it is wrapped with session attributes."""

    output_speech: OutputSpeech = Field(alias="outputSpeech")
    card: SimpleCard
    reprompt: Optional[Reprompt] = None
    should_end_session: bool = Field(alias="shouldEndSession")


class SkillReply(_WireModel):
    """Final reply envelope returned to the voice platform."""

    version: str = "1.0"
    session_attributes: dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    response: SpeechletResponse

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire keys, leaving out absent optional parts."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------- domain records ----------


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A canned description addressed by its slot value."""

    name: str
    description: str
    slot_val: str


@dataclass(slots=True)
class SkillResult:
    """Outcome of one skill turn: a reply payload or the error that prevented it."""

    reply: Optional[dict[str, Any]] = None
    error: Optional[SkillError] = None

    @property
    def ok(self) -> bool:
        """True when the turn completed without error."""
        return self.error is None

    @classmethod
    def success(cls, reply: Optional[dict[str, Any]] = None) -> "SkillResult":
        """Build a successful result; ``reply`` is ``None`` for turns with no payload."""
        return cls(reply=reply)

    @classmethod
    def failure(cls, error: SkillError) -> "SkillResult":
        """Build a failed result carrying ``error``."""
        return cls(error=error)


__all__ = [
    "SkillApplication",
    "SkillSession",
    "SkillSlot",
    "SkillIntent",
    "SkillRequest",
    "SkillEvent",
    "OutputSpeech",
    "SimpleCard",
    "Reprompt",
    "SpeechletResponse",
    "SkillReply",
    "CatalogEntry",
    "SkillResult",
]
