"""Core exception types shared across layers."""


class SkillError(Exception):
    """Base error for a skill turn that could not produce a reply."""


class SkillInitializationError(SkillError):
    """Raised when the logging collaborator fails to initialize."""


class SkillHandlingError(SkillError):
    """Raised when handling an inbound skill event fails."""


class UnsupportedRequestTypeError(SkillHandlingError):
    """Raised when the event carries a request type the skill does not handle."""

    def __init__(self, request_type: str) -> None:
        super().__init__(f"Unsupported request type: {request_type}")
        self.request_type = request_type


class MissingSlotError(SkillHandlingError):
    """Raised when an intent lacks a slot its handler requires."""

    def __init__(self, intent_name: str, slot_name: str) -> None:
        super().__init__(f"Intent {intent_name} is missing required slot {slot_name!r}")
        self.intent_name = intent_name
        self.slot_name = slot_name


class ApplicationIdMismatchError(SkillHandlingError):
    """Raised when the event targets a different skill application."""


class DuplicateSlotValueError(ValueError):
    """Raised when two catalog entries share the same slot value."""


__all__ = [
    "SkillError",
    "SkillInitializationError",
    "SkillHandlingError",
    "UnsupportedRequestTypeError",
    "MissingSlotError",
    "ApplicationIdMismatchError",
    "DuplicateSlotValueError",
]
