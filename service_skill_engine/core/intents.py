"""Request and intent name enumerations for the skill."""

from enum import Enum


class RequestType(str, Enum):
    """Request types delivered by the voice platform."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class BuiltinIntent(str, Enum):
    """Platform-defined intents the skill answers directly."""

    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"


SERVICE_SLOT_NAME = "Service"


__all__ = ["RequestType", "BuiltinIntent", "SERVICE_SLOT_NAME"]
