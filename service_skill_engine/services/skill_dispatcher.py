"""Request dispatcher: route an inbound skill event to the matching turn builder.

Each call to :meth:`SkillDispatcher.handle` is an independent turn. The only
suspension point is the logging collaborator's ``init``; everything after it
runs synchronously. Failures never escape ``handle``: they are logged and
returned as a failed :class:`SkillResult`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from service_skill_engine.core.exceptions import (
    ApplicationIdMismatchError,
    SkillError,
    SkillHandlingError,
    SkillInitializationError,
    UnsupportedRequestTypeError,
)
from service_skill_engine.core.intents import RequestType
from service_skill_engine.core.logging import request_id_context, session_id_context
from service_skill_engine.core.models import SkillEvent, SkillRequest, SkillResult, SkillSession
from service_skill_engine.core.ports import SkillLoggerPort

from . import ServiceContainer
from .intent_router import SkillTurn
from .intents.builtin_intents import build_welcome_turn
from .response_builder import build_response


def _chained(error: SkillError, cause: BaseException) -> SkillError:
    error.__cause__ = cause
    return error


def _handling_failure(skill_logger: SkillLoggerPort, exc: Exception) -> SkillResult:
    skill_logger.log_error(f"Error in handling request: {exc}")
    if isinstance(exc, SkillHandlingError):
        return SkillResult.failure(exc)
    return SkillResult.failure(_chained(SkillHandlingError(str(exc)), exc))


class SkillDispatcher:
    """Classify events by request type and produce a reply for the turn."""

    def __init__(self, services: ServiceContainer) -> None:
        self._services = services

    @property
    def services(self) -> ServiceContainer:
        """Services the dispatcher hands to intent handlers."""
        return self._services

    async def handle(self, event: Mapping[str, Any]) -> SkillResult:
        """Handle one inbound event and return its result.

        The reply is ``None`` for turns that produce no payload (session end).
        """
        skill_logger = self._services.skill_logger
        if skill_logger is None:
            return SkillResult.failure(SkillInitializationError("Skill logger is not configured"))
        try:
            await skill_logger.init()
        except Exception as exc:  # pylint: disable=broad-except
            skill_logger.log_error(f"Error initializing skill logger: {exc}")
            error = SkillInitializationError(f"Skill logger initialization failed: {exc}")
            return SkillResult.failure(_chained(error, exc))

        try:
            skill_event = SkillEvent.from_data(event)
        except Exception as exc:  # pylint: disable=broad-except
            return _handling_failure(skill_logger, exc)

        # Failures are logged while the ids are still bound.
        with request_id_context(skill_event.request.request_id), session_id_context(
            skill_event.session.session_id
        ):
            try:
                reply = self._handle_event(skill_event, skill_logger)
            except Exception as exc:  # pylint: disable=broad-except
                return _handling_failure(skill_logger, exc)
        return SkillResult.success(reply)

    def _handle_event(
        self, skill_event: SkillEvent, skill_logger: SkillLoggerPort
    ) -> Optional[dict[str, Any]]:
        session = skill_event.session
        request = skill_event.request

        application_id = session.application.application_id
        skill_logger.log_info(f"event.session.application.applicationId={application_id}")
        self._verify_application(application_id)

        if session.new:
            self.on_session_started(request, session)

        if request.type == RequestType.LAUNCH.value:
            turn = self.on_launch(request, session)
        elif request.type == RequestType.INTENT.value:
            turn = self.on_intent(request, session)
        elif request.type == RequestType.SESSION_ENDED.value:
            self.on_session_ended(request, session)
            return None
        else:
            raise UnsupportedRequestTypeError(request.type)

        return build_response(turn.session_attributes, turn.speechlet)

    def _verify_application(self, application_id: Optional[str]) -> None:
        expected = self._services.application_id
        if expected and application_id != expected:
            raise ApplicationIdMismatchError(
                f"Event addressed to application {application_id!r}, expected {expected!r}"
            )

    # --------------- Events -----------------------

    def on_session_started(self, request: SkillRequest, session: SkillSession) -> None:
        """Record the start of a new session; produces no response."""
        self._services.require_skill_logger().log_info(
            f"onSessionStarted requestId={request.request_id}, sessionId={session.session_id}"
        )

    def on_launch(self, request: SkillRequest, session: SkillSession) -> SkillTurn:
        """Called when the user launches the skill without saying what they want."""
        self._services.require_skill_logger().log_info(
            f"onLaunch requestId={request.request_id}, sessionId={session.session_id}"
        )
        return build_welcome_turn()

    def on_intent(self, request: SkillRequest, session: SkillSession) -> SkillTurn:
        """Called when the user specifies an intent for this skill."""
        self._services.require_skill_logger().log_info(
            f"onIntent requestId={request.request_id}, sessionId={session.session_id}"
        )
        if request.intent is None:
            raise SkillHandlingError("IntentRequest carries no intent")
        router = self._services.require_intent_router()
        return router.dispatch(request.intent, session, self._services)

    def on_session_ended(self, request: SkillRequest, session: SkillSession) -> None:
        """Called when the platform ends the session; nothing is spoken back.

        Not called when the skill itself returns ``shouldEndSession=true``.
        """
        message = f"onSessionEnded requestId={request.request_id}, sessionId={session.session_id}"
        if request.reason:
            message = f"{message}, reason={request.reason}"
        self._services.require_skill_logger().log_info(message)


__all__ = ["SkillDispatcher"]
