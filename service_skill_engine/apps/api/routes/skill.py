"""Skill endpoint: accept a voice platform event and return its reply."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from service_skill_engine.apps.api.dependencies import get_skill_dispatcher, require_skill_token
from service_skill_engine.core.exceptions import (
    ApplicationIdMismatchError,
    SkillError,
    SkillInitializationError,
    UnsupportedRequestTypeError,
)
from service_skill_engine.core.logging import get_logger
from service_skill_engine.services.skill_dispatcher import SkillDispatcher

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)


def _status_for(error: SkillError) -> int:
    if isinstance(error, UnsupportedRequestTypeError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, ApplicationIdMismatchError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, SkillInitializationError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.post("/skill", response_model=None)
async def handle_skill_event(
    event: Annotated[dict[str, Any], Body(...)],
    dispatcher: Annotated[SkillDispatcher, Depends(get_skill_dispatcher)],
    _: None = Depends(require_skill_token),
) -> Response:
    """Run one skill turn; session-end turns answer with no content."""
    result = await dispatcher.handle(event)
    if result.error is not None:
        logger.warning("skill turn failed: %s", result.error)
        raise HTTPException(status_code=_status_for(result.error), detail=str(result.error))
    if result.reply is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(result.reply)


__all__ = ["router"]
