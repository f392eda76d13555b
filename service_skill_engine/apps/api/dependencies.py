"""Shared FastAPI dependencies for token validation and service access."""

import hmac
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from service_skill_engine.core.config import config
from service_skill_engine.services import ServiceContainer, runtime
from service_skill_engine.services.skill_dispatcher import SkillDispatcher


async def _validate_token(
    *,
    expected: Optional[str],
    authorization: Optional[str] = None,
    x_skill_token: Optional[str] = None,
) -> None:
    """Shared helper to validate bearer/X-Skill-Token headers."""
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )

    provided = None
    if authorization and authorization.lower().startswith("bearer "):
        provided = authorization.split(" ", 1)[1].strip()
    elif x_skill_token:
        provided = x_skill_token.strip()

    if not provided:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_skill_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_skill_token: Annotated[Optional[str], Header(alias="X-Skill-Token")] = None,
) -> None:
    """Token guard for the skill endpoint when auth is enabled."""
    if not config.ENABLE_SKILL_AUTH:
        return
    await _validate_token(
        expected=config.SKILL_API_TOKEN,
        authorization=authorization,
        x_skill_token=x_skill_token,
    )


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_skill_token: Annotated[Optional[str], Header(alias="X-Skill-Token")] = None,
) -> None:
    """Token guard specifically for the health check endpoint."""
    if not config.ENABLE_SKILL_AUTH:
        return
    await _validate_token(
        expected=config.HEALTHCHECK_API_TOKEN,
        authorization=authorization,
        x_skill_token=x_skill_token,
    )


def get_service_container() -> ServiceContainer:
    """Resolve the globally configured service container."""
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


def get_skill_dispatcher(
    container: Annotated[ServiceContainer, Depends(get_service_container)],
) -> SkillDispatcher:
    """Return a dispatcher bound to the active container."""
    if container.skill_logger is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Skill logger is unavailable",
        )
    return SkillDispatcher(container)


__all__ = [
    "get_service_container",
    "get_skill_dispatcher",
    "require_healthcheck_token",
    "require_skill_token",
]
