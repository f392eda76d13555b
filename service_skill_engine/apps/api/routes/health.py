"""Health and readiness routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from service_skill_engine import SERVICE_SKILL_VERSION

from ..dependencies import require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "POST skill events to /skill. Refer to /docs for available endpoints."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Authenticated health check endpoint for infrastructure probes."""
    return JSONResponse(
        {
            "status": "ok",
            "message": "Service skill is alive and healthy.",
            "version": SERVICE_SKILL_VERSION,
        }
    )


__all__ = ["router"]
