"""HTTP correlation middleware for the skill host."""

from __future__ import annotations

import time
import uuid

from service_skill_engine.core.logging import (
    bind_correlation_id,
    get_logger,
    reset_correlation_id,
)

logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")


def _header_map(scope) -> dict[str, str]:  # type: ignore[no-untyped-def]
    return {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in scope.get("headers", [])}


def resolve_correlation_id(headers: dict[str, str]) -> str:
    """First non-empty correlation header, or a fresh hex id."""
    for header in CORRELATION_HEADERS:
        value = headers.get(header.lower())
        if value:
            return value
    return uuid.uuid4().hex


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Tag every HTTP exchange with a correlation id.

    The id lives in its own logging context (``cid``) so the skill request id
    bound later by the dispatcher (``rid``) never overwrites it. It is echoed
    in the response headers.
    """

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = resolve_correlation_id(_header_map(scope))
        token = bind_correlation_id(correlation_id)
        started = time.perf_counter()
        status_code = 500

        async def send_with_correlation(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = int(message.get("status") or status_code)
                headers = list(message.get("headers", []))
                present = {name.decode("latin-1").lower() for name, _ in headers}
                headers.extend(
                    (name.encode("latin-1"), correlation_id.encode("latin-1"))
                    for name in CORRELATION_HEADERS
                    if name.lower() not in present
                )
                message["headers"] = headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_correlation)
        finally:
            logger.info(
                "request completed",
                extra={
                    "event": "http_request",
                    "method": scope.get("method", ""),
                    "path": scope.get("path", ""),
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                },
            )
            reset_correlation_id(token)


__all__ = ["CORRELATION_HEADERS", "CorrelationIdMiddleware", "resolve_correlation_id"]
