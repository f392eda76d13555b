"""Serverless function entry point for the skill.

Python function hosts have no "wait for the event loop to empty" switch: the
handler returns as soon as the dispatcher's coroutine completes, which is the
fire-the-result-immediately behavior the platform expects.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

from service_skill_engine.bootstrap import build_default_service_container
from service_skill_engine.services import ServiceContainer, runtime
from service_skill_engine.services.skill_dispatcher import SkillDispatcher


def _resolve_services() -> ServiceContainer:
    try:
        return runtime.get_services()
    except RuntimeError:
        services = build_default_service_container()
        runtime.set_services(services)
        return services


def handler(event: Mapping[str, Any], context: Any = None) -> Optional[dict[str, Any]]:
    """Handle one skill event; raise the turn's error so the host marks it failed."""
    _ = context
    dispatcher = SkillDispatcher(_resolve_services())
    result = asyncio.run(dispatcher.handle(event))
    if result.error is not None:
        raise result.error
    return result.reply


lambda_handler = handler


__all__ = ["handler", "lambda_handler"]
