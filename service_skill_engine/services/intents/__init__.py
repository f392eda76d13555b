"""Intent handlers registered on the default router."""

from .builtin_intents import handle_help_intent, handle_stop_intent
from .service_lookup import handle_service_lookup

__all__ = ["handle_help_intent", "handle_stop_intent", "handle_service_lookup"]
