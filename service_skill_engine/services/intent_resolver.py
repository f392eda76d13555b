"""Resolve a slot value to its catalog description."""

from __future__ import annotations

from typing import Optional, Sequence

from service_skill_engine.core.messages import NOT_FOUND_MESSAGE
from service_skill_engine.core.models import CatalogEntry

from .catalog import SERVICE_CATALOG


def resolve_description(
    slot_val: Optional[str], catalog: Sequence[CatalogEntry] = SERVICE_CATALOG
) -> str:
    """Return the description of the first entry matching ``slot_val`` exactly.

    Matching is case-sensitive. Unknown or missing values yield the not-found
    message rather than an error.
    """
    for entry in catalog:
        if entry.slot_val == slot_val:
            return entry.description
    return NOT_FOUND_MESSAGE


__all__ = ["resolve_description"]
