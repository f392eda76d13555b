"""Static catalog of service descriptions addressed by slot value."""

from __future__ import annotations

from typing import Iterable

from service_skill_engine.core.exceptions import DuplicateSlotValueError
from service_skill_engine.core.models import CatalogEntry


def validate_catalog(entries: Iterable[CatalogEntry]) -> tuple[CatalogEntry, ...]:
    """Return ``entries`` as a tuple, rejecting duplicate slot values."""
    seen: set[str] = set()
    validated: list[CatalogEntry] = []
    for entry in entries:
        if entry.slot_val in seen:
            raise DuplicateSlotValueError(f"Duplicate catalog slot value: {entry.slot_val!r}")
        seen.add(entry.slot_val)
        validated.append(entry)
    return tuple(validated)


SERVICE_CATALOG: tuple[CatalogEntry, ...] = validate_catalog(
    [
        CatalogEntry(
            name="Lambda Functions",
            description="Lambda functions description",
            slot_val="lambda",
        ),
        CatalogEntry(
            name="EC2",
            description="EC2 description",
            slot_val="ec2",
        ),
        CatalogEntry(
            name="BeanStalk Functions",
            description="BeanStalk description",
            slot_val="beanstalk",
        ),
    ]
)


__all__ = ["SERVICE_CATALOG", "validate_catalog"]
