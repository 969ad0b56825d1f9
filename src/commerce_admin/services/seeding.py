from __future__ import annotations

import logging

from commerce_admin.core.metrics import SEEDED_RECORDS
from commerce_admin.domain.registry import ENTITY_REGISTRY
from commerce_admin.repositories.base import AbstractRecordStore
from commerce_admin.repositories.entity_store import EntityStore

logger = logging.getLogger(__name__)


async def seed_all(record_store: AbstractRecordStore) -> dict[str, int]:
    """
    Loads the mock dataset into every entity type whose index is empty.
    Runs once at startup, never per request.
    """
    inserted: dict[str, int] = {}
    for spec in ENTITY_REGISTRY.values():
        count = await EntityStore(record_store, spec).ensure_seed()
        SEEDED_RECORDS.labels(entity=spec.name).inc(count)
        inserted[spec.name] = count

    logger.info("Seeding finished: %d record(s) inserted", sum(inserted.values()))
    return inserted
