# src/commerce_admin/repositories/entity_store.py
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Generic

from commerce_admin.core.metrics import RECORD_STORE_OPERATIONS
from commerce_admin.domain.errors import EntityNotFoundError
from commerce_admin.domain.registry import EntitySpec, RecordT
from commerce_admin.repositories.base import AbstractRecordStore

logger = logging.getLogger(__name__)


class EntityStore(Generic[RecordT]):
    """
    Typed CRUD for one entity type on top of a record store.

    Every record lives under "<entity name>:<id>". The ids of all records of
    the type are kept, in insertion order, in a list stored under
    "index:<index name>". A record is written before its id enters the index
    and its id leaves the index before the record is removed, so every
    indexed id resolves to a stored record.

    There is no locking: mutate() is a plain read-modify-write and two
    concurrent writers on the same id race at the final put.
    """

    def __init__(self, record_store: AbstractRecordStore, spec: EntitySpec[RecordT]) -> None:
        self._records = record_store
        self.spec = spec

    @property
    def index_key(self) -> str:
        return f"index:{self.spec.index_name}"

    def _key(self, entity_id: str) -> str:
        return f"{self.spec.name}:{entity_id}"

    def _track(self, operation: str) -> None:
        RECORD_STORE_OPERATIONS.labels(entity=self.spec.name, operation=operation).inc()

    async def _read_index(self) -> list[str]:
        return list(await self._records.get(self.index_key) or [])

    async def _write_index(self, ids: list[str]) -> None:
        await self._records.put(self.index_key, ids)

    async def _write(self, record: RecordT) -> None:
        await self._records.put(self._key(record.id), record.model_dump(mode="json", by_alias=True))

    async def list(self) -> list[RecordT]:
        """Returns all records in index order."""
        self._track("list")
        records: list[RecordT] = []
        for entity_id in await self._read_index():
            data = await self._records.get(self._key(entity_id))
            if data is None:
                logger.warning(
                    "Index %s references missing %s '%s'", self.index_key, self.spec.name, entity_id
                )
                continue
            records.append(self.spec.model.model_validate(data))
        return records

    async def get(self, entity_id: str) -> RecordT | None:
        self._track("get")
        data = await self._records.get(self._key(entity_id))
        if data is None:
            return None
        return self.spec.model.model_validate(data)

    async def exists(self, entity_id: str) -> bool:
        return await self._records.get(self._key(entity_id)) is not None

    async def create(self, record: RecordT) -> RecordT:
        """Stores the record under its id (overwriting) and indexes it."""
        self._track("create")
        await self._write(record)
        ids = await self._read_index()
        if record.id not in ids:
            ids.append(record.id)
            await self._write_index(ids)
        logger.debug("Created %s '%s'", self.spec.name, record.id)
        return record

    async def mutate(self, entity_id: str, fn: Callable[[RecordT], RecordT]) -> RecordT:
        """
        Reads the record, applies fn and writes the result back.

        Raises:
            EntityNotFoundError: If no record exists for entity_id.
        """
        self._track("mutate")
        current = await self.get(entity_id)
        if current is None:
            raise EntityNotFoundError(self.spec.label, entity_id)
        updated = fn(current)
        await self._write(updated)
        return updated

    async def delete(self, entity_id: str) -> bool:
        """Deletes one record. Missing ids are not an error."""
        self._track("delete")
        ids = await self._read_index()
        if entity_id in ids:
            ids.remove(entity_id)
            await self._write_index(ids)
        return await self._records.delete(self._key(entity_id))

    async def delete_many(self, entity_ids: Iterable[str]) -> int:
        """Deletes several records and returns how many actually existed."""
        self._track("delete_many")
        targets = set(entity_ids)
        if not targets:
            return 0
        ids = await self._read_index()
        remaining = [i for i in ids if i not in targets]
        if len(remaining) != len(ids):
            await self._write_index(remaining)
        deleted = 0
        for entity_id in targets:
            if await self._records.delete(self._key(entity_id)):
                deleted += 1
        return deleted

    async def ensure_seed(self) -> int:
        """
        Inserts the mock dataset if the index is empty.
        Returns the number of records inserted (0 when already populated).
        """
        if await self._read_index():
            return 0
        now = datetime.now(UTC)
        rows = self.spec.seed(now)
        for row in rows:
            await self._write(row)
        await self._write_index([row.id for row in rows])
        logger.info("Seeded %d %s record(s)", len(rows), self.spec.name)
        return len(rows)
