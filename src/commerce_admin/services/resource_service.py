# src/commerce_admin/services/resource_service.py
from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any, Generic

from pydantic import BaseModel

from commerce_admin.domain.registry import RecordT
from commerce_admin.repositories.entity_store import EntityStore


def merge_fields(current: RecordT, changes: dict[str, Any]) -> RecordT:
    """Shallow merge: changed fields overwrite, everything else is kept."""
    return type(current).model_validate({**current.model_dump(), **changes})


class ResourceService(Generic[RecordT]):
    """CRUD semantics shared by every resource: server ids, timestamps and actor stamps."""

    def __init__(self, store: EntityStore[RecordT], actor_id: str) -> None:
        self._store = store
        self._actor_id = actor_id

    @property
    def label(self) -> str:
        return self._store.spec.label

    async def list_all(self) -> list[RecordT]:
        return await self._store.list()

    async def get(self, entity_id: str) -> RecordT | None:
        return await self._store.get(entity_id)

    async def create(
        self, payload: BaseModel, overrides: dict[str, Any] | None = None
    ) -> RecordT:
        spec = self._store.spec
        now = datetime.now(UTC)
        server_fields: dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        if spec.user_tracked:
            server_fields["created_by"] = self._actor_id
            server_fields["updated_by"] = self._actor_id
        for field_name in spec.stamp_on_create:
            server_fields[field_name] = now

        record = spec.model.model_validate(
            {**payload.model_dump(exclude_unset=True), **(overrides or {}), **server_fields}
        )
        return await self._store.create(record)

    async def update(self, entity_id: str, payload: BaseModel) -> RecordT | None:
        if not await self._store.exists(entity_id):
            return None

        changes = payload.model_dump(exclude_unset=True)
        changes["id"] = entity_id
        changes["updated_at"] = datetime.now(UTC)
        if self._store.spec.user_tracked:
            changes["updated_by"] = self._actor_id

        return await self._store.mutate(entity_id, lambda current: merge_fields(current, changes))

    async def delete(self, entity_id: str) -> bool:
        return await self._store.delete(entity_id)

    async def delete_many(self, entity_ids: Iterable[str]) -> int:
        return await self._store.delete_many(entity_ids)
