# src/commerce_admin/repositories/memory_record_store.py
from __future__ import annotations

import copy
from typing import Any

from commerce_admin.repositories.base import AbstractRecordStore


class InMemoryRecordStore(AbstractRecordStore):
    """
    In-Memory record store for local use and tests.
    Values are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    async def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def put(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def close(self) -> None:
        self._data.clear()
