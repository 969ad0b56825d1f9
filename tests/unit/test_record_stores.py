from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from commerce_admin.repositories.base import AbstractRecordStore
from commerce_admin.repositories.memory_record_store import InMemoryRecordStore
from commerce_admin.repositories.sqlite_record_store import SQLiteRecordStore


@pytest_asyncio.fixture(params=["memory", "sqlite"])  # type: ignore[misc]
async def any_store(request: pytest.FixtureRequest) -> AsyncGenerator[AbstractRecordStore, None]:
    store: AbstractRecordStore
    if request.param == "sqlite":
        # Use in-memory SQLite for testing
        store = SQLiteRecordStore("sqlite+aiosqlite:///:memory:")
    else:
        store = InMemoryRecordStore()
    await store.initialize()
    yield store
    await store.close()


@pytest.mark.asyncio  # type: ignore[misc]
async def test_put_and_get(any_store: AbstractRecordStore) -> None:
    await any_store.put("client:c-1", {"id": "c-1", "firstName": "Jean"})

    assert await any_store.get("client:c-1") == {"id": "c-1", "firstName": "Jean"}


@pytest.mark.asyncio  # type: ignore[misc]
async def test_get_missing(any_store: AbstractRecordStore) -> None:
    assert await any_store.get("client:missing") is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_put_overwrites(any_store: AbstractRecordStore) -> None:
    await any_store.put("index:clients", ["c-1"])
    await any_store.put("index:clients", ["c-1", "c-2"])

    assert await any_store.get("index:clients") == ["c-1", "c-2"]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_delete(any_store: AbstractRecordStore) -> None:
    await any_store.put("client:c-1", {"id": "c-1"})

    assert await any_store.delete("client:c-1") is True
    assert await any_store.get("client:c-1") is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_delete_nonexistent(any_store: AbstractRecordStore) -> None:
    assert await any_store.delete("client:nonexistent") is False


@pytest.mark.asyncio  # type: ignore[misc]
async def test_memory_store_returns_copies() -> None:
    store = InMemoryRecordStore()
    value = {"id": "c-1", "tags": ["a"]}
    await store.put("client:c-1", value)

    value["tags"].append("b")
    fetched = await store.get("client:c-1")
    assert fetched == {"id": "c-1", "tags": ["a"]}

    fetched["tags"].append("c")
    assert await store.get("client:c-1") == {"id": "c-1", "tags": ["a"]}
