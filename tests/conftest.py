# tests/conftest.py
import os
from collections.abc import Generator

# Must be set before the app module reads its settings.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("RECORD_STORE_BACKEND", "memory")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import commerce_admin.api.dependencies as _deps  # noqa: E402
from commerce_admin.core.config import Settings, get_settings  # noqa: E402
from commerce_admin.main import app  # noqa: E402
from commerce_admin.repositories.memory_record_store import InMemoryRecordStore  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        record_store_backend="memory",
        seed_on_startup=True,
        admin_password="s3cret",
        rate_limit_enabled=False,
    )


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Reset the record-store singleton so each test starts from a freshly
    # seeded in-memory store.
    _deps._record_store = None
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)
        _deps._record_store = None


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()

