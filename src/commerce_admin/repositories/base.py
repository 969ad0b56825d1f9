from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AbstractRecordStore(ABC):
    """
    Namespaced key-value persistence.
    Keys are fully qualified ("product:prod-1", "index:products"),
    values are JSON-compatible structures.
    """

    async def initialize(self) -> None:
        """Prepares the backing storage. Called once at startup."""

    async def close(self) -> None:
        """Releases the backing storage."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Returns the value stored under key, or None."""
        ...

    @abstractmethod
    async def put(self, key: str, value: Any) -> None:
        """Stores value under key, overwriting any previous value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Deletes the value under key. Returns True if something was deleted."""
        ...
