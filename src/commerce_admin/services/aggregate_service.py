# src/commerce_admin/services/aggregate_service.py
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel

from commerce_admin.domain.models import Record
from commerce_admin.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

HeaderT = TypeVar("HeaderT", bound=Record)
ItemT = TypeVar("ItemT", bound=Record)


class AggregateService(Generic[HeaderT, ItemT]):
    """
    Writes a header record together with its line items (sale + sale items,
    supplier order + order items).

    Items point at their header through a foreign-key field only. The steps
    of a composite write are independent store writes: nothing is rolled back
    if a later step fails, and the header total is stored as supplied.
    """

    def __init__(
        self,
        headers: ResourceService[HeaderT],
        items: ResourceService[ItemT],
        foreign_key: str,
    ) -> None:
        self._headers = headers
        self._items = items
        self._foreign_key = foreign_key

    async def list_headers(self) -> list[HeaderT]:
        return await self._headers.list_all()

    async def items_for(self, header_id: str) -> list[ItemT]:
        return [
            item
            for item in await self._items.list_all()
            if getattr(item, self._foreign_key) == header_id
        ]

    async def create(
        self, header_payload: BaseModel, item_payloads: Sequence[BaseModel]
    ) -> tuple[HeaderT, list[ItemT]]:
        header = await self._headers.create(header_payload)
        items = await self._create_items(header.id, item_payloads)
        logger.info(
            "Created %s '%s' with %d item(s)", self._headers.label, header.id, len(items)
        )
        return header, items

    async def update(
        self, header_id: str, header_payload: BaseModel, item_payloads: Sequence[BaseModel]
    ) -> tuple[HeaderT, list[ItemT]] | None:
        """Merges the header and replaces all of its items. None if the header is missing."""
        header = await self._headers.update(header_id, header_payload)
        if header is None:
            return None

        old_items = await self.items_for(header_id)
        await self._items.delete_many(item.id for item in old_items)
        items = await self._create_items(header_id, item_payloads)
        logger.info(
            "Updated %s '%s': replaced %d item(s) with %d",
            self._headers.label,
            header_id,
            len(old_items),
            len(items),
        )
        return header, items

    async def delete(self, header_id: str) -> bool:
        """Deletes the items first, then the header."""
        old_items = await self.items_for(header_id)
        await self._items.delete_many(item.id for item in old_items)
        return await self._headers.delete(header_id)

    async def _create_items(
        self, header_id: str, item_payloads: Sequence[BaseModel]
    ) -> list[ItemT]:
        created: list[ItemT] = []
        for payload in item_payloads:
            item = await self._items.create(payload, overrides={self._foreign_key: header_id})
            created.append(item)
        return created
