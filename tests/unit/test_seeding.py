import pytest

from commerce_admin.domain.registry import ENTITY_REGISTRY, SALE_ITEMS, SALES, EntityKind
from commerce_admin.repositories.entity_store import EntityStore
from commerce_admin.repositories.memory_record_store import InMemoryRecordStore
from commerce_admin.services.seeding import seed_all


@pytest.mark.asyncio  # type: ignore[misc]
async def test_seed_all_populates_every_type(record_store: InMemoryRecordStore) -> None:
    inserted = await seed_all(record_store)

    assert set(inserted) == {kind.value for kind in EntityKind}
    assert all(count > 0 for count in inserted.values())
    for spec in ENTITY_REGISTRY.values():
        assert len(await EntityStore(record_store, spec).list()) == inserted[spec.name]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_seed_all_is_a_noop_the_second_time(record_store: InMemoryRecordStore) -> None:
    await seed_all(record_store)
    sizes = {
        spec.name: len(await EntityStore(record_store, spec).list())
        for spec in ENTITY_REGISTRY.values()
    }

    inserted = await seed_all(record_store)

    assert sum(inserted.values()) == 0
    for spec in ENTITY_REGISTRY.values():
        assert len(await EntityStore(record_store, spec).list()) == sizes[spec.name]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_seeded_sale_items_reference_seeded_sale(record_store: InMemoryRecordStore) -> None:
    await seed_all(record_store)

    sales = await EntityStore(record_store, SALES).list()
    items = await EntityStore(record_store, SALE_ITEMS).list()

    assert [s.id for s in sales] == ["sale-1"]
    assert {i.sale_id for i in items} == {"sale-1"}


def test_registry_index_names_are_unique() -> None:
    index_names = [spec.index_name for spec in ENTITY_REGISTRY.values()]
    assert len(index_names) == len(set(index_names)) == len(EntityKind)
