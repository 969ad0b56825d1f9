# src/commerce_admin/api/dependencies.py
from collections.abc import Callable

from fastapi import Depends

from commerce_admin.core.config import Settings, get_settings
from commerce_admin.core.security import PasswordChecker, get_password_checker
from commerce_admin.domain.models import (
    Record,
    Sale,
    SaleItem,
    SupplierOrder,
    SupplierOrderItem,
    User,
)
from commerce_admin.domain.registry import (
    SALE_ITEMS,
    SALES,
    SUPPLIER_ORDER_ITEMS,
    SUPPLIER_ORDERS,
    USERS,
    EntitySpec,
)
from commerce_admin.repositories.base import AbstractRecordStore
from commerce_admin.repositories.entity_store import EntityStore
from commerce_admin.repositories.memory_record_store import InMemoryRecordStore
from commerce_admin.repositories.sqlite_record_store import SQLiteRecordStore
from commerce_admin.services.aggregate_service import AggregateService
from commerce_admin.services.auth_service import AuthService
from commerce_admin.services.resource_service import ResourceService

# Singleton Record Store (initialisiert beim Start oder beim ersten Zugriff)
_record_store: AbstractRecordStore | None = None


def build_record_store(settings: Settings) -> AbstractRecordStore:
    if settings.record_store_backend == "sqlite":
        return SQLiteRecordStore(database_url=settings.database_url)
    return InMemoryRecordStore()


async def init_record_store(settings: Settings) -> AbstractRecordStore:
    global _record_store
    if _record_store is None:
        store = build_record_store(settings)
        await store.initialize()
        _record_store = store
    return _record_store


async def close_record_store() -> None:
    global _record_store
    if _record_store is not None:
        await _record_store.close()
        _record_store = None


async def get_record_store(
    settings: Settings = Depends(get_settings),
) -> AbstractRecordStore:
    return await init_record_store(settings)


def _build_service(
    spec: EntitySpec[Record], store: AbstractRecordStore, settings: Settings
) -> ResourceService[Record]:
    return ResourceService(EntityStore(store, spec), actor_id=settings.default_actor_id)


def resource_service_dependency(
    spec: EntitySpec[Record],
) -> Callable[..., ResourceService[Record]]:
    """Creates a FastAPI dependency yielding the ResourceService of one entity type."""

    def _get_service(
        store: AbstractRecordStore = Depends(get_record_store),
        settings: Settings = Depends(get_settings),
    ) -> ResourceService[Record]:
        return _build_service(spec, store, settings)

    return _get_service


def get_sale_service(
    store: AbstractRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> AggregateService[Sale, SaleItem]:
    return AggregateService(
        headers=_build_service(SALES, store, settings),  # type: ignore[arg-type]
        items=_build_service(SALE_ITEMS, store, settings),  # type: ignore[arg-type]
        foreign_key="sale_id",
    )


def get_supplier_order_service(
    store: AbstractRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> AggregateService[SupplierOrder, SupplierOrderItem]:
    return AggregateService(
        headers=_build_service(SUPPLIER_ORDERS, store, settings),  # type: ignore[arg-type]
        items=_build_service(SUPPLIER_ORDER_ITEMS, store, settings),  # type: ignore[arg-type]
        foreign_key="supplier_order_id",
    )


def get_auth_service(
    store: AbstractRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
    checker: PasswordChecker = Depends(get_password_checker),
) -> AuthService:
    users: ResourceService[User] = _build_service(USERS, store, settings)  # type: ignore[arg-type]
    return AuthService(users=users, checker=checker, actor_id=settings.default_actor_id)
