# src/commerce_admin/domain/registry.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Generic, TypeVar

from commerce_admin.domain import seed_data
from commerce_admin.domain.models import (
    Category,
    Client,
    Permission,
    Product,
    ProductMovement,
    Record,
    Role,
    Sale,
    SaleItem,
    Supplier,
    SupplierOrder,
    SupplierOrderItem,
    Transaction,
    TransactionCategory,
    User,
    UserTrackedRecord,
)

RecordT = TypeVar("RecordT", bound=Record)


class EntityKind(StrEnum):
    PRODUCT = "product"
    CATEGORY = "category"
    CLIENT = "client"
    SALE = "sale"
    SALE_ITEM = "saleItem"
    SUPPLIER = "supplier"
    SUPPLIER_ORDER = "supplierOrder"
    SUPPLIER_ORDER_ITEM = "supplierOrderItem"
    TRANSACTION = "transaction"
    TRANSACTION_CATEGORY = "transactionCategory"
    USER = "user"
    ROLE = "role"
    PERMISSION = "permission"
    PRODUCT_MOVEMENT = "productMovement"


@dataclass(frozen=True)
class EntitySpec(Generic[RecordT]):
    """
    Static description of one entity type.
    The model's field defaults are the initial state of a new record.
    """

    kind: EntityKind
    index_name: str
    label: str
    model: type[RecordT]
    seed: Callable[[datetime], list[RecordT]]
    # Extra timestamp fields set once when the record is created
    stamp_on_create: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def user_tracked(self) -> bool:
        return issubclass(self.model, UserTrackedRecord)


PRODUCTS = EntitySpec(EntityKind.PRODUCT, "products", "Product", Product, seed_data.products)
CATEGORIES = EntitySpec(
    EntityKind.CATEGORY, "categories", "Category", Category, seed_data.categories
)
CLIENTS = EntitySpec(
    EntityKind.CLIENT,
    "clients",
    "Client",
    Client,
    seed_data.clients,
    stamp_on_create=("registration_date",),
)
SALES = EntitySpec(EntityKind.SALE, "sales", "Sale", Sale, seed_data.sales)
SALE_ITEMS = EntitySpec(
    EntityKind.SALE_ITEM, "saleItems", "Sale item", SaleItem, seed_data.sale_items
)
SUPPLIERS = EntitySpec(
    EntityKind.SUPPLIER, "suppliers", "Supplier", Supplier, seed_data.suppliers
)
SUPPLIER_ORDERS = EntitySpec(
    EntityKind.SUPPLIER_ORDER,
    "supplierOrders",
    "Supplier order",
    SupplierOrder,
    seed_data.supplier_orders,
)
SUPPLIER_ORDER_ITEMS = EntitySpec(
    EntityKind.SUPPLIER_ORDER_ITEM,
    "supplierOrderItems",
    "Supplier order item",
    SupplierOrderItem,
    seed_data.supplier_order_items,
)
TRANSACTIONS = EntitySpec(
    EntityKind.TRANSACTION, "transactions", "Transaction", Transaction, seed_data.transactions
)
TRANSACTION_CATEGORIES = EntitySpec(
    EntityKind.TRANSACTION_CATEGORY,
    "transactionCategories",
    "Transaction category",
    TransactionCategory,
    seed_data.transaction_categories,
)
USERS = EntitySpec(EntityKind.USER, "users", "User", User, seed_data.users)
ROLES = EntitySpec(EntityKind.ROLE, "roles", "Role", Role, seed_data.roles)
PERMISSIONS = EntitySpec(
    EntityKind.PERMISSION, "permissions", "Permission", Permission, seed_data.permissions
)
PRODUCT_MOVEMENTS = EntitySpec(
    EntityKind.PRODUCT_MOVEMENT,
    "productMovements",
    "Product movement",
    ProductMovement,
    seed_data.product_movements,
)

ENTITY_REGISTRY: dict[EntityKind, EntitySpec[Record]] = {
    spec.kind: spec  # type: ignore[misc]
    for spec in (
        PRODUCTS,
        CATEGORIES,
        CLIENTS,
        SALES,
        SALE_ITEMS,
        SUPPLIERS,
        SUPPLIER_ORDERS,
        SUPPLIER_ORDER_ITEMS,
        TRANSACTIONS,
        TRANSACTION_CATEGORIES,
        USERS,
        ROLES,
        PERMISSIONS,
        PRODUCT_MOVEMENTS,
    )
}
