# src/commerce_admin/domain/models.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, create_model
from pydantic.alias_generators import to_camel

# Records travel as camelCase JSON; Python code uses the snake_case field names.
CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Decimal in Python, a plain JSON number on the wire and in the store.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class ProductStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


class MovementType(StrEnum):
    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"


class ClientType(StrEnum):
    INDIVIDUAL = "individual"
    COMPANY = "company"


class SaleStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class SupplierStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class SupplierOrderStatus(StrEnum):
    DRAFT = "draft"
    ORDERED = "ordered"
    PARTIALLY_RECEIVED = "partially_received"
    RECEIVED = "received"
    CANCELLED = "cancelled"


class TransactionType(StrEnum):
    REVENUE = "revenue"
    EXPENSE = "expense"


class TransactionSourceType(StrEnum):
    SALE = "sale"
    SUPPLIER_ORDER = "supplier_order"
    OTHER = "other"


class TransactionStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class UserStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


# ---------------------------------------------------------------------------
# Records
# Field defaults are the initial state every new record starts from.
# ---------------------------------------------------------------------------


class Record(BaseModel):
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = CAMEL_CONFIG


class UserTrackedRecord(Record):
    created_by: str = ""
    updated_by: str = ""


class Product(UserTrackedRecord):
    name: str = ""
    reference: str = ""
    description_short: str | None = None
    description_long: str | None = None
    category_id: str = ""
    stock_quantity: int = 0
    unit: str = Field(default="piece", description="e.g. piece, kg, m")
    price_sale: Money = Decimal("0")
    price_purchase: Money = Decimal("0")
    status: ProductStatus = ProductStatus.INACTIVE
    images: list[str] | None = None


class Category(Record):
    name: str = ""
    parent_id: str | None = None


class ProductMovement(Record):
    product_id: str = ""
    type: MovementType = MovementType.ADJUSTMENT
    quantity: int = 0
    reason: str | None = None
    date: datetime | None = None
    user_id: str = ""


class Client(UserTrackedRecord):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    client_type: ClientType = ClientType.INDIVIDUAL
    registration_date: datetime | None = None
    notes: str | None = None


class Sale(Record):
    sale_number: str = ""
    client_id: str = ""
    user_id: str = ""
    date: datetime | None = None
    total_amount: Money = Decimal("0")
    status: SaleStatus = SaleStatus.PENDING
    payment_method: str = ""
    notes: str | None = None


class SaleItem(Record):
    sale_id: str = ""
    product_id: str = ""
    quantity: int = 0
    unit_price: Money = Decimal("0")
    total_price: Money = Decimal("0")


class Supplier(UserTrackedRecord):
    company_name: str = ""
    contact_name: str | None = None
    email: str = ""
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    website: str | None = None
    notes: str | None = None
    status: SupplierStatus = SupplierStatus.INACTIVE


class SupplierOrder(Record):
    supplier_id: str = ""
    order_number: str = ""
    order_date: datetime | None = None
    expected_date: datetime | None = None
    total_amount: Money = Decimal("0")
    status: SupplierOrderStatus = SupplierOrderStatus.DRAFT
    created_by: str = ""


class SupplierOrderItem(Record):
    supplier_order_id: str = ""
    product_id: str = ""
    quantity: int = 0
    unit_price: Money = Decimal("0")
    total_price: Money = Decimal("0")


class Transaction(Record):
    reference: str = ""
    type: TransactionType = TransactionType.EXPENSE
    source_type: TransactionSourceType | None = None
    source_id: str | None = None
    category_id: str = ""
    description: str = ""
    amount: Money = Decimal("0")
    payment_method: str = ""
    date: datetime | None = None
    status: TransactionStatus = TransactionStatus.PENDING
    created_by: str = ""


class TransactionCategory(Record):
    name: str = ""
    type: TransactionType = TransactionType.EXPENSE
    description: str | None = None


class User(Record):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password_hash: str = ""
    role_id: str = ""
    status: UserStatus = UserStatus.INACTIVE
    last_login: datetime | None = None


class Role(Record):
    name: str = ""
    description: str | None = None


class Permission(Record):
    role_id: str = ""
    module: str = ""
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False


# ---------------------------------------------------------------------------
# API Request Schemas
# Payloads carry any subset of a record's client-writable fields.
# ---------------------------------------------------------------------------


def partial_model(model: type[Record], name: str) -> type[BaseModel]:
    """
    Builds a payload model from a record type: every field the client may
    write becomes optional, server-managed fields are left out.
    """
    server_fields = set(Record.model_fields)
    if issubclass(model, UserTrackedRecord):
        server_fields |= set(UserTrackedRecord.model_fields)
    fields: dict[str, Any] = {
        field_name: (Optional[info.annotation], None)
        for field_name, info in model.model_fields.items()
        if field_name not in server_fields
    }
    return create_model(name, __config__=CAMEL_CONFIG, **fields)


ProductPayload = partial_model(Product, "ProductPayload")
CategoryPayload = partial_model(Category, "CategoryPayload")
ProductMovementPayload = partial_model(ProductMovement, "ProductMovementPayload")
ClientPayload = partial_model(Client, "ClientPayload")
SalePayload = partial_model(Sale, "SalePayload")
SaleItemPayload = partial_model(SaleItem, "SaleItemPayload")
SupplierPayload = partial_model(Supplier, "SupplierPayload")
SupplierOrderPayload = partial_model(SupplierOrder, "SupplierOrderPayload")
SupplierOrderItemPayload = partial_model(SupplierOrderItem, "SupplierOrderItemPayload")
TransactionPayload = partial_model(Transaction, "TransactionPayload")
TransactionCategoryPayload = partial_model(TransactionCategory, "TransactionCategoryPayload")
UserPayload = partial_model(User, "UserPayload")
RolePayload = partial_model(Role, "RolePayload")
PermissionPayload = partial_model(Permission, "PermissionPayload")


class SaleWrite(BaseModel):
    sale_data: SalePayload  # type: ignore[valid-type]
    items_data: list[SaleItemPayload] = Field(default_factory=list)  # type: ignore[valid-type]

    model_config = CAMEL_CONFIG


class SupplierOrderWrite(BaseModel):
    order_data: SupplierOrderPayload  # type: ignore[valid-type]
    items_data: list[SupplierOrderItemPayload] = Field(default_factory=list)  # type: ignore[valid-type]

    model_config = CAMEL_CONFIG


class LoginRequest(BaseModel):
    password: str


# ---------------------------------------------------------------------------
# API Response Schemas
# ---------------------------------------------------------------------------

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by every endpoint."""

    success: bool
    data: T | None = None
    error: str | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    # No pagination yet: next is always null.
    items: list[T]
    next: str | None = None


class DeleteResult(BaseModel):
    id: str
    deleted: bool


class SaleWithItems(BaseModel):
    sale: Sale
    items: list[SaleItem]


class SupplierOrderWithItems(BaseModel):
    order: SupplierOrder
    items: list[SupplierOrderItem]
