# src/commerce_admin/domain/seed_data.py
"""
Mock dataset loaded into an empty store at startup.

Ids are fixed so that the rows reference each other (sale-1 -> client-1,
sitem-1 -> prod-1, ...). Timestamps are taken at seeding time.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from commerce_admin.domain.models import (
    Category,
    Client,
    ClientType,
    MovementType,
    Permission,
    Product,
    ProductMovement,
    ProductStatus,
    Role,
    Sale,
    SaleItem,
    SaleStatus,
    Supplier,
    SupplierOrder,
    SupplierOrderItem,
    SupplierOrderStatus,
    SupplierStatus,
    Transaction,
    TransactionCategory,
    TransactionSourceType,
    TransactionStatus,
    TransactionType,
    User,
    UserStatus,
)

ADMIN_USER_ID = "user-1"


def roles(now: datetime) -> list[Role]:
    return [
        Role(
            id="role-1",
            name="Administrateur",
            description="Accès complet à toutes les fonctionnalités",
            created_at=now,
            updated_at=now,
        ),
        Role(
            id="role-2",
            name="Gestionnaire de Ventes",
            description="Gère les produits, les ventes et les clients",
            created_at=now,
            updated_at=now,
        ),
    ]


def users(now: datetime) -> list[User]:
    return [
        User(
            id=ADMIN_USER_ID,
            first_name="Admin",
            last_name="User",
            email="admin@nexus.com",
            password_hash="hashed_password",
            role_id="role-1",
            status=UserStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        ),
        User(
            id="user-2",
            first_name="Vendeur",
            last_name="Test",
            email="seller@nexus.com",
            password_hash="hashed_password",
            role_id="role-2",
            status=UserStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        ),
    ]


def permissions(now: datetime) -> list[Permission]:
    # (id, role, module, create, read, update, delete)
    grants = [
        ("perm-1", "role-1", "products", True, True, True, True),
        ("perm-2", "role-1", "sales", True, True, True, True),
        ("perm-3", "role-2", "products", True, True, True, False),
        ("perm-4", "role-2", "sales", True, True, False, False),
    ]
    return [
        Permission(
            id=perm_id,
            role_id=role_id,
            module=module,
            can_create=can_create,
            can_read=can_read,
            can_update=can_update,
            can_delete=can_delete,
            created_at=now,
            updated_at=now,
        )
        for perm_id, role_id, module, can_create, can_read, can_update, can_delete in grants
    ]


def categories(now: datetime) -> list[Category]:
    return [
        Category(id="cat-1", name="Électronique", created_at=now, updated_at=now),
        Category(id="cat-2", name="Vêtements", created_at=now, updated_at=now),
        Category(id="cat-3", name="Maison & Jardin", created_at=now, updated_at=now),
        Category(
            id="cat-4", name="Smartphones", parent_id="cat-1", created_at=now, updated_at=now
        ),
    ]


def products(now: datetime) -> list[Product]:
    return [
        Product(
            id="prod-1",
            name="Smartphone X-1000",
            reference="NEX-X1000",
            category_id="cat-4",
            stock_quantity=150,
            unit="piece",
            price_sale=Decimal("799.99"),
            price_purchase=Decimal("450.00"),
            status=ProductStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
        Product(
            id="prod-2",
            name="T-Shirt Classique",
            reference="NEX-TSHIRT-BLK",
            category_id="cat-2",
            stock_quantity=500,
            unit="piece",
            price_sale=Decimal("29.99"),
            price_purchase=Decimal("12.50"),
            status=ProductStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
    ]


def product_movements(now: datetime) -> list[ProductMovement]:
    return [
        ProductMovement(
            id="move-1",
            product_id="prod-1",
            type=MovementType.IN,
            quantity=200,
            reason="Stock initial",
            date=now,
            user_id=ADMIN_USER_ID,
            created_at=now,
            updated_at=now,
        ),
        ProductMovement(
            id="move-2",
            product_id="prod-1",
            type=MovementType.OUT,
            quantity=50,
            reason="Vente #VTE-2024-001",
            date=now,
            user_id=ADMIN_USER_ID,
            created_at=now,
            updated_at=now,
        ),
    ]


def clients(now: datetime) -> list[Client]:
    return [
        Client(
            id="client-1",
            first_name="Jean",
            last_name="Dupont",
            email="jean.dupont@email.com",
            client_type=ClientType.INDIVIDUAL,
            registration_date=now,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
        Client(
            id="client-2",
            first_name="Marie",
            last_name="Curie",
            email="marie.curie@science.com",
            client_type=ClientType.INDIVIDUAL,
            registration_date=now,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
    ]


def sales(now: datetime) -> list[Sale]:
    return [
        Sale(
            id="sale-1",
            sale_number="VTE-2024-001",
            client_id="client-1",
            user_id=ADMIN_USER_ID,
            date=now,
            total_amount=Decimal("829.98"),
            status=SaleStatus.COMPLETED,
            payment_method="Credit Card",
            created_at=now,
            updated_at=now,
        )
    ]


def sale_items(now: datetime) -> list[SaleItem]:
    return [
        SaleItem(
            id="sitem-1",
            sale_id="sale-1",
            product_id="prod-1",
            quantity=1,
            unit_price=Decimal("799.99"),
            total_price=Decimal("799.99"),
            created_at=now,
            updated_at=now,
        ),
        SaleItem(
            id="sitem-2",
            sale_id="sale-1",
            product_id="prod-2",
            quantity=1,
            unit_price=Decimal("29.99"),
            total_price=Decimal("29.99"),
            created_at=now,
            updated_at=now,
        ),
    ]


def suppliers(now: datetime) -> list[Supplier]:
    return [
        Supplier(
            id="sup-1",
            company_name="ElectroFournisseur Inc.",
            email="contact@electrofournisseur.com",
            status=SupplierStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
        Supplier(
            id="sup-2",
            company_name="Textile World",
            email="sales@textileworld.com",
            status=SupplierStatus.ACTIVE,
            created_at=now,
            updated_at=now,
            created_by=ADMIN_USER_ID,
            updated_by=ADMIN_USER_ID,
        ),
    ]


def supplier_orders(now: datetime) -> list[SupplierOrder]:
    return [
        SupplierOrder(
            id="supord-1",
            supplier_id="sup-1",
            order_number="CMD-F-2024-001",
            order_date=now,
            total_amount=Decimal("45000"),
            status=SupplierOrderStatus.ORDERED,
            created_by=ADMIN_USER_ID,
            created_at=now,
            updated_at=now,
        )
    ]


def supplier_order_items(now: datetime) -> list[SupplierOrderItem]:
    return [
        SupplierOrderItem(
            id="suporditem-1",
            supplier_order_id="supord-1",
            product_id="prod-1",
            quantity=100,
            unit_price=Decimal("450"),
            total_price=Decimal("45000"),
            created_at=now,
            updated_at=now,
        )
    ]


def transaction_categories(now: datetime) -> list[TransactionCategory]:
    return [
        TransactionCategory(
            id="tcat-1",
            name="Ventes de produits",
            type=TransactionType.REVENUE,
            created_at=now,
            updated_at=now,
        ),
        TransactionCategory(
            id="tcat-2",
            name="Achat de marchandises",
            type=TransactionType.EXPENSE,
            created_at=now,
            updated_at=now,
        ),
        TransactionCategory(
            id="tcat-3", name="Marketing", type=TransactionType.EXPENSE, created_at=now, updated_at=now
        ),
    ]


def transactions(now: datetime) -> list[Transaction]:
    return [
        Transaction(
            id="trans-1",
            reference="VTE-2024-001",
            type=TransactionType.REVENUE,
            source_type=TransactionSourceType.SALE,
            source_id="sale-1",
            category_id="tcat-1",
            description="Vente de Smartphone et T-Shirt",
            amount=Decimal("829.98"),
            payment_method="Credit Card",
            date=now,
            status=TransactionStatus.COMPLETED,
            created_by=ADMIN_USER_ID,
            created_at=now,
            updated_at=now,
        ),
        Transaction(
            id="trans-2",
            reference="CMD-F-2024-001",
            type=TransactionType.EXPENSE,
            source_type=TransactionSourceType.SUPPLIER_ORDER,
            source_id="supord-1",
            category_id="tcat-2",
            description="Achat de 100 Smartphones X-1000",
            amount=Decimal("45000"),
            payment_method="Bank Transfer",
            date=now,
            status=TransactionStatus.COMPLETED,
            created_by=ADMIN_USER_ID,
            created_at=now,
            updated_at=now,
        ),
    ]
