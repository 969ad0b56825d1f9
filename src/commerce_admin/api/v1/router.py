# src/commerce_admin/api/v1/router.py
from fastapi import APIRouter

from commerce_admin.api.v1 import (
    auth,
    clients,
    products,
    sales,
    supplier_orders,
    suppliers,
    transactions,
    users,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(products.router)
api_router.include_router(products.categories_router)
api_router.include_router(products.movements_router)
api_router.include_router(clients.router)
api_router.include_router(sales.router)
api_router.include_router(suppliers.router)
api_router.include_router(supplier_orders.router)
api_router.include_router(transactions.router)
api_router.include_router(transactions.categories_router)
api_router.include_router(users.router)
api_router.include_router(users.roles_router)
api_router.include_router(users.permissions_router)
