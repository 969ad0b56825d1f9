# src/commerce_admin/api/v1/products.py
from commerce_admin.api.v1.crud import build_crud_router
from commerce_admin.domain.models import CategoryPayload, ProductMovementPayload, ProductPayload
from commerce_admin.domain.registry import CATEGORIES, PRODUCT_MOVEMENTS, PRODUCTS

router = build_crud_router(PRODUCTS, ProductPayload, prefix="/products", tags=["Products"])

categories_router = build_crud_router(
    CATEGORIES, CategoryPayload, prefix="/categories", tags=["Products"]
)

movements_router = build_crud_router(
    PRODUCT_MOVEMENTS, ProductMovementPayload, prefix="/product-movements", tags=["Products"]
)
