# src/commerce_admin/api/v1/suppliers.py
from commerce_admin.api.v1.crud import build_crud_router
from commerce_admin.domain.models import SupplierPayload
from commerce_admin.domain.registry import SUPPLIERS

router = build_crud_router(SUPPLIERS, SupplierPayload, prefix="/suppliers", tags=["Suppliers"])
