# src/commerce_admin/api/v1/clients.py
from commerce_admin.api.v1.crud import build_crud_router
from commerce_admin.domain.models import ClientPayload
from commerce_admin.domain.registry import CLIENTS

# registrationDate is stamped by the server on creation
router = build_crud_router(CLIENTS, ClientPayload, prefix="/clients", tags=["Clients"])
