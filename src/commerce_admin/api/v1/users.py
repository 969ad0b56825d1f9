# src/commerce_admin/api/v1/users.py
# Roles and permissions are plain data: no endpoint consults them.
from commerce_admin.api.v1.crud import build_crud_router
from commerce_admin.domain.models import PermissionPayload, RolePayload, UserPayload
from commerce_admin.domain.registry import PERMISSIONS, ROLES, USERS

router = build_crud_router(USERS, UserPayload, prefix="/users", tags=["Users"])

roles_router = build_crud_router(ROLES, RolePayload, prefix="/roles", tags=["Users"])

permissions_router = build_crud_router(
    PERMISSIONS, PermissionPayload, prefix="/permissions", tags=["Users"]
)
