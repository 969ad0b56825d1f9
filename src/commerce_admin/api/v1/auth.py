# src/commerce_admin/api/v1/auth.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from commerce_admin.api.dependencies import get_auth_service
from commerce_admin.api.responses import ok
from commerce_admin.domain.models import ApiResponse, LoginRequest, User
from commerce_admin.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

ServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/login",
    response_model=ApiResponse[User],
    response_model_exclude={"data": {"password_hash"}},
)
async def login(payload: LoginRequest, service: ServiceDep) -> ApiResponse:
    """Console login: a single shared password, no token is issued."""
    user = await service.login(payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return ok(user)
