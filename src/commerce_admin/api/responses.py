# src/commerce_admin/api/responses.py
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from commerce_admin.domain.errors import EntityNotFoundError
from commerce_admin.domain.models import ApiResponse


def ok(data: Any) -> ApiResponse[Any]:
    return ApiResponse(success=True, data=data)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    body = ApiResponse[None](success=False, error=message).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return error_response(422, "; ".join(messages))


async def not_found_exception_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.entity} not found")
