# src/commerce_admin/api/v1/crud.py
# No "from __future__ import annotations" here: FastAPI must see the real
# payload classes in the endpoint signatures built inside the factory.
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from commerce_admin.api.dependencies import resource_service_dependency
from commerce_admin.api.responses import ok
from commerce_admin.domain.models import ApiResponse, DeleteResult, PaginatedResponse, Record
from commerce_admin.domain.registry import EntitySpec
from commerce_admin.services.resource_service import ResourceService


def build_crud_router(
    spec: EntitySpec[Record],
    payload_model: type[BaseModel],
    prefix: str,
    tags: list[str],
) -> APIRouter:
    """
    Builds list/get/create/update/delete endpoints for one entity type.

    GET    {prefix}        -> {items, next: null}
    GET    {prefix}/{id}   -> record | 404
    POST   {prefix}        -> created record (201)
    PUT    {prefix}/{id}   -> updated record | 404
    DELETE {prefix}/{id}   -> {id, deleted}
    """
    router = APIRouter(prefix=prefix, tags=tags)
    model = spec.model
    not_found = f"{spec.label} not found"

    ServiceDep = Annotated[ResourceService[Record], Depends(resource_service_dependency(spec))]

    @router.get("", response_model=ApiResponse[PaginatedResponse[model]])  # type: ignore[valid-type]
    async def list_records(service: ServiceDep) -> ApiResponse:
        return ok(PaginatedResponse(items=await service.list_all()))

    @router.get("/{entity_id}", response_model=ApiResponse[model])  # type: ignore[valid-type]
    async def get_record(entity_id: str, service: ServiceDep) -> ApiResponse:
        record = await service.get(entity_id)
        if not record:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return ok(record)

    @router.post(
        "",
        response_model=ApiResponse[model],  # type: ignore[valid-type]
        status_code=status.HTTP_201_CREATED,
    )
    async def create_record(payload: payload_model, service: ServiceDep) -> ApiResponse:  # type: ignore[valid-type]
        return ok(await service.create(payload))

    @router.put("/{entity_id}", response_model=ApiResponse[model])  # type: ignore[valid-type]
    async def update_record(
        entity_id: str,
        payload: payload_model,  # type: ignore[valid-type]
        service: ServiceDep,
    ) -> ApiResponse:
        updated = await service.update(entity_id, payload)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return ok(updated)

    @router.delete("/{entity_id}", response_model=ApiResponse[DeleteResult])
    async def delete_record(entity_id: str, service: ServiceDep) -> ApiResponse:
        deleted = await service.delete(entity_id)
        return ok(DeleteResult(id=entity_id, deleted=deleted))

    return router
