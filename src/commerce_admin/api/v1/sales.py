# src/commerce_admin/api/v1/sales.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from commerce_admin.api.dependencies import get_sale_service
from commerce_admin.api.responses import ok
from commerce_admin.domain.models import (
    ApiResponse,
    DeleteResult,
    PaginatedResponse,
    Sale,
    SaleItem,
    SaleWithItems,
    SaleWrite,
)
from commerce_admin.services.aggregate_service import AggregateService

router = APIRouter(prefix="/sales", tags=["Sales"])

ServiceDep = Annotated[AggregateService[Sale, SaleItem], Depends(get_sale_service)]


@router.get("", response_model=ApiResponse[PaginatedResponse[Sale]])
async def list_sales(service: ServiceDep) -> ApiResponse:
    return ok(PaginatedResponse(items=await service.list_headers()))


@router.get("/{sale_id}/items", response_model=ApiResponse[PaginatedResponse[SaleItem]])
async def list_sale_items(sale_id: str, service: ServiceDep) -> ApiResponse:
    return ok(PaginatedResponse(items=await service.items_for(sale_id)))


@router.post("", response_model=ApiResponse[SaleWithItems], status_code=status.HTTP_201_CREATED)
async def create_sale(payload: SaleWrite, service: ServiceDep) -> ApiResponse:
    sale, items = await service.create(payload.sale_data, payload.items_data)
    return ok(SaleWithItems(sale=sale, items=items))


@router.put("/{sale_id}", response_model=ApiResponse[SaleWithItems])
async def update_sale(sale_id: str, payload: SaleWrite, service: ServiceDep) -> ApiResponse:
    result = await service.update(sale_id, payload.sale_data, payload.items_data)
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sale not found")
    sale, items = result
    return ok(SaleWithItems(sale=sale, items=items))


@router.delete("/{sale_id}", response_model=ApiResponse[DeleteResult])
async def delete_sale(sale_id: str, service: ServiceDep) -> ApiResponse:
    """Deletes the sale's items, then the sale."""
    deleted = await service.delete(sale_id)
    return ok(DeleteResult(id=sale_id, deleted=deleted))
