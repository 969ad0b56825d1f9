# src/commerce_admin/api/v1/supplier_orders.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from commerce_admin.api.dependencies import get_supplier_order_service
from commerce_admin.api.responses import ok
from commerce_admin.domain.models import (
    ApiResponse,
    DeleteResult,
    PaginatedResponse,
    SupplierOrder,
    SupplierOrderItem,
    SupplierOrderWithItems,
    SupplierOrderWrite,
)
from commerce_admin.services.aggregate_service import AggregateService

router = APIRouter(prefix="/supplier-orders", tags=["Suppliers"])

ServiceDep = Annotated[
    AggregateService[SupplierOrder, SupplierOrderItem], Depends(get_supplier_order_service)
]


@router.get("", response_model=ApiResponse[PaginatedResponse[SupplierOrder]])
async def list_supplier_orders(service: ServiceDep) -> ApiResponse:
    return ok(PaginatedResponse(items=await service.list_headers()))


@router.get(
    "/{order_id}/items", response_model=ApiResponse[PaginatedResponse[SupplierOrderItem]]
)
async def list_supplier_order_items(order_id: str, service: ServiceDep) -> ApiResponse:
    return ok(PaginatedResponse(items=await service.items_for(order_id)))


@router.post(
    "",
    response_model=ApiResponse[SupplierOrderWithItems],
    status_code=status.HTTP_201_CREATED,
)
async def create_supplier_order(payload: SupplierOrderWrite, service: ServiceDep) -> ApiResponse:
    order, items = await service.create(payload.order_data, payload.items_data)
    return ok(SupplierOrderWithItems(order=order, items=items))


@router.put("/{order_id}", response_model=ApiResponse[SupplierOrderWithItems])
async def update_supplier_order(
    order_id: str, payload: SupplierOrderWrite, service: ServiceDep
) -> ApiResponse:
    result = await service.update(order_id, payload.order_data, payload.items_data)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Supplier order not found"
        )
    order, items = result
    return ok(SupplierOrderWithItems(order=order, items=items))


@router.delete("/{order_id}", response_model=ApiResponse[DeleteResult])
async def delete_supplier_order(order_id: str, service: ServiceDep) -> ApiResponse:
    deleted = await service.delete(order_id)
    return ok(DeleteResult(id=order_id, deleted=deleted))
