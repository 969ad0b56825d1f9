# src/commerce_admin/api/v1/transactions.py
from commerce_admin.api.v1.crud import build_crud_router
from commerce_admin.domain.models import TransactionCategoryPayload, TransactionPayload
from commerce_admin.domain.registry import TRANSACTION_CATEGORIES, TRANSACTIONS

router = build_crud_router(
    TRANSACTIONS, TransactionPayload, prefix="/transactions", tags=["Financials"]
)

categories_router = build_crud_router(
    TRANSACTION_CATEGORIES,
    TransactionCategoryPayload,
    prefix="/transaction-categories",
    tags=["Financials"],
)
