"""
Transaction endpoints for API v1.

Standard CRUD routes for transactions and a lookup of the point
redemptions recorded against a transaction.
"""

from typing import List

from fastapi import Depends

from loyalty_admin_api.app.api.v1.endpoints.crud import build_crud_router
from loyalty_admin_api.app.core.store import EntityStore, get_store
from loyalty_admin_api.app.schemas.transaction import (
    RedemptionRead,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from loyalty_admin_api.app.services import relationship_service

router = build_crud_router(
    "Transaction",
    lambda store: store.transactions,
    TransactionCreate,
    TransactionUpdate,
    TransactionRead,
)


@router.get("/{transaction_id}/redemptions", response_model=List[RedemptionRead])
async def list_transaction_redemptions(
    transaction_id: int,
    store: EntityStore = Depends(get_store),
) -> List[RedemptionRead]:
    return await relationship_service.get_transaction_redemptions(store, transaction_id)
