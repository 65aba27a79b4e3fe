"""
Customer endpoints for API v1.

Besides the standard CRUD routes, these endpoints expose everything
hanging off a customer: transactions, tier enrolment, referrals,
feedback and fraud flags, plus a fraud‑flag count used by the fraud
review page.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from loyalty_admin_api.app.api.v1.endpoints.crud import build_crud_router
from loyalty_admin_api.app.core.store import EntityStore, get_store
from loyalty_admin_api.app.schemas.analytics import FraudCount
from loyalty_admin_api.app.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerTierRead,
    CustomerUpdate,
    FraudDetectionRead,
)
from loyalty_admin_api.app.schemas.feedback import FeedbackRead
from loyalty_admin_api.app.schemas.loyalty import ReferralProgramRead
from loyalty_admin_api.app.schemas.transaction import TransactionRead
from loyalty_admin_api.app.services import relationship_service
from loyalty_admin_api.app.services.statistics_service import StatisticsService

router: APIRouter = build_crud_router(
    "Customer",
    lambda store: store.customers,
    CustomerCreate,
    CustomerUpdate,
    CustomerRead,
)


@router.get("/{customer_id}/transactions", response_model=List[TransactionRead])
async def list_customer_transactions(
    customer_id: int,
    store: EntityStore = Depends(get_store),
) -> List[TransactionRead]:
    return await relationship_service.get_customer_transactions(store, customer_id)


@router.get("/{customer_id}/tier", response_model=CustomerTierRead)
async def get_customer_tier(customer_id: int, store: EntityStore = Depends(get_store)) -> CustomerTierRead:
    """Return the customer's tier enrolment.

    Returns HTTP 404 if the customer is not enrolled in any tier (or
    does not exist).
    """
    tier = await relationship_service.get_customer_tier(store, customer_id)
    if tier is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer tier not found")
    return tier


@router.get("/{customer_id}/referrals", response_model=List[ReferralProgramRead])
async def list_customer_referrals(
    customer_id: int,
    store: EntityStore = Depends(get_store),
) -> List[ReferralProgramRead]:
    return await relationship_service.get_customer_referrals(store, customer_id)


@router.get("/{customer_id}/feedback", response_model=List[FeedbackRead])
async def list_customer_feedback(customer_id: int, store: EntityStore = Depends(get_store)) -> List[FeedbackRead]:
    return await relationship_service.get_customer_feedback(store, customer_id)


@router.get("/{customer_id}/fraud-detections", response_model=List[FraudDetectionRead])
async def list_customer_fraud_detections(
    customer_id: int,
    store: EntityStore = Depends(get_store),
) -> List[FraudDetectionRead]:
    return await relationship_service.get_customer_fraud_detections(store, customer_id)


@router.get("/{customer_id}/fraud-count", response_model=FraudCount)
async def get_customer_fraud_count(customer_id: int, store: EntityStore = Depends(get_store)) -> FraudCount:
    """Number of fraud flags raised against the customer."""
    return await StatisticsService.fraud_count_for_customer(store, customer_id)
