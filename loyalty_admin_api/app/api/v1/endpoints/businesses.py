"""
Business endpoints for API v1.

Standard CRUD routes for businesses plus read‑only lookups of the
offers, feedback and analytics rows that reference a business.  The
lookups do not check that the business exists: an unknown id yields
an empty list, matching how dangling references are treated
elsewhere.
"""

from typing import List

from fastapi import Depends

from loyalty_admin_api.app.api.v1.endpoints.crud import build_crud_router
from loyalty_admin_api.app.core.store import EntityStore, get_store
from loyalty_admin_api.app.schemas.analytics import AnalyticsRead
from loyalty_admin_api.app.schemas.business import BusinessCreate, BusinessRead, BusinessUpdate, OfferRead
from loyalty_admin_api.app.schemas.feedback import FeedbackRead
from loyalty_admin_api.app.services import relationship_service

router = build_crud_router(
    "Business",
    lambda store: store.businesses,
    BusinessCreate,
    BusinessUpdate,
    BusinessRead,
)


@router.get("/{business_id}/offers", response_model=List[OfferRead])
async def list_business_offers(business_id: int, store: EntityStore = Depends(get_store)) -> List[OfferRead]:
    """Offers run by the business."""
    return await relationship_service.get_business_offers(store, business_id)


@router.get("/{business_id}/feedback", response_model=List[FeedbackRead])
async def list_business_feedback(business_id: int, store: EntityStore = Depends(get_store)) -> List[FeedbackRead]:
    return await relationship_service.get_business_feedback(store, business_id)


@router.get("/{business_id}/analytics", response_model=List[AnalyticsRead])
async def list_business_analytics(business_id: int, store: EntityStore = Depends(get_store)) -> List[AnalyticsRead]:
    return await relationship_service.get_business_analytics(store, business_id)
