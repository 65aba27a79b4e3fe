"""
Top‑level router for version 1 of the API.

This router aggregates the entity, relationship and statistics
routers under a unified prefix.  When a new entity is added to the
store, build its router in ``endpoints`` and include it here.
"""

from fastapi import APIRouter

from .endpoints import businesses, customers, entities, statistics, transactions

router = APIRouter()

router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(entities.products, prefix="/products", tags=["products"])
router.include_router(entities.offers, prefix="/offers", tags=["offers"])
router.include_router(entities.redemptions, prefix="/redemptions", tags=["redemptions"])
router.include_router(entities.loyalties, prefix="/loyalties", tags=["loyalty"])
router.include_router(entities.tiers, prefix="/tiers", tags=["tiers"])
router.include_router(entities.customer_tiers, prefix="/customer-tiers", tags=["tiers"])
router.include_router(entities.referrals, prefix="/referrals", tags=["referrals"])
router.include_router(entities.feedback, prefix="/feedback", tags=["feedback"])
router.include_router(entities.promotions, prefix="/promotions", tags=["promotions"])
router.include_router(entities.fraud_detections, prefix="/fraud-detections", tags=["fraud"])
router.include_router(entities.analytics, prefix="/analytics", tags=["analytics"])
router.include_router(entities.admins, prefix="/admins", tags=["admins"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
