"""
Plain CRUD routers for entities without extra lookups.

Each router only carries the five standard routes built by
``build_crud_router``; ``router.py`` mounts them under their
collection prefixes.
"""

from loyalty_admin_api.app.api.v1.endpoints.crud import build_crud_router
from loyalty_admin_api.app.schemas.admin import AdminCreate, AdminRead, AdminUpdate
from loyalty_admin_api.app.schemas.analytics import AnalyticsCreate, AnalyticsRead, AnalyticsUpdate
from loyalty_admin_api.app.schemas.business import OfferCreate, OfferRead, OfferUpdate
from loyalty_admin_api.app.schemas.customer import (
    CustomerTierCreate,
    CustomerTierRead,
    CustomerTierUpdate,
    FraudDetectionCreate,
    FraudDetectionRead,
    FraudDetectionUpdate,
)
from loyalty_admin_api.app.schemas.feedback import FeedbackCreate, FeedbackRead, FeedbackUpdate
from loyalty_admin_api.app.schemas.loyalty import (
    LoyaltyCreate,
    LoyaltyRead,
    LoyaltyUpdate,
    ReferralProgramCreate,
    ReferralProgramRead,
    ReferralProgramUpdate,
    TierSystemCreate,
    TierSystemRead,
    TierSystemUpdate,
)
from loyalty_admin_api.app.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
    PromotionCreate,
    PromotionRead,
    PromotionUpdate,
)
from loyalty_admin_api.app.schemas.transaction import RedemptionCreate, RedemptionRead, RedemptionUpdate

products = build_crud_router(
    "Product", lambda store: store.products, ProductCreate, ProductUpdate, ProductRead
)
offers = build_crud_router(
    "Offer", lambda store: store.offers, OfferCreate, OfferUpdate, OfferRead
)
redemptions = build_crud_router(
    "Redemption", lambda store: store.redemptions, RedemptionCreate, RedemptionUpdate, RedemptionRead
)
loyalties = build_crud_router(
    "Loyalty", lambda store: store.loyalties, LoyaltyCreate, LoyaltyUpdate, LoyaltyRead
)
tiers = build_crud_router(
    "Tier", lambda store: store.tier_systems, TierSystemCreate, TierSystemUpdate, TierSystemRead
)
customer_tiers = build_crud_router(
    "Customer tier",
    lambda store: store.customer_tiers,
    CustomerTierCreate,
    CustomerTierUpdate,
    CustomerTierRead,
)
referrals = build_crud_router(
    "Referral",
    lambda store: store.referral_programs,
    ReferralProgramCreate,
    ReferralProgramUpdate,
    ReferralProgramRead,
)
feedback = build_crud_router(
    "Feedback", lambda store: store.feedbacks, FeedbackCreate, FeedbackUpdate, FeedbackRead
)
promotions = build_crud_router(
    "Promotion", lambda store: store.promotions, PromotionCreate, PromotionUpdate, PromotionRead
)
fraud_detections = build_crud_router(
    "Fraud detection",
    lambda store: store.fraud_detections,
    FraudDetectionCreate,
    FraudDetectionUpdate,
    FraudDetectionRead,
)
analytics = build_crud_router(
    "Analytics", lambda store: store.analytics, AnalyticsCreate, AnalyticsUpdate, AnalyticsRead
)
admins = build_crud_router(
    "Admin", lambda store: store.admins, AdminCreate, AdminUpdate, AdminRead
)
