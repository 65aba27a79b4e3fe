"""
Relationship queries: "children of X" lookups by foreign key.

Each function filters one entity's records by a foreign‑key field and
returns the matches in insertion order.  The parent is not looked up,
so asking for the offers of a business that does not exist simply
returns an empty list.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.store import EntityStore
from ..schemas.analytics import AnalyticsRead
from ..schemas.business import OfferRead
from ..schemas.customer import CustomerTierRead, FraudDetectionRead
from ..schemas.feedback import FeedbackRead
from ..schemas.loyalty import ReferralProgramRead
from ..schemas.transaction import RedemptionRead, TransactionRead


async def get_business_offers(store: EntityStore, business_id: int) -> List[OfferRead]:
    return await store.offers.where(lambda offer: offer.business_id == business_id)


async def get_business_feedback(store: EntityStore, business_id: int) -> List[FeedbackRead]:
    return await store.feedbacks.where(lambda feedback: feedback.business_id == business_id)


async def get_business_analytics(store: EntityStore, business_id: int) -> List[AnalyticsRead]:
    return await store.analytics.where(lambda row: row.business_id == business_id)


async def get_customer_transactions(store: EntityStore, customer_id: int) -> List[TransactionRead]:
    return await store.transactions.where(lambda transaction: transaction.customer_id == customer_id)


async def get_customer_tier(store: EntityStore, customer_id: int) -> Optional[CustomerTierRead]:
    """Return the customer's tier enrolment, or ``None``.

    A customer is expected to hold at most one enrolment; if several
    exist the earliest inserted wins.
    """
    return await store.customer_tiers.first_where(lambda tier: tier.customer_id == customer_id)


async def get_customer_referrals(store: EntityStore, customer_id: int) -> List[ReferralProgramRead]:
    return await store.referral_programs.where(
        lambda referral: referral.referred_customer_id == customer_id
    )


async def get_customer_feedback(store: EntityStore, customer_id: int) -> List[FeedbackRead]:
    return await store.feedbacks.where(lambda feedback: feedback.customer_id == customer_id)


async def get_customer_fraud_detections(store: EntityStore, customer_id: int) -> List[FraudDetectionRead]:
    return await store.fraud_detections.where(lambda fraud: fraud.customer_id == customer_id)


async def get_transaction_redemptions(store: EntityStore, transaction_id: int) -> List[RedemptionRead]:
    return await store.redemptions.where(lambda redemption: redemption.transaction_id == transaction_id)
