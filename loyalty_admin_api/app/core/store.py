"""
In‑memory entity store.

``EntityStore`` plays the role a database connection plays elsewhere:
it owns one ``CrudService`` per entity and is created once when the
application starts (``init_store``).  Request handlers receive it
through the ``get_store`` dependency, which reads it from
``app.state``.  Nothing is persisted; restarting the process resets
every sequence to the seed contents.

Foreign keys between entities are not enforced.  Deleting a business
leaves its offers and analytics rows in place, and readers treat a
reference to a missing record as "no related record".
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import Request

from .config import Settings
from .seed import SEED_DATA
from ..schemas.admin import AdminRead
from ..schemas.analytics import AnalyticsRead
from ..schemas.business import BusinessRead, OfferRead
from ..schemas.customer import CustomerRead, CustomerTierRead, FraudDetectionRead
from ..schemas.feedback import FeedbackRead
from ..schemas.loyalty import LoyaltyRead, ReferralProgramRead, TierSystemRead
from ..schemas.product import ProductRead, PromotionRead
from ..schemas.transaction import RedemptionRead, TransactionRead
from ..services.crud_service import CrudService, Latency

logger = logging.getLogger(__name__)


class EntityStore:
    """Holds the CRUD service of every entity."""

    def __init__(
        self,
        latency: Optional[Latency] = None,
        seed: Optional[Mapping[str, Iterable[Any]]] = None,
    ) -> None:
        self.latency = latency or Latency()
        seed = seed or {}

        def rows(attr: str) -> Iterable[Any]:
            return seed.get(attr, ())

        self.businesses: CrudService[BusinessRead] = CrudService(
            "business", BusinessRead, "business_id", rows("businesses"), self.latency
        )
        self.products: CrudService[ProductRead] = CrudService(
            "product", ProductRead, "product_id", rows("products"), self.latency
        )
        self.customers: CrudService[CustomerRead] = CrudService(
            "customer", CustomerRead, "customer_id", rows("customers"), self.latency
        )
        self.offers: CrudService[OfferRead] = CrudService(
            "offer", OfferRead, "offer_id", rows("offers"), self.latency
        )
        self.transactions: CrudService[TransactionRead] = CrudService(
            "transaction", TransactionRead, "transaction_id", rows("transactions"), self.latency
        )
        self.redemptions: CrudService[RedemptionRead] = CrudService(
            "redemption", RedemptionRead, "redemption_id", rows("redemptions"), self.latency
        )
        self.loyalties: CrudService[LoyaltyRead] = CrudService(
            "loyalty", LoyaltyRead, "loyalty_id", rows("loyalties"), self.latency
        )
        self.tier_systems: CrudService[TierSystemRead] = CrudService(
            "tier", TierSystemRead, "tier_id", rows("tier_systems"), self.latency
        )
        self.customer_tiers: CrudService[CustomerTierRead] = CrudService(
            "customer tier", CustomerTierRead, "customer_tier_id", rows("customer_tiers"), self.latency
        )
        self.referral_programs: CrudService[ReferralProgramRead] = CrudService(
            "referral", ReferralProgramRead, "referral_id", rows("referral_programs"), self.latency
        )
        self.feedbacks: CrudService[FeedbackRead] = CrudService(
            "feedback", FeedbackRead, "feedback_id", rows("feedbacks"), self.latency
        )
        self.promotions: CrudService[PromotionRead] = CrudService(
            "promotion", PromotionRead, "promotion_id", rows("promotions"), self.latency
        )
        self.fraud_detections: CrudService[FraudDetectionRead] = CrudService(
            "fraud detection", FraudDetectionRead, "fraud_id", rows("fraud_detections"), self.latency
        )
        self.analytics: CrudService[AnalyticsRead] = CrudService(
            "analytics", AnalyticsRead, "analytics_id", rows("analytics"), self.latency
        )
        self.admins: CrudService[AdminRead] = CrudService(
            "admin", AdminRead, "admin_id", rows("admins"), self.latency
        )

    def services(self) -> Dict[str, CrudService[Any]]:
        """Map attribute name to service, in declaration order."""
        return {name: value for name, value in vars(self).items() if isinstance(value, CrudService)}

    def record_counts(self) -> Dict[str, int]:
        return {name: len(service) for name, service in self.services().items()}


def create_store(latency: Optional[Latency] = None, seed: bool = True) -> EntityStore:
    """Build a store, filled with the demo data unless ``seed`` is false."""
    return EntityStore(latency=latency, seed=SEED_DATA if seed else None)


def init_store(app_settings: Settings) -> EntityStore:
    """Create the application's store according to ``app_settings``."""
    latency = Latency() if app_settings.simulate_latency else Latency.disabled()
    store = create_store(latency=latency, seed=app_settings.seed_data)
    logger.info(
        "Initialised entity store (%d records, latency %s)",
        sum(store.record_counts().values()),
        "simulated" if app_settings.simulate_latency else "disabled",
    )
    return store


def get_store(request: Request) -> EntityStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store
