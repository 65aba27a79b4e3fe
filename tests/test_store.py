"""
Tests for the entity store and its seed data.
"""
import pytest

from loyalty_admin_api.app.core.config import Settings
from loyalty_admin_api.app.core.store import EntityStore, create_store, init_store
from loyalty_admin_api.app.services.crud_service import Latency


def test_seeded_store_counts(store: EntityStore):
    assert store.record_counts() == {
        "businesses": 3,
        "products": 3,
        "customers": 3,
        "offers": 3,
        "transactions": 3,
        "redemptions": 2,
        "loyalties": 2,
        "tier_systems": 3,
        "customer_tiers": 3,
        "referral_programs": 2,
        "feedbacks": 2,
        "promotions": 2,
        "fraud_detections": 1,
        "analytics": 3,
        "admins": 2,
    }


def test_unseeded_store_is_empty(empty_store: EntityStore):
    assert set(empty_store.record_counts().values()) == {0}


@pytest.mark.asyncio
async def test_stores_do_not_share_records():
    first = create_store(latency=Latency.disabled())
    second = create_store(latency=Latency.disabled())
    await first.products.create({"name": "Desk Lamp", "category": "Lighting"})
    assert len(first.products) == 4
    assert len(second.products) == 3


@pytest.mark.asyncio
async def test_first_create_in_empty_store_gets_id_one(empty_store: EntityStore):
    tier = await empty_store.tier_systems.create({"name": "Platinum", "benefits": "Everything"})
    assert tier.tier_id == 1


def test_init_store_follows_settings():
    fast = init_store(Settings(simulate_latency=False, seed_data=False))
    assert fast.latency == Latency.disabled()
    assert len(fast.customers) == 0

    slow = init_store(Settings(simulate_latency=True, seed_data=True))
    assert slow.latency == Latency()
    assert len(slow.customers) == 3


@pytest.mark.asyncio
async def test_deleting_parent_leaves_dependents(store: EntityStore):
    assert await store.businesses.delete(1) is True
    offers = await store.offers.list()
    assert [offer.business_id for offer in offers] == [1, 2, 3]
    assert await store.businesses.get_by_id(1) is None


@pytest.mark.asyncio
async def test_seed_values_are_typed(store: EntityStore):
    transaction = await store.transactions.get_by_id(1)
    assert transaction.amount == 1200.0
    assert transaction.date.isoformat() == "2023-06-15T14:30:00"
    customer = await store.customers.get_by_id(2)
    assert customer.join_date.isoformat() == "2023-02-20"
