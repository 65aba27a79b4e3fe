"""
Endpoint tests for API v1.
"""
from fastapi.testclient import TestClient

API = "/api/v1"


def test_list_businesses(client: TestClient):
    response = client.get(f"{API}/businesses/")
    assert response.status_code == 200
    names = [b["name"] for b in response.json()]
    assert names == ["Acme Corporation", "Global Retail", "Food Delights"]


def test_get_missing_record_returns_404(client: TestClient):
    response = client.get(f"{API}/businesses/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Business not found"


def test_create_customer(client: TestClient):
    response = client.post(
        f"{API}/customers/",
        json={"name": "Alice Brown", "email": "alice@example.com", "phone": "555-777-8888", "join_date": "2024-04-01"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["customer_id"] == 4
    assert data["join_date"] == "2024-04-01"
    assert client.get(f"{API}/customers/4").json()["name"] == "Alice Brown"


def test_create_rejects_invalid_payload(client: TestClient):
    response = client.post(
        f"{API}/customers/",
        json={"name": "Bad Email", "email": "not-an-email", "phone": "555", "join_date": "2024-04-01"},
    )
    assert response.status_code == 422


def test_create_rejects_malformed_emails(client: TestClient):
    customer = client.post(
        f"{API}/customers/",
        json={"name": "No Domain", "email": "a@b", "phone": "555", "join_date": "2024-04-01"},
    )
    assert customer.status_code == 422
    admin = client.post(f"{API}/admins/", json={"username": "ops", "email": "garbage", "role": "manager"})
    assert admin.status_code == 422
    assert len(client.get(f"{API}/admins/").json()) == 2


def test_update_rejects_malformed_email(client: TestClient):
    response = client.put(f"{API}/admins/1", json={"email": "not-an-email"})
    assert response.status_code == 422
    assert client.get(f"{API}/admins/1").json()["email"] == "admin@example.com"


def test_partial_update(client: TestClient):
    response = client.put(f"{API}/businesses/2", json={"industry": "Wholesale"})
    assert response.status_code == 200
    data = response.json()
    assert data["industry"] == "Wholesale"
    assert data["name"] == "Global Retail"
    assert data["phone"] == "555-987-6543"


def test_update_missing_returns_404(client: TestClient):
    response = client.put(f"{API}/products/42", json={"name": "Ghost"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_update_producing_invalid_record_returns_400(client: TestClient):
    response = client.put(f"{API}/promotions/1", json={"end_date": "2023-06-01"})
    assert response.status_code == 400
    assert client.get(f"{API}/promotions/1").json()["end_date"] == "2023-07-31"


def test_delete_then_delete_again(client: TestClient):
    assert client.delete(f"{API}/offers/2").status_code == 204
    assert client.delete(f"{API}/offers/2").status_code == 404
    ids = [o["offer_id"] for o in client.get(f"{API}/offers/").json()]
    assert ids == [1, 3]


def test_delete_business_keeps_its_offers(client: TestClient):
    assert client.delete(f"{API}/businesses/1").status_code == 204
    offers = client.get(f"{API}/businesses/1/offers").json()
    assert [o["name"] for o in offers] == ["Summer Sale"]


def test_every_collection_is_mounted(client: TestClient):
    expected = {
        "businesses": 3,
        "products": 3,
        "customers": 3,
        "offers": 3,
        "transactions": 3,
        "redemptions": 2,
        "loyalties": 2,
        "tiers": 3,
        "customer-tiers": 3,
        "referrals": 2,
        "feedback": 2,
        "promotions": 2,
        "fraud-detections": 1,
        "analytics": 3,
        "admins": 2,
    }
    for prefix, count in expected.items():
        response = client.get(f"{API}/{prefix}/")
        assert response.status_code == 200, prefix
        assert len(response.json()) == count, prefix


def test_customer_relationship_routes(client: TestClient):
    assert [t["transaction_id"] for t in client.get(f"{API}/customers/2/transactions").json()] == [2]
    assert client.get(f"{API}/customers/1/tier").json()["tier_id"] == 3
    assert client.get(f"{API}/customers/99/tier").status_code == 404
    assert [r["referral_id"] for r in client.get(f"{API}/customers/1/referrals").json()] == [1]
    assert [f["feedback_id"] for f in client.get(f"{API}/customers/2/feedback").json()] == [2]
    assert [f["fraud_id"] for f in client.get(f"{API}/customers/3/fraud-detections").json()] == [1]
    assert client.get(f"{API}/customers/3/fraud-count").json() == {"customer_id": 3, "fraud_count": 1}


def test_business_and_transaction_relationship_routes(client: TestClient):
    assert [f["feedback_id"] for f in client.get(f"{API}/businesses/1/feedback").json()] == [1]
    assert [a["total_revenue"] for a in client.get(f"{API}/businesses/2/analytics").json()] == [12000.0]
    assert [r["points_used"] for r in client.get(f"{API}/transactions/2/redemptions").json()] == [200]
    assert client.get(f"{API}/transactions/99/redemptions").json() == []


def test_statistics_routes(client: TestClient):
    overview = client.get(f"{API}/statistics/overview").json()
    assert overview["customers_count"] == 3
    assert overview["total_revenue"] == 1430.0
    assert [c["customer_id"] for c in overview["recent_customers"]] == [3, 2, 1]

    shares = [row["revenue_share"] for row in client.get(f"{API}/statistics/businesses").json()]
    assert shares == [41.67, 33.33, 25.0]

    by_business = client.get(f"{API}/statistics/revenue-by-business").json()
    assert [row["name"] for row in by_business] == ["Acme Corporation", "Global Retail", "Food Delights"]

    over_time = client.get(f"{API}/statistics/revenue-over-time").json()
    assert over_time == [{"reporting_date": "2023-06-30", "transaction_count": 360, "revenue": 36000.0}]


def test_store_is_reset_on_restart(client: TestClient):
    client.delete(f"{API}/customers/1")
    store = client.app.state.store
    assert len(store.customers) == 2

    with TestClient(client.app) as restarted:
        assert len(restarted.get(f"{API}/customers/").json()) == 3
