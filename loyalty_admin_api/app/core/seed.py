"""
Demo contents loaded into the entity store at startup.

The keys match the attribute names of ``EntityStore``.  Records are
plain dictionaries; each ``CrudService`` validates them into its
record type, so the same dictionaries can seed any number of stores.
"""

from typing import Any, Dict, List

SEED_DATA: Dict[str, List[Dict[str, Any]]] = {
    "businesses": [
        {"business_id": 1, "name": "Acme Corporation", "phone": "555-123-4567", "industry": "Technology", "address": "123 Tech Lane", "offer_id": 1},
        {"business_id": 2, "name": "Global Retail", "phone": "555-987-6543", "industry": "Retail", "address": "456 Shop Street", "offer_id": 2},
        {"business_id": 3, "name": "Food Delights", "phone": "555-456-7890", "industry": "Food & Beverage", "address": "789 Taste Avenue", "offer_id": 3},
    ],
    "products": [
        {"product_id": 1, "name": "Laptop Pro", "category": "Electronics"},
        {"product_id": 2, "name": "Office Chair", "category": "Furniture"},
        {"product_id": 3, "name": "Coffee Maker", "category": "Appliances"},
    ],
    "customers": [
        {"customer_id": 1, "name": "John Doe", "email": "john@example.com", "phone": "555-111-2222", "join_date": "2023-01-15"},
        {"customer_id": 2, "name": "Jane Smith", "email": "jane@example.com", "phone": "555-333-4444", "join_date": "2023-02-20"},
        {"customer_id": 3, "name": "Bob Johnson", "email": "bob@example.com", "phone": "555-555-6666", "join_date": "2023-03-10"},
    ],
    "offers": [
        {"offer_id": 1, "name": "Summer Sale", "business_id": 1},
        {"offer_id": 2, "name": "Holiday Special", "business_id": 2},
        {"offer_id": 3, "name": "Weekend Deal", "business_id": 3},
    ],
    "transactions": [
        {"transaction_id": 1, "customer_id": 1, "product_id": 1, "amount": 1200.00, "date": "2023-06-15T14:30:00"},
        {"transaction_id": 2, "customer_id": 2, "product_id": 2, "amount": 150.00, "date": "2023-06-20T10:15:00"},
        {"transaction_id": 3, "customer_id": 3, "product_id": 3, "amount": 80.00, "date": "2023-06-25T16:45:00"},
    ],
    "redemptions": [
        {"redemption_id": 1, "points_used": 500, "transaction_id": 1},
        {"redemption_id": 2, "points_used": 200, "transaction_id": 2},
    ],
    "loyalties": [
        {"loyalty_id": 1, "points": 1000, "issue_date": "2023-01-20", "exp_date": "2024-01-20"},
        {"loyalty_id": 2, "points": 750, "issue_date": "2023-02-25", "exp_date": "2024-02-25"},
    ],
    "tier_systems": [
        {"tier_id": 1, "name": "Bronze", "benefits": "Basic rewards, 5% discount"},
        {"tier_id": 2, "name": "Silver", "benefits": "Free shipping, 10% discount"},
        {"tier_id": 3, "name": "Gold", "benefits": "Priority support, 15% discount, exclusive offers"},
    ],
    "customer_tiers": [
        {"customer_tier_id": 1, "customer_id": 1, "tier_id": 3, "enrollment_date": "2023-01-20", "status": "active"},
        {"customer_tier_id": 2, "customer_id": 2, "tier_id": 2, "enrollment_date": "2023-02-25", "status": "active"},
        {"customer_tier_id": 3, "customer_id": 3, "tier_id": 1, "enrollment_date": "2023-03-15", "status": "pending"},
    ],
    "referral_programs": [
        {"referral_id": 1, "referred_id": 101, "referred_customer_id": 1, "points_awarded": 250, "exp_date": "2024-06-30"},
        {"referral_id": 2, "referred_id": 102, "referred_customer_id": 2, "points_awarded": 250, "exp_date": "2024-07-15"},
    ],
    "feedbacks": [
        {"feedback_id": 1, "business_id": 1, "customer_id": 1},
        {"feedback_id": 2, "business_id": 2, "customer_id": 2},
    ],
    "promotions": [
        {"promotion_id": 1, "start_date": "2023-07-01", "end_date": "2023-07-31"},
        {"promotion_id": 2, "start_date": "2023-08-01", "end_date": "2023-08-31"},
    ],
    "fraud_detections": [
        {"fraud_id": 1, "customer_id": 3},
    ],
    "analytics": [
        {"analytics_id": 1, "business_id": 1, "transaction_count": 150, "total_revenue": 15000.00, "reporting_date": "2023-06-30"},
        {"analytics_id": 2, "business_id": 2, "transaction_count": 120, "total_revenue": 12000.00, "reporting_date": "2023-06-30"},
        {"analytics_id": 3, "business_id": 3, "transaction_count": 90, "total_revenue": 9000.00, "reporting_date": "2023-06-30"},
    ],
    "admins": [
        {"admin_id": 1, "username": "admin", "email": "admin@example.com", "role": "superadmin"},
        {"admin_id": 2, "username": "manager", "email": "manager@example.com", "role": "manager"},
    ],
}
