"""
Loyalty Admin API.

In‑memory data and service layer behind the loyalty‑program
administration dashboard: businesses, customers, transactions, tiers,
referrals and the rest, each served by a generic CRUD service and
exposed over FastAPI.  Start with ``app.main.create_app``.
"""

__all__ = []
