"""
Service layer for statistics and reporting.

This module computes the aggregated views shown on the dashboard:
headline counts and revenue, per‑business performance, revenue by
business and revenue over time.  Everything is derived on request
from the store's current contents; nothing is cached.

Analytics rows whose ``business_id`` no longer matches a business are
still counted.  They are reported under a ``"Business <id>"``
placeholder name instead of being dropped.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Dict, List

from ..core.store import EntityStore
from ..schemas.analytics import (
    BusinessPerformance,
    BusinessRevenue,
    DashboardOverview,
    FraudCount,
    RevenuePoint,
)

RECENT_CUSTOMERS_LIMIT = 5


def _placeholder_name(business_id: int) -> str:
    return f"Business {business_id}"


class StatisticsService:
    """Aggregated metrics for the dashboard and analytics pages."""

    @classmethod
    async def overview(cls, store: EntityStore) -> DashboardOverview:
        """Return entity counts, revenue totals and the newest customers.

        ``total_revenue`` sums transaction amounts while
        ``analytics_total_revenue`` sums the reported revenue of the
        analytics rows; the two are independent figures.
        """
        customers, businesses, products, transactions, tiers, analytics = await asyncio.gather(
            store.customers.list(),
            store.businesses.list(),
            store.products.list(),
            store.transactions.list(),
            store.tier_systems.list(),
            store.analytics.list(),
        )
        recent = sorted(customers, key=lambda customer: customer.join_date, reverse=True)
        overview = DashboardOverview(
            customers_count=len(customers),
            businesses_count=len(businesses),
            products_count=len(products),
            transactions_count=len(transactions),
            tiers_count=len(tiers),
            total_revenue=sum(transaction.amount for transaction in transactions),
            analytics_total_revenue=sum(row.total_revenue for row in analytics),
            recent_customers=recent[:RECENT_CUSTOMERS_LIMIT],
        )
        logging.getLogger(__name__).debug(
            "Computed overview: %d customers, revenue %.2f",
            overview.customers_count,
            overview.total_revenue,
        )
        return overview

    @classmethod
    async def business_performance(cls, store: EntityStore) -> List[BusinessPerformance]:
        """Return each business's revenue and share of analytics revenue.

        A business's revenue is taken from its first analytics row (0
        when it has none).  The share is a percentage of the revenue
        summed over all analytics rows, rounded to two decimals, and
        0 when that total is 0.
        """
        businesses, analytics = await asyncio.gather(store.businesses.list(), store.analytics.list())
        total = sum(row.total_revenue for row in analytics)
        results: List[BusinessPerformance] = []
        for business in businesses:
            row = next((a for a in analytics if a.business_id == business.business_id), None)
            revenue = row.total_revenue if row is not None else 0.0
            share = round(revenue / total * 100, 2) if total > 0 else 0.0
            results.append(
                BusinessPerformance(
                    business_id=business.business_id,
                    name=business.name,
                    revenue=revenue,
                    revenue_share=share,
                )
            )
        return results

    @classmethod
    async def revenue_by_business(cls, store: EntityStore) -> List[BusinessRevenue]:
        """Sum analytics revenue per business, in first‑seen order."""
        businesses, analytics = await asyncio.gather(store.businesses.list(), store.analytics.list())
        names = {business.business_id: business.name for business in businesses}
        totals: Dict[int, float] = {}
        for row in analytics:
            totals[row.business_id] = totals.get(row.business_id, 0.0) + row.total_revenue
        return [
            BusinessRevenue(
                business_id=business_id,
                name=names.get(business_id, _placeholder_name(business_id)),
                revenue=revenue,
            )
            for business_id, revenue in totals.items()
        ]

    @classmethod
    async def revenue_over_time(cls, store: EntityStore) -> List[RevenuePoint]:
        """Sum transaction counts and revenue per reporting date, oldest first."""
        analytics = await store.analytics.list()
        points: Dict[date, RevenuePoint] = {}
        for row in analytics:
            point = points.get(row.reporting_date)
            if point is None:
                points[row.reporting_date] = RevenuePoint(
                    reporting_date=row.reporting_date,
                    transaction_count=row.transaction_count,
                    revenue=row.total_revenue,
                )
            else:
                point.transaction_count += row.transaction_count
                point.revenue += row.total_revenue
        return [points[day] for day in sorted(points)]

    @classmethod
    async def fraud_count_for_customer(cls, store: EntityStore, customer_id: int) -> FraudCount:
        flags = await store.fraud_detections.where(lambda fraud: fraud.customer_id == customer_id)
        return FraudCount(customer_id=customer_id, fraud_count=len(flags))
