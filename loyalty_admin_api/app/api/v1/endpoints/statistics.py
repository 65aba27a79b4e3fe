"""
Statistics endpoints for API v1.

Read‑only aggregated views backing the dashboard landing page and
the analytics charts.
"""

from typing import List

from fastapi import APIRouter, Depends

from loyalty_admin_api.app.core.store import EntityStore, get_store
from loyalty_admin_api.app.schemas.analytics import (
    BusinessPerformance,
    BusinessRevenue,
    DashboardOverview,
    RevenuePoint,
)
from loyalty_admin_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/overview", response_model=DashboardOverview)
async def get_overview(store: EntityStore = Depends(get_store)) -> DashboardOverview:
    """Return entity counts, revenue totals and the five newest customers."""
    return await StatisticsService.overview(store)


@router.get("/businesses", response_model=List[BusinessPerformance])
async def get_business_performance(store: EntityStore = Depends(get_store)) -> List[BusinessPerformance]:
    return await StatisticsService.business_performance(store)


@router.get("/revenue-by-business", response_model=List[BusinessRevenue])
async def get_revenue_by_business(store: EntityStore = Depends(get_store)) -> List[BusinessRevenue]:
    return await StatisticsService.revenue_by_business(store)


@router.get("/revenue-over-time", response_model=List[RevenuePoint])
async def get_revenue_over_time(store: EntityStore = Depends(get_store)) -> List[RevenuePoint]:
    """Revenue and transaction counts per reporting date, oldest first."""
    return await StatisticsService.revenue_over_time(store)
