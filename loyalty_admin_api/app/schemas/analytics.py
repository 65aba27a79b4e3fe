"""
Pydantic models for analytics snapshots and dashboard statistics.

``Analytics`` rows are stored per business and reporting date.  The
remaining models shape the aggregated views computed by
``StatisticsService``; they are never stored.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from .customer import CustomerRead


class AnalyticsBase(BaseModel):
    business_id: int = Field(..., examples=[1])
    transaction_count: int = Field(..., ge=0, examples=[150])
    total_revenue: float = Field(..., ge=0, examples=[15000.0])
    reporting_date: date = Field(..., examples=["2023-06-30"])


class AnalyticsCreate(AnalyticsBase):
    pass


class AnalyticsUpdate(BaseModel):
    business_id: Optional[int] = None
    transaction_count: Optional[int] = Field(None, ge=0)
    total_revenue: Optional[float] = Field(None, ge=0)
    reporting_date: Optional[date] = None


class AnalyticsRead(AnalyticsBase):
    analytics_id: int


class DashboardOverview(BaseModel):
    """Headline numbers shown on the dashboard landing page."""

    customers_count: int
    businesses_count: int
    products_count: int
    transactions_count: int
    tiers_count: int
    total_revenue: float = Field(..., description="Sum of all transaction amounts")
    analytics_total_revenue: float = Field(..., description="Sum of revenue across analytics rows")
    recent_customers: List[CustomerRead]


class BusinessPerformance(BaseModel):
    business_id: int
    name: str
    revenue: float
    revenue_share: float = Field(..., description="Percentage of analytics total revenue")


class BusinessRevenue(BaseModel):
    business_id: int
    name: str
    revenue: float


class RevenuePoint(BaseModel):
    reporting_date: date
    transaction_count: int
    revenue: float


class FraudCount(BaseModel):
    customer_id: int
    fraud_count: int
