"""
Pydantic models for customers and customer‑scoped records.

Besides the customer itself this module holds the records that hang
off a customer: tier enrolments (``CustomerTier``) and fraud flags
(``FraudDetection``).
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

TierStatus = Literal["active", "pending", "inactive"]


class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["John Doe"])
    email: EmailStr = Field(..., examples=["john@example.com"])
    phone: str = Field(..., examples=["555-111-2222"])
    join_date: date = Field(..., examples=["2023-01-15"])


class CustomerCreate(CustomerBase):
    """Schema for enrolling a customer."""
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    join_date: Optional[date] = None


class CustomerRead(CustomerBase):
    customer_id: int


class CustomerTierBase(BaseModel):
    customer_id: int = Field(..., examples=[1])
    tier_id: int = Field(..., examples=[3])
    enrollment_date: date = Field(..., examples=["2023-01-20"])
    status: TierStatus = Field("active", examples=["active"])


class CustomerTierCreate(CustomerTierBase):
    """Schema for enrolling a customer in a tier."""
    pass


class CustomerTierUpdate(BaseModel):
    customer_id: Optional[int] = None
    tier_id: Optional[int] = None
    enrollment_date: Optional[date] = None
    status: Optional[TierStatus] = None


class CustomerTierRead(CustomerTierBase):
    customer_tier_id: int


class FraudDetectionBase(BaseModel):
    customer_id: int = Field(..., examples=[3], description="Customer flagged for review")


class FraudDetectionCreate(FraudDetectionBase):
    pass


class FraudDetectionUpdate(BaseModel):
    customer_id: Optional[int] = None


class FraudDetectionRead(FraudDetectionBase):
    fraud_id: int
