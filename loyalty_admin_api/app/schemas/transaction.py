"""
Pydantic models for purchase transactions and point redemptions.

A transaction records a customer buying a product; a redemption
records loyalty points spent against a transaction.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TransactionBase(BaseModel):
    customer_id: int = Field(..., examples=[1])
    product_id: int = Field(..., examples=[1])
    amount: float = Field(..., ge=0, examples=[1200.0])
    date: datetime = Field(..., examples=["2023-06-15T14:30:00"])


class TransactionCreate(TransactionBase):
    """Schema for recording a transaction."""
    pass


class TransactionUpdate(BaseModel):
    customer_id: Optional[int] = None
    product_id: Optional[int] = None
    amount: Optional[float] = Field(None, ge=0)
    date: Optional[datetime] = None


class TransactionRead(TransactionBase):
    transaction_id: int


class RedemptionBase(BaseModel):
    points_used: int = Field(..., ge=0, examples=[500])
    transaction_id: int = Field(..., examples=[1])


class RedemptionCreate(RedemptionBase):
    pass


class RedemptionUpdate(BaseModel):
    points_used: Optional[int] = Field(None, ge=0)
    transaction_id: Optional[int] = None


class RedemptionRead(RedemptionBase):
    redemption_id: int
