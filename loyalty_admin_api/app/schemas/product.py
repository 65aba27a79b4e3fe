"""
Pydantic models for the product catalogue and promotions.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Laptop Pro"])
    category: str = Field(..., min_length=1, examples=["Electronics"])


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None


class ProductRead(ProductBase):
    product_id: int


class PromotionBase(BaseModel):
    start_date: date = Field(..., examples=["2023-07-01"])
    end_date: date = Field(..., examples=["2023-07-31"])

    @model_validator(mode="after")
    def check_window(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class PromotionCreate(PromotionBase):
    """Schema for scheduling a promotion window."""
    pass


class PromotionUpdate(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class PromotionRead(PromotionBase):
    promotion_id: int
