"""
Pydantic models for businesses and their offers.

A business registers with the loyalty program and may point at one
featured offer through ``offer_id``; offers in turn reference the
business that runs them.  Neither reference is enforced: an offer may
name a business that has since been deleted.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class BusinessBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Acme Corporation"])
    phone: str = Field(..., min_length=1, examples=["555-123-4567"])
    industry: Optional[str] = Field(None, examples=["Technology"])
    address: Optional[str] = Field(None, examples=["123 Tech Lane"])
    offer_id: Optional[int] = Field(None, examples=[1], description="Featured offer, if any")

    @field_validator("name", "phone")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class BusinessCreate(BusinessBase):
    """Schema for registering a business."""
    pass


class BusinessUpdate(BaseModel):
    """Partial update for a business; only provided fields change."""

    name: Optional[str] = None
    phone: Optional[str] = None
    industry: Optional[str] = None
    address: Optional[str] = None
    offer_id: Optional[int] = None


class BusinessRead(BusinessBase):
    """Stored business record."""

    business_id: int


class OfferBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Summer Sale"])
    business_id: Optional[int] = Field(None, examples=[1], description="Business running the offer")


class OfferCreate(OfferBase):
    pass


class OfferUpdate(BaseModel):
    name: Optional[str] = None
    business_id: Optional[int] = None


class OfferRead(OfferBase):
    offer_id: int
