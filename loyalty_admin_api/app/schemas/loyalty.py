"""
Pydantic models for the loyalty program itself.

``Loyalty`` is a block of points issued with an expiry date,
``TierSystem`` describes the membership tiers (Bronze, Silver, ...)
and ``ReferralProgram`` records points awarded to a customer for
referring someone.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class LoyaltyBase(BaseModel):
    points: int = Field(..., ge=0, examples=[1000])
    issue_date: date = Field(..., examples=["2023-01-20"])
    exp_date: date = Field(..., examples=["2024-01-20"])

    @model_validator(mode="after")
    def check_expiry(self):
        if self.exp_date < self.issue_date:
            raise ValueError("exp_date must not be before issue_date")
        return self


class LoyaltyCreate(LoyaltyBase):
    pass


class LoyaltyUpdate(BaseModel):
    points: Optional[int] = Field(None, ge=0)
    issue_date: Optional[date] = None
    exp_date: Optional[date] = None


class LoyaltyRead(LoyaltyBase):
    loyalty_id: int


class TierSystemBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Gold"])
    benefits: str = Field(..., examples=["Priority support, 15% discount, exclusive offers"])


class TierSystemCreate(TierSystemBase):
    pass


class TierSystemUpdate(BaseModel):
    name: Optional[str] = None
    benefits: Optional[str] = None


class TierSystemRead(TierSystemBase):
    tier_id: int


class ReferralProgramBase(BaseModel):
    referred_id: int = Field(..., examples=[101], description="External id of the referred person")
    referred_customer_id: int = Field(..., examples=[1], description="Customer credited with the referral")
    points_awarded: int = Field(..., ge=0, examples=[250])
    exp_date: date = Field(..., examples=["2024-06-30"])


class ReferralProgramCreate(ReferralProgramBase):
    pass


class ReferralProgramUpdate(BaseModel):
    referred_id: Optional[int] = None
    referred_customer_id: Optional[int] = None
    points_awarded: Optional[int] = Field(None, ge=0)
    exp_date: Optional[date] = None


class ReferralProgramRead(ReferralProgramBase):
    referral_id: int
