"""
Pydantic models for customer feedback on a business.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FeedbackBase(BaseModel):
    business_id: int = Field(..., examples=[1])
    customer_id: int = Field(..., examples=[1])


class FeedbackCreate(FeedbackBase):
    pass


class FeedbackUpdate(BaseModel):
    business_id: Optional[int] = None
    customer_id: Optional[int] = None


class FeedbackRead(FeedbackBase):
    feedback_id: int
