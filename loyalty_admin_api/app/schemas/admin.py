"""
Pydantic models for dashboard administrators.

Admins are plain records here; credentials are not stored.
"""

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

AdminRole = Literal["superadmin", "manager"]


class AdminBase(BaseModel):
    username: str = Field(..., min_length=1, examples=["admin"])
    email: EmailStr = Field(..., examples=["admin@example.com"])
    role: AdminRole = Field("manager", examples=["superadmin"])


class AdminCreate(AdminBase):
    pass


class AdminUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[AdminRole] = None


class AdminRead(AdminBase):
    admin_id: int
