"""
Pydantic schemas for stored user accounts.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.common import ApiModel


class UserCreate(ApiModel):
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(..., min_length=8, max_length=72)  # bcrypt limit


class UserResponse(ApiModel):
    """User info without credentials"""
    id: str
    username: str
    created_at: Optional[datetime] = None
