"""
Pydantic schemas for Company API requests/responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.common import ApiModel


class CompanyBase(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    logo: Optional[str] = Field(None, description="Logo image URL")
    description: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[str] = Field(None, description="Headcount bracket, e.g. '50-200'")
    location: Optional[str] = None
    website: Optional[str] = None


class CompanyCreate(CompanyBase):
    """Schema for creating a company"""


class CompanyResponse(CompanyBase):
    """Schema for company response"""
    id: str
    created_at: datetime
