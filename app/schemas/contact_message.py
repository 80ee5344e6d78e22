from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.common import ApiModel, EmailText


class ContactMessageCreate(ApiModel):
    """Contact form submission. Unknown fields (e.g. acceptPrivacy) are ignored."""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailText
    phone: Optional[str] = Field(None, max_length=50)
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class ContactMessageResponse(ApiModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    created_at: datetime
