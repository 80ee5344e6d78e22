"""
Shared base for API schemas.

Attributes are snake_case in Python and camelCase on the wire, so responses
read `salaryMin`, `postedAt`, `company.createdAt` and so on.
"""

from typing import Annotated
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel
from app.core.config import settings

# Largest value an INTEGER column (and a Postgres OFFSET we accept) can hold
MAX_DB_INT = 2147483647


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the text exactly as submitted"""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e))
    return value


EmailText = Annotated[str, AfterValidator(_check_email)]


class ApiModel(BaseModel):
    """Base schema with camelCase aliases; accepts either spelling on input"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


class PageParams(ApiModel):
    """Plain limit/offset pagination"""
    limit: int = Field(settings.BLOG_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
    offset: int = Field(0, ge=0, le=MAX_DB_INT)
