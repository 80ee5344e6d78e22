from datetime import datetime
from typing import List, Optional
from pydantic import Field
from app.schemas.common import ApiModel


class BlogPostCreate(ApiModel):
    """Schema for creating a blog post"""
    title: str = Field(..., min_length=1, max_length=300)
    slug: str = Field(..., pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$", description="URL-safe unique identifier")
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    author_avatar: Optional[str] = None
    category: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    is_published: bool = True


class BlogPostResponse(ApiModel):
    """Schema for blog post response"""
    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    author: str
    author_avatar: Optional[str] = None
    category: str
    tags: List[str] = []
    featured_image: Optional[str] = None
    is_published: bool
    published_at: datetime
