import uuid
from sqlalchemy import Column, String, Text, Boolean, DateTime, JSON, Index, func
from sqlalchemy.dialects.postgresql import JSONB
from app.core.database import Base


class BlogPost(Base):
    """
    Blog article shown on the marketing site.

    Only rows with is_published=True are visible through the API.
    """
    __tablename__ = "blog_posts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String, nullable=False)
    author_avatar = Column(String, nullable=True)
    category = Column(String, nullable=False, index=True)
    tags = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    featured_image = Column(String, nullable=True)

    is_published = Column(Boolean, default=True, nullable=False)
    published_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_blog_posts_published_at", "is_published", "published_at"),
    )

    def __repr__(self):
        return f"<BlogPost(id={self.id}, slug='{self.slug}')>"
