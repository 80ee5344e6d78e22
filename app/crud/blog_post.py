"""
CRUD operations for BlogPost model.

Unpublished posts are invisible to every read function.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.config import settings
from app.models.blog_post import BlogPost
from app.schemas.blog_post import BlogPostCreate


def create(db: Session, post_data: BlogPostCreate) -> BlogPost:
    """
    Create a blog post.

    Raises:
        sqlalchemy.exc.IntegrityError: If the slug is already taken
    """
    post = BlogPost(**post_data.model_dump())

    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def get_by_id(db: Session, post_id: str) -> Optional[BlogPost]:
    return db.query(BlogPost).filter(
        BlogPost.id == post_id,
        BlogPost.is_published.is_(True)
    ).first()


def get_by_slug(db: Session, slug: str) -> Optional[BlogPost]:
    return db.query(BlogPost).filter(
        BlogPost.slug == slug,
        BlogPost.is_published.is_(True)
    ).first()


def get_multi(db: Session, limit: int = settings.BLOG_PAGE_SIZE, offset: int = 0) -> List[BlogPost]:
    """
    Retrieve published posts, newest first.

    Args:
        db: Database session
        limit: Maximum number of posts to return
        offset: Number of posts to skip

    Returns:
        List of BlogPost instances
    """
    return (
        db.query(BlogPost)
        .filter(BlogPost.is_published.is_(True))
        .order_by(BlogPost.published_at.desc(), BlogPost.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
