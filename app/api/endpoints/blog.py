import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import parse_blog_page
from app.crud import blog_post as blog_crud
from app.schemas.blog_post import BlogPostResponse
from app.schemas.common import PageParams

router = APIRouter(prefix="/blog", tags=["Blog"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[BlogPostResponse])
def list_blog_posts(
    page: PageParams = Depends(parse_blog_page),
    db: Session = Depends(get_db)
):
    """
    List published posts, newest first.

    Args:
        limit: Maximum number of posts (default: 20, max: 100)
        offset: Number of posts to skip (default: 0)
    """
    try:
        return blog_crud.get_multi(db, limit=page.limit, offset=page.offset)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching blog posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch blog posts")


@router.get("/{slug}", response_model=BlogPostResponse)
def get_blog_post(slug: str, db: Session = Depends(get_db)):
    """Retrieve a published post by slug."""
    try:
        post = blog_crud.get_by_slug(db, slug)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching blog post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch blog post")

    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")

    return post
