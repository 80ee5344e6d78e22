"""
FastAPI dependencies that turn raw query strings into validated parameters.

All numeric query parameters go through here so malformed values are
rejected with a 400 instead of degrading into filters that match nothing.
Blank values ("?search=&salaryMin=") count as not supplied.
"""

import logging
from typing import Annotated, Any, Dict, Optional
from fastapi import HTTPException, Query, status
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.common import PageParams
from app.schemas.job import JobSearchParams

logger = logging.getLogger(__name__)

INVALID_QUERY = "Invalid query parameters"


def _supplied(values: Dict[str, Optional[str]]) -> Dict[str, Any]:
    """Drop parameters that are missing or blank"""
    return {key: value for key, value in values.items() if value is not None and value.strip() != ""}


def parse_job_filters(
    search: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Annotated[Optional[str], Query(alias="type")] = None,
    experience_level: Annotated[Optional[str], Query(alias="experienceLevel")] = None,
    salary_min: Annotated[Optional[str], Query(alias="salaryMin")] = None,
    salary_max: Annotated[Optional[str], Query(alias="salaryMax")] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> JobSearchParams:
    """
    Build the job filter set from the query string.

    Raises:
        HTTPException 400: If a numeric parameter is not an integer or is out of range
    """
    raw = _supplied({
        "search": search,
        "location": location,
        "type": job_type,
        "experience_level": experience_level,
        "salary_min": salary_min,
        "salary_max": salary_max,
        "limit": limit,
        "offset": offset,
    })
    for key in ("salary_min", "salary_max", "limit", "offset"):
        if key in raw:
            raw[key] = raw[key].strip()

    try:
        return JobSearchParams(**raw)
    except ValidationError as e:
        logger.warning(f"Rejected job filters {raw}: {e.errors(include_url=False)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_QUERY)


def _parse_page(limit: Optional[str], offset: Optional[str], default_limit: int) -> PageParams:
    raw = {key: value.strip() for key, value in _supplied({"limit": limit, "offset": offset}).items()}
    raw.setdefault("limit", default_limit)

    try:
        return PageParams(**raw)
    except ValidationError as e:
        logger.warning(f"Rejected pagination {raw}: {e.errors(include_url=False)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_QUERY)


def parse_blog_page(limit: Optional[str] = None, offset: Optional[str] = None) -> PageParams:
    """limit/offset for the blog listing (default page size BLOG_PAGE_SIZE)"""
    return _parse_page(limit, offset, settings.BLOG_PAGE_SIZE)


def parse_featured_page(limit: Optional[str] = None) -> PageParams:
    """limit for the featured jobs strip (default FEATURED_JOBS_LIMIT)"""
    return _parse_page(limit, None, settings.FEATURED_JOBS_LIMIT)
