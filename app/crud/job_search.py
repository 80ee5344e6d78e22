"""
Job search query composition.

Translates a JobSearchParams filter set into SQLAlchemy predicates and runs
the paginated listing query. Predicate building is a pure function so each
filter can be checked on its own without a database.
"""

from typing import List, Optional
from sqlalchemy import ColumnElement, and_, or_, select
from sqlalchemy.orm import Session, contains_eager
from app.core.config import settings
from app.models.company import Company
from app.models.job import Job
from app.schemas.job import JobSearchParams


def active_only() -> ColumnElement[bool]:
    """Soft-delete gate applied to every job read path"""
    return Job.is_active.is_(True)


def build_job_predicates(filters: Optional[JobSearchParams] = None) -> List[ColumnElement[bool]]:
    """
    Build the ordered list of WHERE predicates for a job listing.

    The first predicate is always the active-only gate. Each supplied filter
    then contributes exactly one predicate, in field order. A filter counts as
    supplied when it is not None, so salary bounds of 0 are honoured.

    Args:
        filters: Optional filter set; None means "no user filters"

    Returns:
        Predicates to be combined with AND
    """
    predicates = [active_only()]
    if filters is None:
        return predicates

    if filters.search is not None:
        predicates.append(or_(
            Job.title.icontains(filters.search, autoescape=True),
            Job.description.icontains(filters.search, autoescape=True),
        ))

    if filters.location is not None:
        predicates.append(Job.location.icontains(filters.location, autoescape=True))

    if filters.type is not None:
        predicates.append(Job.type == filters.type)

    if filters.experience_level is not None:
        predicates.append(Job.experience_level == filters.experience_level)

    # NULL salaries never satisfy a bound
    if filters.salary_min is not None:
        predicates.append(Job.salary_min >= filters.salary_min)

    if filters.salary_max is not None:
        predicates.append(Job.salary_max <= filters.salary_max)

    return predicates


def _listing_query(predicates: List[ColumnElement[bool]]):
    return (
        select(Job)
        .outerjoin(Job.company)
        .options(contains_eager(Job.company))
        .where(and_(*predicates))
        # id breaks ties between rows posted in the same instant
        .order_by(Job.posted_at.desc(), Job.id.desc())
    )


def search_jobs(db: Session, filters: Optional[JobSearchParams] = None) -> List[Job]:
    """
    Run a filtered, paginated job listing.

    Results are newest first, each with `company` loaded (None if the
    company row is missing). No total count is computed; callers compare the
    result length to `limit` to decide whether another page exists.

    Args:
        db: Database session
        filters: Filter set including limit/offset (defaults apply when None)

    Returns:
        At most `filters.limit` Job instances
    """
    filters = filters or JobSearchParams()
    query = _listing_query(build_job_predicates(filters)).offset(filters.offset).limit(filters.limit)
    return list(db.scalars(query).unique().all())


def featured_jobs(db: Session, limit: int = settings.FEATURED_JOBS_LIMIT) -> List[Job]:
    """Newest active jobs with no user filters applied."""
    query = _listing_query(build_job_predicates()).limit(limit)
    return list(db.scalars(query).unique().all())
