"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer. Listing queries
live in app.crud.job_search; every read path here is limited to active jobs.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload
from app.core.config import settings
from app.crud.job_search import active_only, featured_jobs, search_jobs
from app.models.job import Job
from app.schemas.job import JobCreate, JobSearchParams


def create(db: Session, job_data: JobCreate) -> Job:
    """
    Create a new job listing in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id and posted_at
    """
    db_job = Job(
        title=job_data.title,
        description=job_data.description,
        requirements=job_data.requirements,
        responsibilities=job_data.responsibilities,
        location=job_data.location,
        type=job_data.type.value,
        experience_level=job_data.experience_level,
        salary_min=job_data.salary_min,
        salary_max=job_data.salary_max,
        skills=list(job_data.skills),
        is_active=job_data.is_active,
        company_id=job_data.company_id,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: str) -> Optional[Job]:
    """
    Retrieve an active job by its ID, with its company loaded.

    Args:
        db: Database session
        job_id: Job ID to retrieve

    Returns:
        Job instance if found and active, None otherwise
    """
    query = (
        select(Job)
        .options(joinedload(Job.company))
        .where(Job.id == job_id, active_only())
    )
    return db.scalars(query).first()


def get_multi(db: Session, filters: Optional[JobSearchParams] = None) -> List[Job]:
    """
    Retrieve active jobs matching the filter set, newest first.

    Args:
        db: Database session
        filters: Optional filters plus limit/offset

    Returns:
        List of Job instances
    """
    return search_jobs(db, filters)


def get_featured(db: Session, limit: int = settings.FEATURED_JOBS_LIMIT) -> List[Job]:
    """
    Retrieve the newest active jobs for the home page.

    Args:
        db: Database session
        limit: Maximum number of jobs to return

    Returns:
        List of Job instances
    """
    return featured_jobs(db, limit=limit)


# TODO: add deactivate(db, job_id) setting is_active=False once an admin
# surface exists to call it; nothing writes the flag today.
