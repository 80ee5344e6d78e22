"""
CRUD operations for job applications.

File references arrive as plain strings already returned by the storage
backend; this layer knows nothing about file content.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.job_application import JobApplication
from app.schemas.job_application import JobApplicationCreate


def create(db: Session, application_data: JobApplicationCreate) -> JobApplication:
    """
    Insert a job application.

    Args:
        db: Database session
        application_data: Validated application including stored file names

    Returns:
        Created JobApplication with id and applied_at
    """
    application = JobApplication(
        job_id=application_data.job_id,
        first_name=application_data.first_name,
        last_name=application_data.last_name,
        email=application_data.email,
        phone=application_data.phone,
        experience=application_data.experience,
        comments=application_data.comments,
        resume_url=application_data.resume_url,
        cover_letter_url=application_data.cover_letter_url,
        additional_files=list(application_data.additional_files),
    )

    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Optional[JobApplication]:
    return db.query(JobApplication).filter(JobApplication.id == application_id).first()


def get_multi(db: Session, job_id: Optional[str] = None) -> List[JobApplication]:
    """
    Retrieve applications, newest first.

    Args:
        db: Database session
        job_id: Optional job filter

    Returns:
        List of JobApplication instances
    """
    query = db.query(JobApplication)

    if job_id is not None:
        query = query.filter(JobApplication.job_id == job_id)

    return query.order_by(JobApplication.applied_at.desc(), JobApplication.id.desc()).all()
