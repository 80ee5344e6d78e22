import logging
import os
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, File, Form, UploadFile
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.deps import parse_featured_page, parse_job_filters
from app.core.storage import StorageBackend, StorageError, get_storage
from app.crud import job as job_crud
from app.crud import job_application as application_crud
from app.schemas.common import PageParams
from app.schemas.job import JobSearchParams, JobWithCompanyResponse
from app.schemas.job_application import ApplicationForm, JobApplicationCreate, JobApplicationResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "application/pdf",
    "application/msword",  # .doc
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
    "image/jpeg",
    "image/jpg",
    "image/png",
}
MAX_ADDITIONAL_FILES = 5


@router.get("", response_model=List[JobWithCompanyResponse])
def list_jobs(
    filters: JobSearchParams = Depends(parse_job_filters),
    db: Session = Depends(get_db)
):
    """
    List active jobs, newest first.

    Query parameters (all optional):
    - search: substring of title or description (case-insensitive)
    - location: substring of location (case-insensitive)
    - type: exact employment type (full-time, part-time, contract, remote, other)
    - experienceLevel: exact experience level
    - salaryMin / salaryMax: integer salary bounds
    - limit (default 20, max 100) / offset (default 0)

    An empty list is a normal result, not an error.
    """
    try:
        return job_crud.get_multi(db, filters)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch jobs")


@router.get("/featured", response_model=List[JobWithCompanyResponse])
def list_featured_jobs(
    page: PageParams = Depends(parse_featured_page),
    db: Session = Depends(get_db)
):
    """Newest active jobs for the home page (default 6)."""
    try:
        return job_crud.get_featured(db, limit=page.limit)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching featured jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch featured jobs")


@router.get("/{job_id}", response_model=JobWithCompanyResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    """
    Retrieve an active job by ID with its company.

    Inactive jobs are reported as not found.
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() == "":
        return None
    return value


def _present(uploads: Optional[List[UploadFile]]) -> List[UploadFile]:
    """Browsers send an empty part for untouched file inputs; ignore those"""
    return [upload for upload in uploads or [] if upload.filename]


def _upload_size(upload: UploadFile) -> int:
    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    return size


def _validate_uploads(
    resume: List[UploadFile],
    cover_letter: List[UploadFile],
    additional_files: List[UploadFile],
) -> None:
    """
    Enforce file counts, MIME types and size limits.

    Raises:
        HTTPException 400: On the first violation found
    """
    if not resume:
        raise HTTPException(status_code=400, detail="A resume file is required")
    if len(resume) > 1:
        raise HTTPException(status_code=400, detail="Only one resume file is allowed")
    if len(cover_letter) > 1:
        raise HTTPException(status_code=400, detail="Only one cover letter file is allowed")
    if len(additional_files) > MAX_ADDITIONAL_FILES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {MAX_ADDITIONAL_FILES} additional files are allowed"
        )

    for upload in resume + cover_letter + additional_files:
        if upload.content_type not in ALLOWED_CONTENT_TYPES:
            raise HTTPException(
                status_code=400,
                detail="Invalid file type. Only PDF, DOC, DOCX, and images are allowed."
            )
        if _upload_size(upload) > settings.MAX_UPLOAD_SIZE:
            raise HTTPException(
                status_code=400,
                detail=f"File {upload.filename} exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB limit"
            )


def _discard(storage: StorageBackend, filenames: List[str]) -> None:
    for filename in filenames:
        if not storage.delete_file(filename):
            logger.error(f"Failed to clean up stored file {filename}")


@router.post("/{job_id}/apply", status_code=201, response_model=JobApplicationResponse)
def apply_to_job(
    job_id: str,
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    experience: Optional[str] = Form(None),
    comments: Optional[str] = Form(None),
    resume: Optional[List[UploadFile]] = File(None),
    cover_letter: Optional[List[UploadFile]] = File(None, alias="coverLetter"),
    additional_files: Optional[List[UploadFile]] = File(None, alias="additionalFiles"),
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
):
    """
    Submit an application for an active job.

    Multipart form fields: firstName, lastName, email, phone?, experience?,
    comments?. Files: resume (required, 1), coverLetter (optional, 1),
    additionalFiles (optional, up to 5). Accepted types: PDF, DOC, DOCX,
    JPEG, PNG; 10MB per file.

    Flow:
    1. Verify the job exists and is active (404 otherwise)
    2. Validate text fields and files (400 otherwise); nothing is stored yet
    3. Save files through the storage backend
    4. Insert the application; stored files are removed if the insert fails

    Returns:
        The persisted application, including stored file names
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching job {job_id} for application: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job application")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    # 1. Validate applicant fields before touching storage
    try:
        form = ApplicationForm(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=_blank_to_none(phone),
            experience=_blank_to_none(experience),
            comments=_blank_to_none(comments),
        )
    except ValidationError as e:
        logger.warning(f"Rejected application for job {job_id}: {e.errors(include_url=False)}")
        raise HTTPException(status_code=400, detail="Invalid application data")

    resume_files = _present(resume)
    cover_letter_files = _present(cover_letter)
    extra_files = _present(additional_files)
    _validate_uploads(resume_files, cover_letter_files, extra_files)

    # 2. Persist files
    stored: List[str] = []
    try:
        for upload in resume_files + cover_letter_files + extra_files:
            stored.append(storage.upload_file(upload.file, upload.filename, upload.content_type))
    except StorageError as e:
        logger.error(f"Failed to save application files for job {job_id}: {e}")
        _discard(storage, stored)
        raise HTTPException(status_code=500, detail="Failed to save uploaded files")

    resume_name = stored[0]
    cover_letter_name = stored[1] if cover_letter_files else None
    extra_names = stored[1 + len(cover_letter_files):]
    logger.info(f"Stored {len(stored)} file(s) for application to job {job_id}")

    # 3. Insert the application row; stored files must not outlive a failure here
    try:
        application_data = JobApplicationCreate(
            **form.model_dump(),
            job_id=job.id,
            resume_url=resume_name,
            cover_letter_url=cover_letter_name,
            additional_files=extra_names,
        )
        application = application_crud.create(db, application_data)
    except (ValidationError, SQLAlchemyError) as e:
        db.rollback()
        _discard(storage, stored)
        logger.error(f"Failed to create application for job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job application")

    logger.info(f"Created application {application.id} for job {job_id}")
    return application
