"""
Pydantic schemas for job applications.

ApplicationForm covers the multipart text fields and is validated before any
uploaded file is stored. JobApplicationCreate adds the job reference and the
stored file names once the uploads have been persisted.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import Field
from app.schemas.common import ApiModel, EmailText


class ApplicationForm(ApiModel):
    """Applicant-supplied fields from the application form."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailText
    phone: Optional[str] = Field(None, max_length=50)
    experience: Optional[str] = Field(None, description="Years of experience bracket, e.g. '2-3' or '10+'")
    comments: Optional[str] = None


class JobApplicationCreate(ApplicationForm):
    """Validated application ready to insert."""
    job_id: str
    resume_url: str = Field(..., min_length=1, description="Stored resume filename")
    cover_letter_url: Optional[str] = Field(None, description="Stored cover letter filename")
    additional_files: List[str] = Field(default_factory=list, max_length=5)


class JobApplicationResponse(ApiModel):
    """Persisted application as returned to the client."""
    id: str
    job_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    experience: Optional[str] = None
    comments: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter_url: Optional[str] = None
    additional_files: List[str] = []
    applied_at: datetime
