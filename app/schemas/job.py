from pydantic import Field, model_validator
from typing import List, Optional
from datetime import datetime
from app.core.config import settings
from app.models.job import JobType
from app.schemas.common import MAX_DB_INT, ApiModel
from app.schemas.company import CompanyResponse


class JobCreate(ApiModel):
    """Schema for creating a new job listing"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    location: str = Field(..., min_length=1)
    type: JobType
    experience_level: str = Field(..., min_length=1, description="e.g. entry, mid, senior")
    salary_min: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    salary_max: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    skills: List[str] = Field(default_factory=list, description="Ordered skill tags, duplicates allowed")
    is_active: bool = True
    company_id: Optional[str] = None

    @model_validator(mode="after")
    def check_salary_range(self) -> "JobCreate":
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salaryMin must not exceed salaryMax")
        return self


class JobResponse(ApiModel):
    """Schema for job response"""
    id: str
    title: str
    description: str
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    location: str
    type: str
    experience_level: str
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    skills: List[str] = []
    is_active: bool
    posted_at: datetime
    company_id: Optional[str] = None


class JobWithCompanyResponse(JobResponse):
    """Job listing with its company nested under `company`"""
    company: Optional[CompanyResponse] = None


class JobSearchParams(ApiModel):
    """
    Filter set for job listings.

    Every filter is optional; None means "not supplied". The active-only
    restriction is not part of this model and cannot be switched off.
    """
    search: Optional[str] = Field(None, description="Substring of title or description, case-insensitive")
    location: Optional[str] = Field(None, description="Substring of location, case-insensitive")
    type: Optional[str] = Field(None, description="Exact employment type")
    experience_level: Optional[str] = Field(None, description="Exact experience level")
    salary_min: Optional[int] = Field(None, ge=0, le=MAX_DB_INT, description="Stored salary minimum must be >= this")
    salary_max: Optional[int] = Field(None, ge=0, le=MAX_DB_INT, description="Stored salary maximum must be <= this")
    limit: int = Field(settings.JOBS_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
    offset: int = Field(0, ge=0, le=MAX_DB_INT)
