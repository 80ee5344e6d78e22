"""
Job application model.

Uploaded documents are referenced by the opaque filenames returned from the
storage backend; this table never holds file content.
"""

import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from app.core.database import Base


class JobApplication(Base):
    """An applicant's submission for a single job."""
    __tablename__ = "job_applications"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)

    # Applicant details
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    experience = Column(String, nullable=True)  # bracket such as "2-3" (years)
    comments = Column(Text, nullable=True)

    # File references
    resume_url = Column(String, nullable=False)
    cover_letter_url = Column(String, nullable=True)
    additional_files = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    # Relationships
    job = relationship("Job", back_populates="applications")

    def __repr__(self):
        return f"<JobApplication(id={self.id}, job_id={self.job_id}, email='{self.email}')>"
