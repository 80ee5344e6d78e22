import enum
import uuid
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON, Index, func
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from app.core.database import Base


class JobType(str, enum.Enum):
    """
    Employment type of a listing.

    Stored as its plain string value so listings can be filtered with an
    exact match on the query string value.
    """
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    REMOTE = "remote"
    OTHER = "other"


class Job(Base):
    """
    Job listing published by a company.

    is_active is the soft-delete marker: every read path filters on it.
    """
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=True)
    responsibilities = Column(Text, nullable=True)
    location = Column(String, nullable=False)
    type = Column(String, nullable=False, index=True)
    experience_level = Column(String, nullable=False, index=True)

    # Salary range in whole currency units
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)

    # Ordered skill tags, duplicates allowed
    skills = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    is_active = Column(Boolean, default=True, nullable=False)
    posted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    company_id = Column(String(36), ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    company = relationship("Company", back_populates="jobs")
    applications = relationship("JobApplication", back_populates="job")

    __table_args__ = (
        Index("ix_jobs_active_posted_at", "is_active", "posted_at"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', active={self.is_active})>"
