"""
Company model.

Companies are owned independently of jobs; a job references exactly one
company through jobs.company_id.
"""

import uuid
from sqlalchemy import Column, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """An employer that publishes job listings."""
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    name = Column(String, nullable=False)
    logo = Column(String, nullable=True)  # URL
    description = Column(Text, nullable=True)
    industry = Column(String, nullable=True)
    size = Column(String, nullable=True)
    location = Column(String, nullable=True)
    website = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    # Relationships
    jobs = relationship("Job", back_populates="company", passive_deletes=True)

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}')>"
