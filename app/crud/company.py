"""
CRUD operations for Company model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.company import Company
from app.schemas.company import CompanyCreate


def create(db: Session, company_data: CompanyCreate) -> Company:
    """
    Create a new company.

    Args:
        db: Database session
        company_data: Validated company data

    Returns:
        Created Company instance
    """
    company = Company(**company_data.model_dump())

    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def get_by_id(db: Session, company_id: str) -> Optional[Company]:
    return db.query(Company).filter(Company.id == company_id).first()


def get_multi(db: Session) -> List[Company]:
    """All companies, newest first."""
    return db.query(Company).order_by(Company.created_at.desc(), Company.id.desc()).all()
