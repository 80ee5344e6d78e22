import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import company as company_crud
from app.schemas.company import CompanyResponse

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[CompanyResponse])
def list_companies(db: Session = Depends(get_db)):
    """List all companies, newest first."""
    try:
        return company_crud.get_multi(db)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching companies: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch companies")


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: str, db: Session = Depends(get_db)):
    try:
        company = company_crud.get_by_id(db, company_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching company {company_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch company")

    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    return company
