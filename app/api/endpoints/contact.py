import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import contact_message as contact_crud
from app.schemas.contact_message import ContactMessageCreate, ContactMessageResponse

router = APIRouter(prefix="/contact", tags=["Contact"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=ContactMessageResponse)
def create_contact_message(
    request: ContactMessageCreate,
    db: Session = Depends(get_db)
):
    """
    Store a contact form submission.

    Body: {name, email, phone?, subject, message}. Invalid bodies are
    rejected with 400 by the validation handler before this runs.
    """
    try:
        message = contact_crud.create(db, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating contact message: {e}")
        raise HTTPException(status_code=500, detail="Failed to send message")

    logger.info(f"Stored contact message {message.id}")
    return message
