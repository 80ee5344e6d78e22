from typing import List
from sqlalchemy.orm import Session
from app.models.contact_message import ContactMessage
from app.schemas.contact_message import ContactMessageCreate


def create(db: Session, message_data: ContactMessageCreate) -> ContactMessage:
    """Store a contact form submission and return it with id and created_at."""
    message = ContactMessage(
        name=message_data.name,
        email=message_data.email,
        phone=message_data.phone,
        subject=message_data.subject,
        message=message_data.message,
    )

    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def get_multi(db: Session) -> List[ContactMessage]:
    """All contact messages, newest first."""
    return db.query(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()
