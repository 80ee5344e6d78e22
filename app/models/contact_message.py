import uuid
from sqlalchemy import Column, String, Text, DateTime, func
from app.core.database import Base


class ContactMessage(Base):
    """Message submitted through the public contact form."""
    __tablename__ = "contact_messages"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<ContactMessage(id={self.id}, subject='{self.subject}')>"
