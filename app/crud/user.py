"""
CRUD operations for User model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.core.security import get_password_hash
from app.models.user import User
from app.schemas.user import UserCreate


def create(db: Session, user_data: UserCreate) -> User:
    """
    Create a user, storing only the bcrypt hash of the password.

    Raises:
        sqlalchemy.exc.IntegrityError: If the username is already taken
    """
    user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
    )

    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()
