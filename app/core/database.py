from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings


def make_engine(database_url: str) -> Engine:
    """
    Build a SQLAlchemy engine for the given URL.

    Pool sizing only applies to server databases; SQLite (used in tests and
    local experiments) gets the driver defaults.
    """
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )


# Create SQLAlchemy engine
engine = make_engine(settings.DATABASE_URL)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    We rely on Alembic for table creation, so this only makes sure every
    model is imported and registered on Base.metadata.

    Use "alembic upgrade head" to create/update database schema.
    """
    from app.models import company, job, job_application, blog_post, contact_message, user  # noqa: F401
