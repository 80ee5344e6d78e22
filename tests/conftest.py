"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Upload storage in a temporary directory
- Factories for companies, jobs and blog posts
"""

import os

# Keep the app's default engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite:///:memory:")
os.environ.setdefault("JSON_LOGS", "false")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.storage import LocalStorage, get_storage
from app.models.blog_post import BlogPost
from app.models.company import Company
from app.models.job import Job
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload_storage(tmp_path):
    """Local storage rooted in a per-test temporary directory"""
    return LocalStorage(str(tmp_path / "uploads"))


@pytest.fixture
def client(db_session, upload_storage):
    """
    FastAPI test client with overridden database and storage dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: upload_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_company(db_session):
    """Insert a company; created_at can be pinned for ordering tests"""
    def _make(name="Acme Robotics", days=0, **fields):
        company = Company(name=name, created_at=BASE_TIME + timedelta(days=days), **fields)
        db_session.add(company)
        db_session.commit()
        db_session.refresh(company)
        return company
    return _make


@pytest.fixture
def make_job(db_session):
    """
    Insert a job directly. `days` offsets posted_at from BASE_TIME so tests
    control the newest-first ordering.
    """
    def _make(title="Software Engineer", days=0, company=None, **fields):
        values = {
            "description": "Build and maintain backend services.",
            "location": "Berlin, Germany",
            "type": "full-time",
            "experience_level": "mid",
            "skills": ["python", "sql"],
            "is_active": True,
        }
        values.update(fields)
        job = Job(
            title=title,
            posted_at=BASE_TIME + timedelta(days=days),
            company_id=company.id if company is not None else None,
            **values,
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job
    return _make


@pytest.fixture
def make_post(db_session):
    """Insert a blog post with a pinned published_at"""
    def _make(slug="hiring-tips", days=0, **fields):
        values = {
            "title": slug.replace("-", " ").title(),
            "excerpt": "Short summary",
            "content": "Full article body",
            "author": "Jordan Lee",
            "category": "careers",
            "tags": ["hiring", "tips"],
            "is_published": True,
        }
        values.update(fields)
        post = BlogPost(slug=slug, published_at=BASE_TIME + timedelta(days=days), **values)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post
    return _make


@pytest.fixture
def sample_application_data():
    """Valid multipart text fields for a job application"""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "experience": "4-6",
        "comments": "Available from March.",
    }


@pytest.fixture
def sample_contact_data():
    return {
        "name": "Sam Rivera",
        "email": "sam@example.com",
        "phone": "555-0100",
        "subject": "partnership",
        "message": "We would like to list our openings on your board.",
    }
