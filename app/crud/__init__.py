"""
CRUD operations (Create, Read) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Every function takes the Session to use as
its first argument.
"""

from app.crud import blog_post, company, contact_message, job, job_application, job_search, user

__all__ = ["blog_post", "company", "contact_message", "job", "job_application", "job_search", "user"]
