"""
Database models package.
"""

from app.models.company import Company
from app.models.job import Job, JobType
from app.models.job_application import JobApplication
from app.models.blog_post import BlogPost
from app.models.contact_message import ContactMessage
from app.models.user import User

__all__ = ["Company", "Job", "JobType", "JobApplication", "BlogPost", "ContactMessage", "User"]
