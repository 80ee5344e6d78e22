"""initial_job_board_schema

Creates the job board tables:
1. companies, jobs (soft-delete via is_active)
2. job_applications (file references as opaque filenames)
3. blog_posts (unique slug, is_published gate)
4. contact_messages, users

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_list = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Create all job board tables."""

    op.create_table(
        'companies',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('logo', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('industry', sa.String(), nullable=True),
        sa.Column('size', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_companies_id', 'companies', ['id'])
    op.create_index('ix_companies_created_at', 'companies', ['created_at'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('responsibilities', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('experience_level', sa.String(), nullable=False),
        sa.Column('salary_min', sa.Integer(), nullable=True),
        sa.Column('salary_max', sa.Integer(), nullable=True),
        sa.Column('skills', json_list, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('posted_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('company_id', sa.String(36), nullable=True),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='SET NULL'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_type', 'jobs', ['type'])
    op.create_index('ix_jobs_experience_level', 'jobs', ['experience_level'])
    op.create_index('ix_jobs_company_id', 'jobs', ['company_id'])
    op.create_index('ix_jobs_active_posted_at', 'jobs', ['is_active', 'posted_at'])

    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('job_id', sa.String(36), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('experience', sa.String(), nullable=True),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('resume_url', sa.String(), nullable=False),
        sa.Column('cover_letter_url', sa.String(), nullable=True),
        sa.Column('additional_files', json_list, nullable=False),
        sa.Column('applied_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
    )
    op.create_index('ix_job_applications_id', 'job_applications', ['id'])
    op.create_index('ix_job_applications_job_id', 'job_applications', ['job_id'])
    op.create_index('ix_job_applications_applied_at', 'job_applications', ['applied_at'])

    op.create_table(
        'blog_posts',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('excerpt', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author', sa.String(), nullable=False),
        sa.Column('author_avatar', sa.String(), nullable=True),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('tags', json_list, nullable=False),
        sa.Column('featured_image', sa.String(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('published_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_blog_posts_id', 'blog_posts', ['id'])
    op.create_index('ix_blog_posts_slug', 'blog_posts', ['slug'], unique=True)
    op.create_index('ix_blog_posts_category', 'blog_posts', ['category'])
    op.create_index('ix_blog_posts_published_at', 'blog_posts', ['is_published', 'published_at'])

    op.create_table(
        'contact_messages',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_contact_messages_id', 'contact_messages', ['id'])
    op.create_index('ix_contact_messages_created_at', 'contact_messages', ['created_at'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True, nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)


def downgrade() -> None:
    """Drop all job board tables."""
    op.drop_table('users')
    op.drop_table('contact_messages')
    op.drop_table('blog_posts')
    op.drop_table('job_applications')
    op.drop_table('jobs')
    op.drop_table('companies')
