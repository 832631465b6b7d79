"""Initial schema — users, profiles, jobs, applications, messages.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("user_type", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Job seeker profiles
    op.create_table(
        "jobseeker_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("title", sa.String(255)),
        sa.Column("bio", sa.Text),
        sa.Column("location", sa.String(255)),
        sa.Column("skills", sa.JSON),
        sa.Column("experience", sa.JSON),
        sa.Column("education", sa.JSON),
        sa.Column("resume_url", sa.String(500)),
        sa.Column("avatar_url", sa.String(500)),
    )
    op.create_index("ix_jobseeker_profiles_user_id", "jobseeker_profiles", ["user_id"], unique=True)

    # Company profiles
    op.create_table(
        "company_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("industry", sa.String(100)),
        sa.Column("location", sa.String(255)),
        sa.Column("website", sa.String(500)),
        sa.Column("logo_url", sa.String(500)),
        sa.Column("size", sa.String(20)),
    )
    op.create_index("ix_company_profiles_user_id", "company_profiles", ["user_id"], unique=True)

    # Jobs
    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company_id", sa.Integer, sa.ForeignKey("company_profiles.id"), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("salary", sa.String(255)),
        sa.Column("requirements", sa.Text),
        sa.Column("benefits", sa.Text),
        sa.Column("skills", sa.JSON),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True)),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
    )
    op.create_index("ix_jobs_company_id", "jobs", ["company_id"])
    op.create_index("idx_job_company_type", "jobs", ["company_id", "type"])

    # Applications
    op.create_table(
        "applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("job_id", sa.Integer, nullable=False),
        sa.Column("jobseeker_id", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("cover_letter", sa.Text),
        sa.Column("applied_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("job_id", "jobseeker_id", name="uq_applications_job_seeker"),
    )
    op.create_index("ix_applications_job_id", "applications", ["job_id"])
    op.create_index("ix_applications_jobseeker_id", "applications", ["jobseeker_id"])

    # Messages
    op.create_table(
        "messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("from_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("to_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("related_to_application_id", sa.Integer),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("idx_messages_from_to", "messages", ["from_user_id", "to_user_id"])
    op.create_index("idx_messages_to_read", "messages", ["to_user_id", "is_read"])


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("applications")
    op.drop_table("jobs")
    op.drop_table("company_profiles")
    op.drop_table("jobseeker_profiles")
    op.drop_table("users")
