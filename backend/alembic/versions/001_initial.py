"""initial job board schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=200)),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="JOB_SEEKER"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "employers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("company_name", sa.String(length=200), nullable=False),
        sa.Column("industry", sa.String(length=50)),
        sa.Column("size_band", sa.String(length=20)),
        sa.Column("logo", sa.String(length=500)),
        sa.Column("city", sa.String(length=100)),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_employers_id", "employers", ["id"])
    op.create_index("ix_employers_industry", "employers", ["industry"])
    op.create_index("ix_employers_size_band", "employers", ["size_band"])

    op.create_table(
        "job_seeker_profiles",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("title", sa.String(length=200)),
        sa.Column("location", sa.String(length=100)),
        sa.Column("experience_years", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_job_seeker_profiles_id", "job_seeker_profiles", ["id"])

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("category", sa.String(length=100)),
    )
    op.create_index("ix_skills_id", "skills", ["id"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("employer_id", sa.Integer, sa.ForeignKey("employers.id"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("requirements", sa.Text),
        sa.Column("responsibilities", sa.Text),
        sa.Column("location", sa.String(length=100), nullable=False),
        sa.Column("remote", sa.String(length=20), nullable=False, server_default="ONSITE"),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("experience_level", sa.String(length=10)),
        sa.Column("education_level", sa.String(length=30)),
        sa.Column("salary_min", sa.Integer),
        sa.Column("salary_max", sa.Integer),
        sa.Column("salary_currency", sa.String(length=3), nullable=False, server_default="EUR"),
        sa.Column("application_email", sa.String(length=255)),
        sa.Column("application_url", sa.String(length=500)),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="DRAFT"),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("urgent", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("expires_at", sa.DateTime()),
        sa.Column("published_at", sa.DateTime()),
        *_timestamps(),
    )
    op.create_index("ix_jobs_id", "jobs", ["id"])
    op.create_index("ix_jobs_status", "jobs", ["status"])
    op.create_index("ix_jobs_remote", "jobs", ["remote"])
    op.create_index("ix_jobs_type", "jobs", ["type"])
    op.create_index("ix_jobs_created_at", "jobs", ["created_at"])

    op.create_table(
        "job_skills",
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("skill_id", sa.Integer, sa.ForeignKey("skills.id"), primary_key=True),
    )
    op.create_table(
        "job_seeker_skills",
        sa.Column(
            "profile_id",
            sa.Integer,
            sa.ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("skill_id", sa.Integer, sa.ForeignKey("skills.id"), primary_key=True),
    )

    op.create_table(
        "job_tags",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("kind", sa.String(length=20), nullable=False),
        sa.Column("value", sa.String(length=50), nullable=False),
        sa.UniqueConstraint("job_id", "kind", "value", name="uix_job_tag"),
    )
    op.create_index("ix_job_tags_id", "job_tags", ["id"])
    op.create_index("ix_job_tags_kind_value", "job_tags", ["kind", "value"])

    op.create_table(
        "applications",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id"), nullable=False),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="APPLIED"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("job_id", "user_id", name="uix_application_job_user"),
    )
    op.create_index("ix_applications_id", "applications", ["id"])

    op.create_table(
        "saved_jobs",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "job_id", name="uix_saved_job_user_job"),
    )
    op.create_index("ix_saved_jobs_id", "saved_jobs", ["id"])

    op.create_table(
        "saved_searches",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("query", sa.String(length=255)),
        sa.Column("location", sa.String(length=100)),
        sa.Column("filters", sa.JSON, nullable=False),
        sa.Column("alert_enabled", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("alert_frequency", sa.String(length=10), nullable=False, server_default="DAILY"),
        sa.Column("last_alerted_at", sa.DateTime()),
        *_timestamps(),
    )
    op.create_index("ix_saved_searches_id", "saved_searches", ["id"])
    op.create_index("ix_saved_searches_user_id", "saved_searches", ["user_id"])


def downgrade():
    op.drop_table("saved_searches")
    op.drop_table("saved_jobs")
    op.drop_table("applications")
    op.drop_table("job_tags")
    op.drop_table("job_seeker_skills")
    op.drop_table("job_skills")
    op.drop_table("jobs")
    op.drop_table("skills")
    op.drop_table("job_seeker_profiles")
    op.drop_table("employers")
    op.drop_table("users")
