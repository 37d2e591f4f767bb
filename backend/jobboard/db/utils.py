"""Database utility helpers."""

from __future__ import annotations

from datetime import datetime, timedelta

from jobboard.core import settings
from jobboard.core.logging import get_logger
from jobboard.db.models import Base, Employer, Job, JobTag, Skill, User
from jobboard.db.session import SessionLocal

logger = get_logger(__name__)

DEMO_JOBS = [
    {
        "title": "Senior Python Developer",
        "description": "Build search and matching services for a growing job platform.",
        "location": "Nicosia",
        "remote": "HYBRID",
        "type": "FULL_TIME",
        "experience_level": "7",
        "education_level": "bachelor",
        "salary_min": 45000,
        "salary_max": 65000,
        "featured": True,
        "skills": ["Python", "PostgreSQL", "FastAPI"],
        "languages": ["english", "greek"],
        "benefits": ["health_insurance", "flexible_hours"],
    },
    {
        "title": "Junior Frontend Developer",
        "description": "Work on accessible, fast web interfaces with a small product team.",
        "location": "Limassol",
        "remote": "ONSITE",
        "type": "FULL_TIME",
        "experience_level": "0",
        "education_level": "diploma",
        "salary_min": 22000,
        "salary_max": 30000,
        "skills": ["TypeScript", "React"],
        "languages": ["english"],
        "benefits": ["training"],
    },
    {
        "title": "Hotel Front Desk Agent",
        "description": "Welcome guests and coordinate with housekeeping during the summer season.",
        "location": "Paphos",
        "remote": "ONSITE",
        "type": "PART_TIME",
        "experience_level": "0",
        "education_level": "high_school",
        "salary_min": 14000,
        "salary_max": None,
        "urgent": True,
        "skills": ["Customer Service"],
        "languages": ["english", "russian"],
        "benefits": ["meal_allowance"],
    },
]


def _get_or_create_skill(db_session, name: str) -> Skill:
    skill = db_session.query(Skill).filter(Skill.name == name).first()
    if not skill:
        skill = Skill(name=name)
        db_session.add(skill)
        db_session.flush()
    return skill


def seed_default_data(db_session) -> None:
    """Create a demo employer with a handful of published jobs (idempotent)."""
    if settings.environment.lower() == "production":
        logger.info("Skipping default seed in production environment")
        return
    bind = db_session.get_bind()
    if bind is not None:
        Base.metadata.create_all(bind=bind)

    owner = db_session.query(User).filter(User.email == "employer@example.com").first()
    if not owner:
        owner = User(email="employer@example.com", name="Demo Employer", role="EMPLOYER")
        db_session.add(owner)
        db_session.flush()
        logger.info("Created demo employer user", extra={"email": owner.email})

    employer = db_session.query(Employer).filter(Employer.user_id == owner.id).first()
    if not employer:
        employer = Employer(
            user_id=owner.id,
            company_name="Demo Labs Ltd",
            industry="technology",
            size_band="11-50",
            city="Nicosia",
        )
        db_session.add(employer)
        db_session.flush()

    now = datetime.utcnow()
    for index, entry in enumerate(DEMO_JOBS):
        exists = (
            db_session.query(Job)
            .filter(Job.employer_id == employer.id, Job.title == entry["title"])
            .first()
        )
        if exists:
            continue
        published = now - timedelta(days=index * 3)
        job = Job(
            employer_id=employer.id,
            title=entry["title"],
            description=entry["description"],
            location=entry["location"],
            remote=entry["remote"],
            type=entry["type"],
            experience_level=entry["experience_level"],
            education_level=entry["education_level"],
            salary_min=entry["salary_min"],
            salary_max=entry["salary_max"],
            application_email="jobs@example.com",
            status="PUBLISHED",
            featured=entry.get("featured", False),
            urgent=entry.get("urgent", False),
            published_at=published,
            created_at=published,
            expires_at=now + timedelta(days=60),
        )
        job.skills = [_get_or_create_skill(db_session, name) for name in entry["skills"]]
        job.tags = [JobTag(kind="language", value=value) for value in entry["languages"]] + [
            JobTag(kind="benefit", value=value) for value in entry["benefits"]
        ]
        db_session.add(job)
        logger.info("Seeded demo job", extra={"title": job.title})

    db_session.commit()


def seed_with_new_session() -> None:
    """Helper used by scripts to seed using a fresh session."""
    db = SessionLocal()
    try:
        seed_default_data(db)
    finally:
        db.close()
