"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Disable rate limiting and startup seeding in tests

from jobboard.core.auth import create_access_token  # noqa: E402
from jobboard.db import Base, get_db  # noqa: E402
from jobboard.db.models import (  # noqa: E402
    Application,
    Employer,
    Job,
    JobSeekerProfile,
    JobTag,
    Skill,
    User,
)
from jobboard.main import app  # noqa: E402 - must set env vars before importing

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_user(db_session, email: str, role: str) -> User:
    user = User(email=email, name=email.split("@")[0], role=role, is_active=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def headers_for(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def seeker_user(db_session):
    """Job seeker with a profile (Nicosia, 4 years, Python + SQL)."""
    user = _make_user(db_session, "seeker@example.com", "JOB_SEEKER")
    profile = JobSeekerProfile(user_id=user.id, title="Engineer", location="Nicosia", experience_years=4)
    profile.skills = [_skill(db_session, "Python"), _skill(db_session, "SQL")]
    db_session.add(profile)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, "other@example.com", "JOB_SEEKER")


@pytest.fixture
def employer_user(db_session):
    return _make_user(db_session, "hr@acme.example", "EMPLOYER")


@pytest.fixture
def employer(db_session, employer_user):
    company = Employer(
        user_id=employer_user.id,
        company_name="Acme Software",
        industry="technology",
        size_band="11-50",
        city="Nicosia",
    )
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company


@pytest.fixture
def other_employer(db_session):
    owner = _make_user(db_session, "jobs@bluebank.example", "EMPLOYER")
    company = Employer(
        user_id=owner.id,
        company_name="Blue Bank",
        industry="finance",
        size_band="201-500",
        city="Limassol",
    )
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company


@pytest.fixture
def seeker_headers(seeker_user):
    return headers_for(seeker_user)


@pytest.fixture
def other_headers(other_user):
    return headers_for(other_user)


@pytest.fixture
def employer_headers(employer_user, employer):
    return headers_for(employer_user)


def _skill(db_session, name: str) -> Skill:
    skill = db_session.query(Skill).filter(Skill.name == name).first()
    if skill is None:
        skill = Skill(name=name)
        db_session.add(skill)
        db_session.flush()
    return skill


@pytest.fixture
def make_job(db_session, employer):
    """Factory for jobs; published, unexpired and created ``age_days`` ago by default."""

    def _make_job(
        title: str = "Python Developer",
        *,
        owner: Employer | None = None,
        age_days: float = 0,
        skills: tuple[str, ...] = (),
        languages: tuple[str, ...] = (),
        benefits: tuple[str, ...] = (),
        **fields,
    ) -> Job:
        created = datetime.utcnow() - timedelta(days=age_days)
        values = {
            "description": f"{title} role",
            "location": "Nicosia",
            "remote": "ONSITE",
            "type": "FULL_TIME",
            "salary_min": 30000,
            "salary_max": 50000,
            "status": "PUBLISHED",
            "application_email": "jobs@example.com",
            "created_at": created,
            "published_at": created,
        }
        values.update(fields)
        job = Job(employer_id=(owner or employer).id, title=title, **values)
        job.skills = [_skill(db_session, name) for name in skills]
        job.tags = [JobTag(kind="language", value=v) for v in languages] + [
            JobTag(kind="benefit", value=v) for v in benefits
        ]
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def apply_to(db_session):
    def _apply(user: User, job: Job) -> Application:
        application = Application(user_id=user.id, job_id=job.id)
        db_session.add(application)
        db_session.commit()
        return application

    return _apply
