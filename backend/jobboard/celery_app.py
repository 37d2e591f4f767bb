"""Celery application configuration."""

from __future__ import annotations

from urllib.parse import urlparse, urlunparse

from celery import Celery
from celery.schedules import crontab

from jobboard.core.config import settings


def _ensure_rediss_ssl(url: str, environment: str = "production") -> str:
    """Add an ``ssl_cert_reqs`` default to rediss:// URLs that lack one."""
    if not url or not url.startswith("rediss://"):
        return url
    parsed = urlparse(url)
    if parsed.query and "ssl_cert_reqs" in parsed.query:
        return url
    cert_reqs = (
        "CERT_NONE" if environment.lower() in ("development", "dev", "local") else "CERT_REQUIRED"
    )
    query = (
        f"ssl_cert_reqs={cert_reqs}"
        if parsed.query == ""
        else f"{parsed.query}&ssl_cert_reqs={cert_reqs}"
    )
    return urlunparse(parsed._replace(query=query))


broker_url = _ensure_rediss_ssl(settings.celery_broker_url, settings.environment)
result_backend = _ensure_rediss_ssl(settings.celery_result_backend, settings.environment)

celery_app = Celery(
    "jobboard",
    broker=broker_url,
    backend=result_backend,
    include=[
        "jobboard.tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    task_always_eager=settings.testing,
    beat_schedule={
        "process-saved-search-alerts": {
            "task": "process_saved_search_alerts",
            "schedule": crontab(minute=0),
        },
    },
)
