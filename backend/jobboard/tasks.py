"""Celery tasks."""

from __future__ import annotations

from celery import shared_task

from jobboard.core.logging import get_logger
from jobboard.db import SessionLocal
from jobboard.services.alert_service import AlertService

logger = get_logger(__name__)


@shared_task(name="process_saved_search_alerts")
def process_saved_search_alerts() -> dict:
    """Evaluate every due saved-search alert and return the run summary."""
    db = SessionLocal()
    try:
        return AlertService(db).process().model_dump()
    except Exception:
        logger.exception("Saved search alert run failed")
        db.rollback()
        raise
    finally:
        db.close()
