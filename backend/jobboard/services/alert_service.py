"""Saved-search alert evaluation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.core.logging import LoggerAdapter, get_logger
from jobboard.core.metrics import record_alert_outcome
from jobboard.db import SavedSearch
from jobboard.repositories import JobRepository, SavedSearchRepository
from jobboard.schemas.search import AlertRunSummary
from jobboard.services.saved_search_service import filters_of

logger = get_logger(__name__)

FREQUENCY_INTERVALS = {
    "DAILY": timedelta(days=1),
    "WEEKLY": timedelta(days=7),
}


def is_due(saved: SavedSearch, now: datetime) -> bool:
    """INSTANT searches are always due; others once their interval has elapsed."""
    if saved.alert_frequency == "INSTANT" or saved.last_alerted_at is None:
        return True
    interval = FREQUENCY_INTERVALS.get(saved.alert_frequency, FREQUENCY_INTERVALS["DAILY"])
    return now - saved.last_alerted_at >= interval


class AlertService:
    """Finds new matches for alerting saved searches.

    Delivery is out of scope here: each match set is emitted as a structured
    log record for whatever notifier consumes them.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.searches = SavedSearchRepository(session)
        self.jobs = JobRepository(session)

    def process(self, now: Optional[datetime] = None) -> AlertRunSummary:
        now = now or datetime.utcnow()
        summary = AlertRunSummary()
        lookback = now - timedelta(days=settings.alert_lookback_days)

        for saved in self.searches.list_alerting():
            if not is_due(saved, now):
                summary.skipped += 1
                record_alert_outcome("skipped")
                continue

            log = LoggerAdapter(logger, {"saved_search_id": saved.id, "user_id": saved.user_id})
            _, matches = self.jobs.search(
                filters_of(saved),
                skip=0,
                limit=settings.alert_max_jobs,
                now=now,
                published_since=saved.last_alerted_at or lookback,
                exclude_job_ids=self.jobs.applied_job_ids(saved.user_id),
            )
            summary.processed += 1
            if matches:
                summary.alerted += 1
                summary.jobs_matched += len(matches)
                record_alert_outcome("alerted", len(matches))
                log.info(
                    "Saved search alert ready",
                    extra={
                        "frequency": saved.alert_frequency,
                        "job_ids": [job.id for job in matches],
                    },
                )
            else:
                record_alert_outcome("no_matches")
            saved.last_alerted_at = now

        self.searches.commit()
        logger.info(
            "Saved search alerts processed",
            extra=summary.model_dump(),
        )
        return summary
