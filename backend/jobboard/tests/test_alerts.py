"""Tests for saved-search alert processing."""

import logging
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from jobboard.core.config import settings
from jobboard.db.models import SavedSearch
from jobboard.services.alert_service import AlertService, is_due

NOW = datetime(2026, 10, 17, 12, 0)


def _saved_search(db_session, user, **fields) -> SavedSearch:
    values = {
        "name": "Python jobs",
        "filters": {"query": "python"},
        "alert_enabled": True,
        "alert_frequency": "DAILY",
    }
    values.update(fields)
    saved = SavedSearch(user_id=user.id, **values)
    db_session.add(saved)
    db_session.commit()
    db_session.refresh(saved)
    return saved


class TestIsDue:
    @pytest.mark.parametrize(
        "frequency, elapsed, expected",
        [
            ("INSTANT", timedelta(minutes=1), True),
            ("DAILY", timedelta(hours=23), False),
            ("DAILY", timedelta(hours=24), True),
            ("WEEKLY", timedelta(days=6), False),
            ("WEEKLY", timedelta(days=7), True),
        ],
    )
    def test_frequencies(self, frequency, elapsed, expected):
        saved = SavedSearch(alert_frequency=frequency, last_alerted_at=NOW - elapsed)
        assert is_due(saved, NOW) is expected

    def test_never_alerted_is_due(self):
        assert is_due(SavedSearch(alert_frequency="WEEKLY", last_alerted_at=None), NOW)


class TestAlertService:
    def test_matches_new_jobs_and_advances_timestamp(
        self, db_session, seeker_user, make_job, apply_to, caplog
    ):
        now = datetime.utcnow()
        fresh = make_job("Python Developer", age_days=1)
        make_job("Python Lead", age_days=30)  # published before the lookback window
        make_job("Go Developer", age_days=1)
        applied = make_job("Python Tester", age_days=1)
        apply_to(seeker_user, applied)
        saved = _saved_search(db_session, seeker_user)

        with caplog.at_level(logging.INFO, logger="jobboard.services.alert_service"):
            summary = AlertService(db_session).process(now=now)

        assert summary.processed == 1
        assert summary.alerted == 1
        assert summary.jobs_matched == 1
        db_session.refresh(saved)
        assert saved.last_alerted_at == now
        ready = [r for r in caplog.records if r.getMessage() == "Saved search alert ready"]
        assert ready[0].job_ids == [fresh.id]
        assert ready[0].saved_search_id == saved.id

    def test_not_due_searches_are_skipped(self, db_session, seeker_user, make_job):
        make_job("Python Developer")
        now = datetime.utcnow()
        saved = _saved_search(
            db_session, seeker_user, alert_frequency="WEEKLY", last_alerted_at=now - timedelta(days=2)
        )
        summary = AlertService(db_session).process(now=now)
        assert summary.skipped == 1
        assert summary.processed == 0
        db_session.refresh(saved)
        assert saved.last_alerted_at == now - timedelta(days=2)

    def test_only_jobs_since_last_alert(self, db_session, seeker_user, make_job):
        now = datetime.utcnow()
        make_job("Python Developer", age_days=3)
        _saved_search(db_session, seeker_user, last_alerted_at=now - timedelta(days=2))
        summary = AlertService(db_session).process(now=now)
        assert summary.processed == 1
        assert summary.alerted == 0

    def test_disabled_searches_are_ignored(self, db_session, seeker_user, make_job):
        make_job("Python Developer")
        _saved_search(db_session, seeker_user, alert_enabled=False)
        assert AlertService(db_session).process().processed == 0

    def test_match_cap(self, db_session, seeker_user, make_job, monkeypatch):
        monkeypatch.setattr(settings, "alert_max_jobs", 2)
        for i in range(3):
            make_job(f"Python Dev {i}")
        _saved_search(db_session, seeker_user, alert_frequency="INSTANT")
        assert AlertService(db_session).process().jobs_matched == 2


class TestAlertEndpoint:
    def test_requires_configured_secret(self, client, monkeypatch):
        monkeypatch.setattr(settings, "alert_secret", None)
        assert client.post("/api/v1/alerts/process").status_code == 403

    def test_rejects_wrong_secret(self, client, monkeypatch):
        monkeypatch.setattr(settings, "alert_secret", "s3cret")
        response = client.post("/api/v1/alerts/process", headers={"X-Alert-Secret": "nope"})
        assert response.status_code == 401

    def test_processes_with_secret(self, client, db_session, seeker_user, make_job, monkeypatch):
        monkeypatch.setattr(settings, "alert_secret", "s3cret")
        make_job("Python Developer")
        _saved_search(db_session, seeker_user, alert_frequency="INSTANT")
        response = client.post("/api/v1/alerts/process", headers={"X-Alert-Secret": "s3cret"})
        assert response.status_code == 200
        assert response.json() == {"processed": 1, "alerted": 1, "skipped": 0, "jobsMatched": 1}


class TestAlertTask:
    def test_task_returns_summary(self):
        from jobboard.tasks import process_saved_search_alerts

        with (
            patch("jobboard.tasks.SessionLocal") as mock_session_local,
            patch("jobboard.tasks.AlertService") as mock_service,
        ):
            mock_service.return_value.process.return_value.model_dump.return_value = {"processed": 3}
            assert process_saved_search_alerts() == {"processed": 3}
            mock_session_local.return_value.close.assert_called_once()
