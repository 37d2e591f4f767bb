"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY

from jobboard.core.metrics import (
    record_alert_outcome,
    record_saved_job_event,
    record_saved_search_event,
    record_search,
)


def _value(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetricsEndpoint:
    def test_prometheus_format(self, client):
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "jobboard_app_info" in response.text

    def test_http_metrics_collapse_ids(self, client, make_job):
        job = make_job()
        client.get(f"/api/v1/jobs/{job.id}")
        content = client.get("/metrics").text
        assert 'endpoint="/api/v1/jobs/{id}"' in content
        assert "jobboard_http_request_duration_seconds" in content


class TestSearchMetrics:
    def test_record_search(self):
        before = _value("jobboard_search_requests_total", {"sort_by": "deadline"})
        facet_before = _value("jobboard_search_facets_used_total", {"facet": "companySize"})
        record_search("deadline", 17, ["companySize"])
        assert _value("jobboard_search_requests_total", {"sort_by": "deadline"}) == before + 1
        assert _value("jobboard_search_facets_used_total", {"facet": "companySize"}) == facet_before + 1

    def test_listing_request_is_counted(self, client, db_session):
        before = _value("jobboard_search_requests_total", {"sort_by": "location"})
        client.get("/jobs-listing", params={"sortBy": "location", "benefits": "Gym"})
        assert _value("jobboard_search_requests_total", {"sort_by": "location"}) == before + 1


class TestActivityMetrics:
    def test_saved_item_events(self):
        searches = _value("jobboard_saved_search_events_total", {"event": "created"})
        jobs = _value("jobboard_saved_job_events_total", {"event": "removed"})
        record_saved_search_event("created")
        record_saved_job_event("removed")
        assert _value("jobboard_saved_search_events_total", {"event": "created"}) == searches + 1
        assert _value("jobboard_saved_job_events_total", {"event": "removed"}) == jobs + 1

    def test_alert_outcomes(self):
        alerted = _value("jobboard_alert_searches_processed_total", {"outcome": "alerted"})
        matched = _value("jobboard_alert_jobs_matched_total")
        record_alert_outcome("alerted", jobs_matched=4)
        assert _value("jobboard_alert_searches_processed_total", {"outcome": "alerted"}) == alerted + 1
        assert _value("jobboard_alert_jobs_matched_total") == matched + 4
