"""Tests for the client-side search session."""

from datetime import datetime, timezone

import pytest

from jobboard.domain.exceptions import ListingFetchError, ValidationError
from jobboard.domain.session import LoadState, SearchSession


def _payload(count: int, total: int | None = None) -> dict:
    jobs = [
        {
            "id": i,
            "title": f"Job {i}",
            "location": "Nicosia",
            "remote": "REMOTE",
            "type": "FULL_TIME",
            "salaryMin": 30000,
            "salaryMax": None,
            "createdAt": "2026-10-17T09:00:00Z",
            "employer": {"id": 1, "companyName": "Acme", "logo": None},
            "skills": [],
        }
        for i in range(1, count + 1)
    ]
    return {"jobs": jobs, "total": total if total is not None else count}


class TestFilterChangesResetPage:
    def test_update_filter_resets_page(self):
        session = SearchSession()
        session.paginator.update_total(100)
        session.go_to_page(4)
        session.update_filter("query", "python")
        assert session.current_page == 1
        assert session.query_params()["query"] == "python"

    def test_toggle_and_clear_reset_page(self):
        session = SearchSession()
        session.paginator.update_total(100)
        session.next_page()
        session.toggle_array_filter("skills", "Go")
        assert session.current_page == 1
        session.next_page()
        session.clear_filters()
        assert session.current_page == 1
        assert session.query_params() == {"page": "1", "limit": "12"}


class TestSequenceGuard:
    def test_stale_response_is_discarded(self):
        session = SearchSession()
        first = session.begin_request()
        second = session.begin_request()

        assert session.apply_response(second, _payload(2)) is True
        assert session.apply_response(first, _payload(5)) is False
        assert [job["id"] for job in session.jobs] == [1, 2]
        assert session.state is LoadState.LOADED

    def test_stale_failure_is_discarded(self):
        session = SearchSession()
        first = session.begin_request()
        second = session.begin_request()
        session.apply_response(second, _payload(1))
        assert session.apply_failure(first, ListingFetchError("boom")) is False
        assert session.state is LoadState.LOADED
        assert session.error is None

    def test_request_carries_current_params(self):
        session = SearchSession(page_size=24)
        session.update_filter("remoteType", ["REMOTE"])
        request = session.begin_request()
        assert request.sequence == 1
        assert request.params == {"remoteType": "REMOTE", "page": "1", "limit": "24"}
        assert session.state is LoadState.LOADING


class TestLoadStates:
    def test_empty_is_distinct_from_error(self):
        session = SearchSession()
        session.apply_response(session.begin_request(), _payload(0))
        assert session.state is LoadState.EMPTY
        assert session.error is None

    def test_failure_keeps_previous_results(self):
        session = SearchSession()
        session.apply_response(session.begin_request(), _payload(3, total=30))
        session.apply_failure(session.begin_request(), ListingFetchError("Listing request failed"))
        assert session.state is LoadState.ERROR
        assert session.error == "Listing request failed"
        assert len(session.jobs) == 3
        assert session.total_pages == 3

    def test_retry_after_failure_recovers(self):
        session = SearchSession()
        session.apply_failure(session.begin_request(), ListingFetchError("down"))
        session.apply_response(session.begin_request(), _payload(1))
        assert session.state is LoadState.LOADED
        assert session.error is None

    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "an", "object"],
            None,
            {"jobs": [], "total": "n/a"},
            {"jobs": "nope", "total": 1},
            {"jobs": [1, 2], "total": 2},
            {"jobs": [], "total": -4},
        ],
    )
    def test_malformed_body_is_an_error(self, payload):
        session = SearchSession()
        session.apply_response(session.begin_request(), _payload(2, total=20))

        assert session.apply_response(session.begin_request(), payload) is True
        assert session.state is LoadState.ERROR
        assert session.error.startswith("Malformed listing response")
        assert len(session.jobs) == 2
        assert session.total == 20


class TestUiState:
    def test_toggle_saved(self):
        session = SearchSession()
        assert session.toggle_saved(7) is True
        assert session.toggle_saved(7) is False
        assert session.saved_jobs == set()

    def test_view_mode(self):
        session = SearchSession()
        session.set_view_mode("list")
        assert session.view_mode == "list"
        with pytest.raises(ValidationError):
            session.set_view_mode("table")

    def test_cards_carry_saved_marker(self):
        session = SearchSession()
        session.apply_response(session.begin_request(), _payload(2))
        session.toggle_saved(2)
        now = datetime(2026, 10, 17, 12, tzinfo=timezone.utc)
        cards = session.cards(now)
        assert [card.saved for card in cards] == [False, True]
        assert cards[0].posted_text == "Today"
        assert cards[0].salary_text == "EUR 30,000+"
