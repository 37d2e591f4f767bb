"""Tests for recent search history."""

from datetime import datetime, timedelta

from jobboard.db import RecentSearch

BASE = "/api/v1/recent-searches"


def _record(client, headers, **payload):
    response = client.post(BASE, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestRecentSearches:
    def test_requires_auth(self, client):
        assert client.get(BASE).status_code in (401, 403)
        assert client.post(BASE, json={"query": "python"}).status_code in (401, 403)

    def test_record_normalizes_filters(self, client, seeker_headers):
        body = _record(
            client,
            seeker_headers,
            query=" python ",
            location="Limassol",
            filters={"remoteType": ["REMOTE", "HYBRID"], "sortBy": "relevance", "bogus": "x"},
        )
        assert body["query"] == "python"
        assert body["location"] == "Limassol"
        assert body["filters"] == {
            "query": "python",
            "location": "Limassol",
            "remoteType": "REMOTE,HYBRID",
        }

    def test_newest_first_and_deduplicated(self, client, seeker_headers):
        _record(client, seeker_headers, query="python")
        _record(client, seeker_headers, query="data", location="Nicosia")
        _record(client, seeker_headers, query="python", filters={"jobType": "CONTRACT"})

        searches = client.get(BASE, headers=seeker_headers).json()
        assert [(s["query"], s["location"]) for s in searches] == [
            ("python", ""),
            ("data", "Nicosia"),
        ]
        assert searches[0]["filters"]["jobType"] == "CONTRACT"

    def test_list_is_limited_and_windowed(self, client, db_session, seeker_headers, seeker_user):
        for i in range(12):
            _record(client, seeker_headers, query=f"role {i}")
        old = RecentSearch(
            user_id=seeker_user.id,
            query="ancient",
            created_at=datetime.utcnow() - timedelta(days=31),
        )
        db_session.add(old)
        db_session.commit()

        searches = client.get(BASE, headers=seeker_headers).json()
        assert len(searches) == 10
        assert "ancient" not in [s["query"] for s in searches]

    def test_history_is_pruned(self, client, db_session, seeker_headers, seeker_user):
        for i in range(23):
            _record(client, seeker_headers, query=f"role {i}")
        stored = db_session.query(RecentSearch).filter(RecentSearch.user_id == seeker_user.id)
        assert stored.count() == 20
        assert "role 0" not in [s.query for s in stored]

    def test_users_see_only_their_own(self, client, seeker_headers, other_headers):
        _record(client, seeker_headers, query="python")
        assert client.get(BASE, headers=other_headers).json() == []
