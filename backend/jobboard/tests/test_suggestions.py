"""Tests for search suggestions."""

BASE = "/api/v1/search/suggestions"


class TestSuggestions:
    def test_short_query_returns_message(self, client, db_session):
        body = client.get(BASE, params={"q": "p"}).json()
        assert body["message"] == "Query too short. Minimum 2 characters required."
        assert body["suggestions"] == {"jobs": [], "skills": [], "companies": [], "locations": []}

    def test_all_groups(self, client, make_job):
        make_job("Python Developer", skills=("Python",))
        body = client.get(BASE, params={"q": "py"}).json()

        assert body["message"] is None
        assert [s["text"] for s in body["suggestions"]["jobs"]] == ["Python Developer"]
        skill = body["suggestions"]["skills"][0]
        assert skill["text"] == "Python"
        assert skill["subtitle"] == "Used in 1 jobs"
        assert body["total"]["jobs"] == 1

    def test_companies_and_locations(self, client, make_job):
        make_job()
        body = client.get(BASE, params={"q": "acme", "type": "companies"}).json()
        company = body["suggestions"]["companies"][0]
        assert company["text"] == "Acme Software"
        assert company["metadata"]["jobCount"] == 1
        assert body["suggestions"]["jobs"] == []

        locations = client.get(BASE, params={"q": "lim", "type": "locations"}).json()
        texts = [s["text"] for s in locations["suggestions"]["locations"]]
        assert texts[0] == "Limassol"
        assert all("lim" in text.lower() for text in texts)

    def test_limit(self, client, db_session):
        body = client.get(BASE, params={"q": "ni", "type": "locations", "limit": 2}).json()
        assert len(body["suggestions"]["locations"]) == 2

    def test_wildcards_are_literal(self, client, make_job):
        make_job("Sales Lead", skills=("SQL",))
        body = client.get(BASE, params={"q": "%%"}).json()
        assert body["suggestions"]["jobs"] == []
        assert body["suggestions"]["skills"] == []
        assert body["suggestions"]["companies"] == []
