"""Tests for job recommendations."""

from jobboard.db.models import Job, Skill
from jobboard.services.recommendation_service import score_job

BASE = "/api/v1/jobs/recommendations"


def _job(title="Developer", location="Nicosia", remote="ONSITE", skills=(), **flags) -> Job:
    job = Job(title=title, location=location, remote=remote, **flags)
    job.skills = [Skill(name=name) for name in skills]
    return job


class TestScoring:
    def test_full_score_is_capped(self):
        job = _job(
            "Senior Python Developer",
            skills=("Python", "SQL", "Django", "Docker", "AWS"),
            featured=True,
            urgent=True,
        )
        match = score_job(
            job,
            skills=["Python", "SQL", "Django", "Docker", "AWS"],
            location="Nicosia",
            experience_years=5,
        )
        # 40 skills + 30 location + 20 seniority + 10 flags
        assert match.score == 100
        assert match.matching_skills == ["Python", "SQL", "Django", "Docker", "AWS"]

    def test_remote_scores_when_location_differs(self):
        job = _job(location="Limassol", remote="REMOTE")
        match = score_job(job, skills=[], location="Paphos", experience_years=1)
        assert match.score == 20
        assert match.reasons == ["Remote work opportunity"]

    def test_junior_title_matches_short_experience(self):
        job = _job("Junior Analyst", location="Larnaca")
        match = score_job(job, skills=[], location="Paphos", experience_years=1)
        assert match.score == 20

    def test_partial_skill_names_overlap(self):
        match = score_job(_job(skills=("PostgreSQL",)), skills=["SQL"], location=None, experience_years=0)
        assert match.matching_skills == ["SQL"]
        assert match.score == 10


class TestRecommendationsEndpoint:
    def test_ranked_and_excludes_applied(self, client, seeker_headers, seeker_user, make_job, apply_to):
        best = make_job("Senior Python Engineer", skills=("Python", "SQL"))
        make_job("Accountant", location="Paphos")
        applied = make_job("Senior SQL Engineer", skills=("SQL",))
        apply_to(seeker_user, applied)

        response = client.get(BASE, headers=seeker_headers)
        assert response.status_code == 200
        recommendations = response.json()["recommendations"]
        assert [r["job"]["id"] for r in recommendations][0] == best.id
        assert applied.id not in [r["job"]["id"] for r in recommendations]
        top = recommendations[0]
        assert top["matchScore"] == 70
        assert sorted(top["matchingSkills"]) == ["Python", "SQL"]
        assert "Location match" in top["matchReasons"]

    def test_limit(self, client, seeker_headers, make_job):
        for i in range(4):
            make_job(f"Job {i}")
        body = client.get(BASE, params={"limit": 2}, headers=seeker_headers).json()
        assert len(body["recommendations"]) == 2

    def test_no_candidates(self, client, seeker_headers, db_session):
        body = client.get(BASE, headers=seeker_headers).json()
        assert body == {"recommendations": [], "message": "No new jobs available for recommendation"}

    def test_profile_required(self, client, other_headers):
        assert client.get(BASE, headers=other_headers).status_code == 404

    def test_job_seeker_role_required(self, client, employer_headers):
        assert client.get(BASE, headers=employer_headers).status_code == 403
