"""Tests for saved job endpoints."""

BASE = "/api/v1/saved-jobs"


class TestSavedJobs:
    def test_save_list_check_and_remove(self, client, seeker_headers, make_job):
        job = make_job("Python Developer")

        response = client.post(f"{BASE}/{job.id}", headers=seeker_headers)
        assert response.status_code == 201
        assert response.json()["job"]["title"] == "Python Developer"

        listed = client.get(BASE, headers=seeker_headers).json()
        assert [item["jobId"] for item in listed] == [job.id]
        assert listed[0]["job"]["employer"]["companyName"] == "Acme Software"

        assert client.get(f"{BASE}/{job.id}/check", headers=seeker_headers).json() == {"saved": True}
        assert client.delete(f"{BASE}/{job.id}", headers=seeker_headers).status_code == 204
        assert client.get(f"{BASE}/{job.id}/check", headers=seeker_headers).json() == {"saved": False}

    def test_duplicate_save_conflicts(self, client, seeker_headers, make_job):
        job = make_job()
        assert client.post(f"{BASE}/{job.id}", headers=seeker_headers).status_code == 201
        response = client.post(f"{BASE}/{job.id}", headers=seeker_headers)
        assert response.status_code == 409
        assert response.json()["detail"] == "Job already saved"

    def test_only_published_jobs_can_be_saved(self, client, seeker_headers, make_job):
        draft = make_job("Draft", status="DRAFT")
        assert client.post(f"{BASE}/{draft.id}", headers=seeker_headers).status_code == 404
        assert client.post(f"{BASE}/99999", headers=seeker_headers).status_code == 404

    def test_removing_unsaved_job_is_not_found(self, client, seeker_headers, make_job):
        job = make_job()
        assert client.delete(f"{BASE}/{job.id}", headers=seeker_headers).status_code == 404

    def test_saved_jobs_are_per_user(self, client, seeker_headers, other_headers, make_job):
        job = make_job()
        client.post(f"{BASE}/{job.id}", headers=seeker_headers)
        assert client.get(BASE, headers=other_headers).json() == []
        assert client.get(f"{BASE}/{job.id}/check", headers=other_headers).json() == {"saved": False}
