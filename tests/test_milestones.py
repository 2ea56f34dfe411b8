from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def create_milestone(project_id, headers, title, amount):
    return client.post(
        "/api/v1/milestones/",
        headers=headers,
        json={"project_id": project_id, "title": title, "amount": amount}
    )


class TestMilestones:
    def test_owner_creates_milestones_in_order(self, hired_project, client_headers, freelancer_headers):
        create_milestone(hired_project.id, client_headers, "Design", 300)
        create_milestone(hired_project.id, client_headers, "Build", 700)

        response = client.get(f"/api/v1/milestones/project/{hired_project.id}", headers=freelancer_headers)
        assert response.status_code == 200
        milestones = response.json()
        assert [m["title"] for m in milestones] == ["Design", "Build"]
        assert all(m["status"] == "pending" for m in milestones)

    def test_hired_freelancer_cannot_create(self, hired_project, freelancer_headers):
        response = create_milestone(hired_project.id, freelancer_headers, "Bonus", 100)
        assert response.status_code == 403

    def test_outsider_cannot_read(self, hired_project, other_headers):
        response = client.get(f"/api/v1/milestones/project/{hired_project.id}", headers=other_headers)
        assert response.status_code == 403

    def test_completion_stamps_time_and_updates_summary(self, hired_project, client_headers):
        design = create_milestone(hired_project.id, client_headers, "Design", 300).json()
        create_milestone(hired_project.id, client_headers, "Build", 700)

        for target in ("in_progress", "completed"):
            response = client.patch(
                f"/api/v1/milestones/{design['id']}/status",
                headers=client_headers,
                json={"status": target}
            )
            assert response.status_code == 200
        assert response.json()["completed_at"] is not None

        response = client.get(f"/api/v1/milestones/project/{hired_project.id}/summary", headers=client_headers)
        assert response.json() == {
            "total_milestones": 2,
            "completed_milestones": 1,
            "progress_percentage": 50.0,
            "total_amount": 1000.0,
            "completed_amount": 300.0,
        }

    def test_pending_cannot_jump_to_completed(self, hired_project, client_headers):
        milestone = create_milestone(hired_project.id, client_headers, "Design", 300).json()
        response = client.patch(
            f"/api/v1/milestones/{milestone['id']}/status",
            headers=client_headers,
            json={"status": "completed"}
        )
        assert response.status_code == 409

    def test_empty_summary(self, hired_project, client_headers):
        response = client.get(f"/api/v1/milestones/project/{hired_project.id}/summary", headers=client_headers)
        assert response.json()["progress_percentage"] == 0.0
