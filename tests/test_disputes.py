from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def open_dispute(project_id, headers):
    return client.post(
        "/api/v1/disputes/",
        headers=headers,
        json={"project_id": project_id, "dispute_type": "payment", "description": "Milestone not paid"}
    )


class TestDisputes:
    def test_participant_opens_dispute(self, hired_project, freelancer_user, freelancer_headers):
        response = open_dispute(hired_project.id, freelancer_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "open"
        assert data["initiated_by"] == freelancer_user.id

    def test_outsider_cannot_open_dispute(self, hired_project, other_headers):
        response = open_dispute(hired_project.id, other_headers)
        assert response.status_code == 403

    def test_resolution_records_who_and_when(self, hired_project, client_user, client_headers, freelancer_headers):
        dispute_id = open_dispute(hired_project.id, freelancer_headers).json()["id"]

        response = client.patch(
            f"/api/v1/disputes/{dispute_id}/status",
            headers=client_headers,
            json={"status": "in_review"}
        )
        assert response.status_code == 200
        assert response.json()["resolved_at"] is None

        response = client.patch(
            f"/api/v1/disputes/{dispute_id}/status",
            headers=client_headers,
            json={"status": "resolved", "resolution_notes": "Paid in full"}
        )
        data = response.json()
        assert data["status"] == "resolved"
        assert data["resolved_by"] == client_user.id
        assert data["resolved_at"] is not None
        assert data["resolution_notes"] == "Paid in full"

    def test_open_dispute_cannot_be_resolved_directly(self, hired_project, client_headers, freelancer_headers):
        dispute_id = open_dispute(hired_project.id, freelancer_headers).json()["id"]
        response = client.patch(
            f"/api/v1/disputes/{dispute_id}/status",
            headers=client_headers,
            json={"status": "resolved"}
        )
        assert response.status_code == 409

    def test_list_with_initiator(self, hired_project, client_headers, freelancer_headers):
        open_dispute(hired_project.id, freelancer_headers)
        response = client.get(f"/api/v1/disputes/project/{hired_project.id}", headers=client_headers)
        disputes = response.json()
        assert len(disputes) == 1
        assert disputes[0]["initiated_by_user"]["full_name"] == "Frankie Freelancer"
        assert disputes[0]["resolved_by_user"] is None
