from fastapi.testclient import TestClient

from app.models.application import Application, ApplicationStatus
from app.models.project import Project, ProjectStatus
from main import app

client = TestClient(app)


def apply(project_id, headers, **extra):
    return client.post(
        "/api/v1/applications/",
        headers=headers,
        json={"project_id": project_id, "cover_letter": "Hire me", "proposed_rate": 45, **extra}
    )


class TestApplications:
    def test_freelancer_applies(self, open_project, freelancer_user, freelancer_headers):
        response = apply(open_project.id, freelancer_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["freelancer_id"] == freelancer_user.id

    def test_client_cannot_apply(self, open_project, client_headers):
        response = apply(open_project.id, client_headers)
        assert response.status_code == 403

    def test_apply_to_missing_project(self, db, freelancer_headers):
        response = apply(9999, freelancer_headers)
        assert response.status_code == 404

    def test_duplicate_application(self, open_project, freelancer_headers):
        apply(open_project.id, freelancer_headers)
        response = apply(open_project.id, freelancer_headers)
        assert response.status_code == 409
        assert "already applied" in response.json()["detail"]

    def test_cannot_apply_to_started_project(self, hired_project, other_headers):
        response = apply(hired_project.id, other_headers)
        assert response.status_code == 409

    def test_owner_sees_all_applications(self, open_project, client_headers, freelancer_headers, other_headers):
        apply(open_project.id, freelancer_headers)
        apply(open_project.id, other_headers)

        response = client.get(f"/api/v1/applications/?project_id={open_project.id}", headers=client_headers)
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_freelancer_only_sees_own(self, open_project, freelancer_user, freelancer_headers, other_headers):
        apply(open_project.id, freelancer_headers)
        apply(open_project.id, other_headers)

        response = client.get(f"/api/v1/applications/?project_id={open_project.id}", headers=freelancer_headers)
        data = response.json()
        assert len(data) == 1
        assert data[0]["freelancer_id"] == freelancer_user.id

    def test_update_pending_application(self, open_project, freelancer_headers):
        application_id = apply(open_project.id, freelancer_headers).json()["id"]
        response = client.put(
            f"/api/v1/applications/{application_id}",
            headers=freelancer_headers,
            json={"proposed_rate": 60}
        )
        assert response.status_code == 200
        assert response.json()["proposed_rate"] == 60

    def test_other_freelancer_cannot_withdraw(self, open_project, freelancer_headers, other_headers):
        application_id = apply(open_project.id, freelancer_headers).json()["id"]
        response = client.delete(f"/api/v1/applications/{application_id}", headers=other_headers)
        assert response.status_code == 403


class TestAcceptApplication:
    def test_accept_hires_freelancer(self, db, open_project, freelancer_user, client_headers, freelancer_headers):
        application_id = apply(open_project.id, freelancer_headers).json()["id"]

        response = client.post(f"/api/v1/applications/{application_id}/accept", headers=client_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "accepted"

        project = db.query(Project).filter(Project.id == open_project.id).first()
        db.refresh(project)
        assert project.status == ProjectStatus.IN_PROGRESS
        assert project.selected_freelancer_id == freelancer_user.id

    def test_only_owner_can_accept(self, open_project, freelancer_headers):
        application_id = apply(open_project.id, freelancer_headers).json()["id"]
        response = client.post(f"/api/v1/applications/{application_id}/accept", headers=freelancer_headers)
        assert response.status_code == 403

    def test_second_accept_is_refused(self, db, open_project, client_headers, freelancer_headers, other_headers):
        first = apply(open_project.id, freelancer_headers).json()["id"]
        second = apply(open_project.id, other_headers).json()["id"]

        assert client.post(f"/api/v1/applications/{first}/accept", headers=client_headers).status_code == 200
        response = client.post(f"/api/v1/applications/{second}/accept", headers=client_headers)
        assert response.status_code == 409

        accepted = db.query(Application).filter(
            Application.project_id == open_project.id,
            Application.status == ApplicationStatus.ACCEPTED,
        ).count()
        assert accepted == 1

    def test_reject_then_accept_is_refused(self, open_project, client_headers, freelancer_headers):
        application_id = apply(open_project.id, freelancer_headers).json()["id"]

        response = client.post(f"/api/v1/applications/{application_id}/reject", headers=client_headers)
        assert response.json()["status"] == "rejected"

        response = client.post(f"/api/v1/applications/{application_id}/accept", headers=client_headers)
        assert response.status_code == 409

    def test_accepted_application_is_read_only(self, hired_project, db, freelancer_user, freelancer_headers):
        application = db.query(Application).filter(Application.freelancer_id == freelancer_user.id).first()
        response = client.put(
            f"/api/v1/applications/{application.id}",
            headers=freelancer_headers,
            json={"cover_letter": "changed"}
        )
        assert response.status_code == 409

    def test_accepted_application_cannot_be_withdrawn(self, hired_project, db, freelancer_user, freelancer_headers):
        application = db.query(Application).filter(Application.freelancer_id == freelancer_user.id).first()
        response = client.delete(f"/api/v1/applications/{application.id}", headers=freelancer_headers)
        assert response.status_code == 409
        assert response.json()["detail"] == "Only pending applications can be withdrawn"

        db.expire_all()
        assert db.query(Application).filter(Application.id == application.id).first() is not None


class TestFreeTierQuota:
    def test_sixth_application_in_a_month_is_refused(self, db, client_user, freelancer_headers):
        projects = [
            Project(title=f"Gig {n}", description="Short task", client_id=client_user.id, status=ProjectStatus.OPEN)
            for n in range(6)
        ]
        db.add_all(projects)
        db.commit()

        for project in projects[:5]:
            assert apply(project.id, freelancer_headers).status_code == 201

        response = apply(projects[5].id, freelancer_headers)
        assert response.status_code == 402
        assert "5 applications per month" in response.json()["detail"]

        usage = client.get("/api/v1/subscriptions/usage", headers=freelancer_headers)
        assert usage.json()["used_this_month"] == 5
