from datetime import datetime, timezone

from fastapi.testclient import TestClient

from app.models.application import Application
from app.models.milestone import ProjectMilestone
from app.models.profile import SubscriptionTier
from app.models.saved_project import SavedProject
from app.models.time_tracking import TimeTracking
from main import app

client = TestClient(app)

PROJECT = {
    "title": "Landing page",
    "description": "Marketing site for a product launch",
    "budget_min": 300,
    "budget_max": 800,
    "required_skills": ["react"],
}


class TestProjects:
    def test_client_posts_project(self, client_user, client_headers):
        response = client.post("/api/v1/projects/", headers=client_headers, json=PROJECT)
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "open"
        assert data["client_id"] == client_user.id
        assert data["selected_freelancer_id"] is None

    def test_freelancer_cannot_post_project(self, freelancer_headers):
        response = client.post("/api/v1/projects/", headers=freelancer_headers, json=PROJECT)
        assert response.status_code == 403
        assert response.json()["detail"] == "Client account required"

    def test_budget_range_is_validated(self, client_headers):
        response = client.post(
            "/api/v1/projects/",
            headers=client_headers,
            json={**PROJECT, "budget_min": 900, "budget_max": 100}
        )
        assert response.status_code == 422

    def test_list_newest_first(self, client_headers, freelancer_headers):
        for title in ("first", "second", "third"):
            client.post("/api/v1/projects/", headers=client_headers, json={**PROJECT, "title": title})

        response = client.get("/api/v1/projects/", headers=freelancer_headers)
        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["third", "second", "first"]

    def test_filter_by_status(self, open_project, client_headers):
        response = client.get("/api/v1/projects/?status=completed", headers=client_headers)
        assert response.json() == []
        response = client.get("/api/v1/projects/?status=open", headers=client_headers)
        assert [p["id"] for p in response.json()] == [open_project.id]

    def test_only_owner_can_update(self, open_project, freelancer_headers, client_headers):
        response = client.put(
            f"/api/v1/projects/{open_project.id}",
            headers=freelancer_headers,
            json={"title": "Hijacked"}
        )
        assert response.status_code == 403

        response = client.put(
            f"/api/v1/projects/{open_project.id}",
            headers=client_headers,
            json={"title": "Booking API v2"}
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Booking API v2"

    def test_update_keeps_budget_range_valid(self, open_project, client_headers):
        response = client.put(
            f"/api/v1/projects/{open_project.id}",
            headers=client_headers,
            json={"budget_min": 5000}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "budget_min cannot exceed budget_max"

        response = client.put(
            f"/api/v1/projects/{open_project.id}",
            headers=client_headers,
            json={"budget_min": 5000, "budget_max": 8000}
        )
        assert response.status_code == 200
        assert response.json()["budget_max"] == 8000

    def test_read_missing_project(self, client_headers):
        response = client.get("/api/v1/projects/9999", headers=client_headers)
        assert response.status_code == 404

    def test_delete_project(self, open_project, client_headers):
        response = client.delete(f"/api/v1/projects/{open_project.id}", headers=client_headers)
        assert response.status_code == 200
        response = client.get(f"/api/v1/projects/{open_project.id}", headers=client_headers)
        assert response.status_code == 404

    def test_delete_project_removes_its_records(self, db, hired_project, freelancer_user, client_headers):
        db.add_all([
            ProjectMilestone(title="Schema", project_id=hired_project.id),
            SavedProject(user_id=freelancer_user.id, project_id=hired_project.id),
            TimeTracking(
                project_id=hired_project.id,
                freelancer_id=freelancer_user.id,
                start_time=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
            ),
        ])
        db.commit()

        response = client.delete(f"/api/v1/projects/{hired_project.id}", headers=client_headers)
        assert response.status_code == 200

        assert db.query(Application).count() == 0
        assert db.query(ProjectMilestone).count() == 0
        assert db.query(SavedProject).count() == 0
        assert db.query(TimeTracking).count() == 0


class TestProjectLifecycle:
    def test_cannot_start_without_hiring(self, open_project, client_headers):
        response = client.patch(
            f"/api/v1/projects/{open_project.id}/status",
            headers=client_headers,
            json={"status": "in_progress"}
        )
        assert response.status_code == 409

    def test_open_project_cannot_complete(self, open_project, client_headers):
        response = client.patch(
            f"/api/v1/projects/{open_project.id}/status",
            headers=client_headers,
            json={"status": "completed"}
        )
        assert response.status_code == 409
        assert "Cannot move project from 'open' to 'completed'" in response.json()["detail"]

    def test_complete_hired_project(self, hired_project, client_headers):
        response = client.patch(
            f"/api/v1/projects/{hired_project.id}/status",
            headers=client_headers,
            json={"status": "completed"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "completed"

        # Completed is terminal
        response = client.patch(
            f"/api/v1/projects/{hired_project.id}/status",
            headers=client_headers,
            json={"status": "cancelled"}
        )
        assert response.status_code == 409

    def test_cancel_open_project(self, open_project, client_headers):
        response = client.patch(
            f"/api/v1/projects/{open_project.id}/status",
            headers=client_headers,
            json={"status": "cancelled"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"


class TestFreeTierQuota:
    def test_sixth_post_in_a_month_is_refused(self, client_headers):
        for i in range(5):
            response = client.post(
                "/api/v1/projects/", headers=client_headers, json={**PROJECT, "title": f"Project {i}"}
            )
            assert response.status_code == 201

        response = client.post("/api/v1/projects/", headers=client_headers, json=PROJECT)
        assert response.status_code == 402
        assert "5 project posts per month" in response.json()["detail"]

    def test_paid_tier_is_unlimited(self, db, client_user, client_headers):
        client_user.profile.subscription_tier = SubscriptionTier.BASIC
        db.commit()

        for i in range(6):
            response = client.post(
                "/api/v1/projects/", headers=client_headers, json={**PROJECT, "title": f"Project {i}"}
            )
            assert response.status_code == 201


class TestMatching:
    def test_matches_rank_skill_overlap_first(self, db, client_headers, freelancer_headers):
        client.put(
            "/api/v1/profiles/me/freelancer",
            headers=freelancer_headers,
            json={"skills": ["python"]}
        )
        client.post(
            "/api/v1/projects/", headers=client_headers,
            json={**PROJECT, "title": "Python job", "required_skills": ["python"]}
        )
        client.post(
            "/api/v1/projects/", headers=client_headers,
            json={**PROJECT, "title": "Design job", "required_skills": ["figma"]}
        )

        response = client.get("/api/v1/projects/matches", headers=freelancer_headers)
        assert response.status_code == 200
        matches = response.json()
        assert [(m["title"], m["match_score"]) for m in matches] == [
            ("Python job", 0.8),
            ("Design job", 0.3),
        ]

    def test_budget_preferences_filter_matches(self, client_headers, freelancer_headers):
        client.put(
            "/api/v1/preferences/me",
            headers=freelancer_headers,
            json={"preferred_budget_range_min": 1000}
        )
        client.post("/api/v1/projects/", headers=client_headers, json={**PROJECT, "title": "Small"})
        client.post(
            "/api/v1/projects/", headers=client_headers,
            json={**PROJECT, "title": "Large", "budget_min": 2000, "budget_max": 5000}
        )

        response = client.get("/api/v1/projects/matches", headers=freelancer_headers)
        assert [m["title"] for m in response.json()] == ["Large"]

    def test_clients_have_no_matches(self, client_headers):
        response = client.get("/api/v1/projects/matches", headers=client_headers)
        assert response.status_code == 403
