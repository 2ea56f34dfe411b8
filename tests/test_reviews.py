from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def review(project_id, reviewee_id, headers, rating, **extra):
    return client.post(
        "/api/v1/reviews/",
        headers=headers,
        json={"project_id": project_id, "reviewee_id": reviewee_id, "rating": rating, **extra}
    )


class TestReviews:
    def test_client_reviews_freelancer(self, hired_project, client_user, freelancer_user, client_headers):
        response = review(hired_project.id, freelancer_user.id, client_headers, 5, comment="Great work")
        assert response.status_code == 201
        data = response.json()
        assert data["reviewer_id"] == client_user.id
        assert data["rating"] == 5

    def test_rating_must_be_one_to_five(self, hired_project, freelancer_user, client_headers):
        assert review(hired_project.id, freelancer_user.id, client_headers, 0).status_code == 422
        assert review(hired_project.id, freelancer_user.id, client_headers, 6).status_code == 422

    def test_one_review_per_pair_and_project(self, hired_project, freelancer_user, client_headers):
        review(hired_project.id, freelancer_user.id, client_headers, 4)
        response = review(hired_project.id, freelancer_user.id, client_headers, 2)
        assert response.status_code == 409

    def test_cannot_review_self(self, hired_project, client_user, client_headers):
        response = review(hired_project.id, client_user.id, client_headers, 5)
        assert response.status_code == 400

    def test_outsider_cannot_review(self, hired_project, freelancer_user, other_headers):
        response = review(hired_project.id, freelancer_user.id, other_headers, 1)
        assert response.status_code == 403

    def test_reviews_are_listed_with_reviewer(self, hired_project, freelancer_user, client_headers, other_headers):
        review(hired_project.id, freelancer_user.id, client_headers, 4, title="Solid")

        response = client.get(f"/api/v1/reviews/user/{freelancer_user.id}", headers=other_headers)
        assert response.status_code == 200
        reviews = response.json()
        assert len(reviews) == 1
        assert reviews[0]["reviewer"]["full_name"] == "Casey Client"
        assert reviews[0]["project"]["title"] == hired_project.title

    def test_private_reviews_are_hidden(self, hired_project, freelancer_user, client_headers):
        review(hired_project.id, freelancer_user.id, client_headers, 3, is_public=False)
        response = client.get(f"/api/v1/reviews/user/{freelancer_user.id}", headers=client_headers)
        assert response.json() == []

    def test_summary(self, hired_project, client_user, freelancer_user, client_headers, freelancer_headers):
        review(hired_project.id, freelancer_user.id, client_headers, 4)

        response = client.get(f"/api/v1/reviews/user/{freelancer_user.id}/summary", headers=freelancer_headers)
        data = response.json()
        assert data["total_reviews"] == 1
        assert data["average_rating"] == 4.0
        assert [b["rating"] for b in data["distribution"]] == [5, 4, 3, 2, 1]
        assert data["distribution"][1] == {"rating": 4, "count": 1, "percentage": 100.0}

        empty = client.get(f"/api/v1/reviews/user/{client_user.id}/summary", headers=client_headers).json()
        assert empty["average_rating"] == 0.0
        assert all(b["count"] == 0 for b in empty["distribution"])
