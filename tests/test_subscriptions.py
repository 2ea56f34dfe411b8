from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


class TestPlans:
    def test_monthly_catalog(self):
        response = client.get("/api/v1/subscriptions/plans")
        assert response.status_code == 200
        plans = {p["tier"]: p for p in response.json()}
        assert plans["free"]["price_label"] == "Free"
        assert plans["free"]["monthly_limit"] == 5
        assert plans["basic"]["name"] == "Pro"
        assert plans["basic"]["price_label"] == "$29/month"
        assert plans["basic"]["popular"] is True
        assert plans["enterprise"]["price_label"] == "Contact Sales"

    def test_yearly_catalog(self):
        response = client.get("/api/v1/subscriptions/plans?billing_cycle=yearly")
        plans = {p["tier"]: p for p in response.json()}
        assert plans["basic"]["price"] == 290
        assert plans["basic"]["monthly_equivalent_label"] == "$24/month billed annually"
        assert plans["basic"]["savings_label"] == "Save 17%"
        assert plans["free"]["savings_label"] is None


class TestSubscriptions:
    def test_subscribe_upgrades_profile(self, freelancer_headers):
        response = client.post(
            "/api/v1/subscriptions/",
            headers=freelancer_headers,
            json={"tier": "basic", "billing_cycle": "yearly"}
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "active"
        assert data["current_period_end"] > data["current_period_start"]

        profile = client.get("/api/v1/profiles/me", headers=freelancer_headers).json()
        assert profile["subscription_tier"] == "basic"

    def test_cannot_subscribe_to_free_or_enterprise(self, freelancer_headers):
        response = client.post("/api/v1/subscriptions/", headers=freelancer_headers, json={"tier": "free"})
        assert response.status_code == 400
        response = client.post("/api/v1/subscriptions/", headers=freelancer_headers, json={"tier": "enterprise"})
        assert response.status_code == 400
        assert "Contact sales" in response.json()["detail"]

    def test_cancel_returns_to_free(self, freelancer_headers):
        client.post("/api/v1/subscriptions/", headers=freelancer_headers, json={"tier": "business"})

        response = client.post("/api/v1/subscriptions/cancel", headers=freelancer_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "canceled"
        assert response.json()["cancel_at_period_end"] is True

        profile = client.get("/api/v1/profiles/me", headers=freelancer_headers).json()
        assert profile["subscription_tier"] == "free"

        response = client.post("/api/v1/subscriptions/cancel", headers=freelancer_headers)
        assert response.status_code == 404

    def test_usage_counts_applications(self, open_project, freelancer_headers):
        client.post(
            "/api/v1/applications/",
            headers=freelancer_headers,
            json={"project_id": open_project.id}
        )
        response = client.get("/api/v1/subscriptions/usage", headers=freelancer_headers)
        assert response.json() == {"tier": "free", "used_this_month": 1, "monthly_limit": 5}

    def test_no_subscription_yet(self, client_headers):
        response = client.get("/api/v1/subscriptions/me", headers=client_headers)
        assert response.status_code == 200
        assert response.json() is None
