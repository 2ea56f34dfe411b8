from fastapi.testclient import TestClient

from app.core.errors import UNEXPECTED_ERROR_MESSAGE
from main import app

client = TestClient(app)


def test_read_main():
    """Test the root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to WorkFlow Bot API"}


def test_health_check():
    """Test the health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_openapi_docs():
    """Test that OpenAPI docs are accessible"""
    response = client.get("/api/v1/openapi.json")
    assert response.status_code == 200
    data = response.json()
    assert "openapi" in data
    assert data["info"]["title"] == "WorkFlow Bot API"
    assert "/api/v1/projects/" in data["paths"]
    assert "/api/v1/subscriptions/plans" in data["paths"]


def test_session_events_are_wired():
    assert app.state.session_events.listener_count >= 1
    assert not app.state.session_events.closed


def test_unhandled_errors_are_masked():
    """Unexpected exceptions never leak their message to the caller"""

    @app.get("/boom-for-test")
    async def boom():
        raise RuntimeError("database password is hunter2")

    safe_client = TestClient(app, raise_server_exceptions=False)
    response = safe_client.get("/boom-for-test")
    assert response.status_code == 500
    assert response.json() == {"detail": UNEXPECTED_ERROR_MESSAGE}
