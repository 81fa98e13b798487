"""Fixtures для E2E API tests (TestClient + in-memory SQLite)."""

import pytest
from fastapi.testclient import TestClient

from opinion_trading.config import Settings
from opinion_trading.main import create_app


@pytest.fixture
def client():
    app = create_app(
        Settings(
            database_url="sqlite+aiosqlite:///:memory:",
            environment="development",
            debug=True,
        )
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    """Admin token (role береться з JWT claim)."""
    token = client.app.state.container.jwt_manager.issue(999, "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Factory: зареєструвати user, повернути (user json, auth headers)."""

    def _register(username: str = "alice", password: str = "s3cret-pass"):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _register


@pytest.fixture
def live_event(client, admin_headers):
    """Factory: створити event і перевести в LIVE."""

    def _create(title: str = "NFL: Chiefs vs. Ravens", category: str = "Football"):
        response = client.post(
            "/api/v1/events",
            headers=admin_headers,
            json={
                "title": title,
                "description": "Season opener",
                "category": category,
                "startTime": "2026-09-10T00:20:00Z",
                "endTime": "2026-09-10T03:30:00Z",
                "options": [{"name": "Chiefs Win", "odds": 1.85}, {"name": "Ravens Win", "odds": 1.95}],
            },
        )
        assert response.status_code == 201, response.text
        event = response.json()

        response = client.put(f"/api/v1/events/{event['id']}", headers=admin_headers, json={"status": "live"})
        assert response.status_code == 200, response.text
        return response.json()

    return _create
