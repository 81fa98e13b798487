"""E2E tests for Events API + health endpoints."""


class TestHealth:

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "development"

    def test_liveness(self, client):
        assert client.get("/health/live").json() == {"status": "alive"}

    def test_root_endpoint(self, client):
        data = client.get("/").json()

        assert data["docs"] == "/docs"
        assert data["websocket"] == "/ws"

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"


class TestEventsAPI:

    def test_public_read(self, client, live_event):
        """Test: list / get / category без auth."""
        event = live_event()
        live_event(title="Election", category="Politics")

        assert len(client.get("/api/v1/events").json()) == 2
        politics = client.get("/api/v1/events/category/Politics").json()
        assert [e["title"] for e in politics] == ["Election"]

        fetched = client.get(f"/api/v1/events/{event['id']}").json()
        assert fetched["status"] == "live"
        assert [o["odds"] for o in fetched["options"]] == [1.85, 1.95]
        assert fetched["startTime"].startswith("2026-09-10T00:20:00")

    def test_unknown_event_404(self, client):
        response = client.get("/api/v1/events/999")

        assert response.status_code == 404
        assert response.json() == {"error": "EventNotFoundError", "message": "Event not found"}

    def test_create_requires_admin(self, client, register):
        _, headers = register()

        response = client.post(
            "/api/v1/events",
            headers=headers,
            json={
                "title": "Match",
                "description": "d",
                "category": "Football",
                "startTime": "2026-09-10T00:20:00Z",
                "endTime": "2026-09-10T03:30:00Z",
                "options": [{"name": "A", "odds": 2}],
            },
        )

        assert response.status_code == 403

    def test_create_invalid_event(self, client, admin_headers):
        """Test: end_time < start_time і порожні options → 400."""
        body = {
            "title": "Match",
            "description": "d",
            "category": "Football",
            "startTime": "2026-09-10T03:30:00Z",
            "endTime": "2026-09-10T00:20:00Z",
            "options": [{"name": "A", "odds": 2}],
        }

        assert client.post("/api/v1/events", headers=admin_headers, json=body).status_code == 400

        body.update(startTime="2026-09-10T00:20:00Z", endTime="2026-09-10T03:30:00Z", options=[])
        assert client.post("/api/v1/events", headers=admin_headers, json=body).status_code == 400

    def test_backward_transition_conflict(self, client, admin_headers, live_event):
        event = live_event()

        response = client.put(f"/api/v1/events/{event['id']}", headers=admin_headers, json={"status": "upcoming"})

        assert response.status_code == 409

    def test_settle_event_marks_results(self, client, admin_headers, live_event):
        event = live_event()
        ravens = event["options"][1]["id"]

        response = client.put(
            f"/api/v1/events/{event['id']}/settle", headers=admin_headers, json={"winningOptionId": ravens}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "settled"
        assert [o["result"] for o in data["options"]] == [False, True]

        again = client.put(
            f"/api/v1/events/{event['id']}/settle", headers=admin_headers, json={"winningOptionId": ravens}
        )
        assert again.status_code == 409

    def test_delete_event(self, client, admin_headers, live_event):
        event = live_event()

        response = client.delete(f"/api/v1/events/{event['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Event deleted successfully"}
        assert client.get(f"/api/v1/events/{event['id']}").status_code == 404

    def test_fetch_external_events(self, client, admin_headers):
        """Test: built-in feed (EXTERNAL_FEED_URL не задано) → 4 events, повтор → 0."""
        first = client.post("/api/v1/events/fetch-external", headers=admin_headers).json()
        second = client.post("/api/v1/events/fetch-external", headers=admin_headers).json()

        assert first["createdCount"] == 4
        assert second["createdCount"] == 0
        assert len(client.get("/api/v1/events").json()) == 4
