"""
Integration tests for tenant, summary and system endpoints.
"""

from tests.fixtures.data import SAMPLE_ORDERS
from tests.fixtures.factories import store_namespace


class TestTenant:
    """Test /api/v1/tenant endpoints."""

    def test_default_tenant(self, client):
        response = client.get("/api/v1/tenant")

        assert response.status_code == 200
        assert response.json()["data"] == {"name": "Bolos Crew", "namespace": "bolos-crew"}

    def test_switch_tenant(self, client, kv_store):
        response = client.put("/api/v1/tenant", json={"name": "Other Crew"})

        assert response.status_code == 200
        assert response.json()["data"] == {"name": "Other Crew", "namespace": "other-crew"}
        assert kv_store.get(None, "tenantName") == "Other Crew"

    def test_switch_isolates_orders(self, client):
        model = client.get("/api/v1/models/available").json()["data"][0]
        client.post("/api/v1/orders", json={"model_id": model["id"], "name": "Jane"})

        client.put("/api/v1/tenant", json={"name": "Other Crew"})
        assert client.get("/api/v1/orders").json()["data"] == []
        assert len(client.get("/api/v1/models").json()["data"]) == 3

        client.put("/api/v1/tenant", json={"name": "bolos crew"})
        assert len(client.get("/api/v1/orders").json()["data"]) == 1

    def test_missing_name_returns_422(self, client):
        assert client.put("/api/v1/tenant", json={}).status_code == 422


class TestSummary:
    """Test GET /api/v1/summary endpoint."""

    def test_empty(self, client):
        assert client.get("/api/v1/summary").json()["data"] == []

    def test_breakdown(self, client, kv_store, entity_store):
        store_namespace(kv_store, "bolos-crew", orders=SAMPLE_ORDERS)
        entity_store.switch_tenant("Bolos Crew")

        rows = {row["model"]: row for row in client.get("/api/v1/summary").json()["data"]}

        black = rows["Classic Tee — Black"]
        assert black["sizes"] == {"XS": 0, "S": 0, "M": 3, "L": 0, "XL": 0, "XXL": 0, "XXXL": 0}
        assert black["total"] == 3
        assert rows["Classic Tee — White"]["sizes"]["L"] == 3


class TestNotifications:
    def test_empty(self, client):
        assert client.get("/api/v1/notifications").json()["data"]["message"] is None

    def test_latest_message(self, client):
        client.post("/api/v1/models/save")
        assert client.get("/api/v1/notifications").json()["data"]["message"] == "Models saved."


class TestSystem:
    """Test root and health endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["tenant"] == "Bolos Crew"
        assert data["storage_connected"] is True
        assert data["sync_configured"] is True

    def test_root(self, client):
        data = client.get("/").json()
        assert data["health"] == "/health"
        assert data["docs"] == "/api/docs"

    def test_request_id_header(self, client):
        response = client.get("/api/v1/tenant")
        assert len(response.headers["x-request-id"]) == 8
