"""
Integration tests for orders router.

Tests /api/v1/orders endpoints against a per-test store and a mocked sync client.
"""

from unittest.mock import AsyncMock

from orderdesk.services.sync_client import NO_WEBHOOK_MESSAGE, SyncError
from tests.fixtures.data import SAMPLE_ORDERS, TINY_PNG
from tests.fixtures.factories import store_namespace


def _order_body(client, **fields) -> dict:
    models = client.get("/api/v1/models/available").json()["data"]
    body = {"model_id": models[0]["id"], "name": "Jane Doe", "size": "L", "qty": 2}
    body.update(fields)
    return body


def _load_samples(kv_store, entity_store):
    store_namespace(kv_store, "bolos-crew", orders=SAMPLE_ORDERS)
    entity_store.switch_tenant("Bolos Crew")


class TestCreateOrder:
    """Test POST /api/v1/orders endpoint."""

    def test_creates_order(self, client, entity_store):
        response = client.post("/api/v1/orders", json=_order_body(client, email="jane@example.com"))

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Order saved."
        order = data["data"]
        assert order["model"] == "Classic Tee — Black"
        assert order["client"] == "Bolos Crew"
        assert order["size"] == "L"
        assert order["qty"] == 2
        assert order["email"] == "jane@example.com"
        assert "modelImage" in order
        assert [o.id for o in entity_store.orders] == [order["id"]]

    def test_newest_first(self, client):
        client.post("/api/v1/orders", json=_order_body(client, name="First"))
        client.post("/api/v1/orders", json=_order_body(client, name="Second"))

        names = [o["name"] for o in client.get("/api/v1/orders").json()["data"]]
        assert names == ["Second", "First"]

    def test_dispatches_background_sync(self, client, mock_sync_client):
        client.post("/api/v1/orders", json=_order_body(client))
        mock_sync_client.dispatch_order.assert_called_once()

    def test_qty_clamped(self, client):
        response = client.post("/api/v1/orders", json=_order_body(client, qty=0))
        assert response.json()["data"]["qty"] == 1

    def test_mockups_keep_data_only(self, client):
        body = _order_body(client, mockups=[{"name": "front.png", "data": TINY_PNG}])
        response = client.post("/api/v1/orders", json=body)
        assert response.json()["data"]["mockups"] == [TINY_PNG]

    def test_missing_model_returns_400(self, client, entity_store):
        response = client.post("/api/v1/orders", json=_order_body(client, model_id=""))

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Please select a model."
        assert entity_store.orders == []

    def test_blank_name_returns_400(self, client):
        response = client.post("/api/v1/orders", json=_order_body(client, name="  "))
        assert response.status_code == 400
        assert response.json()["error"] == "Please enter a name."

    def test_invalid_size_returns_422(self, client):
        response = client.post("/api/v1/orders", json=_order_body(client, size="XXXXL"))
        assert response.status_code == 422

    def test_validation_message_is_notified(self, client):
        client.post("/api/v1/orders", json=_order_body(client, model_id=""))
        message = client.get("/api/v1/notifications").json()["data"]["message"]
        assert message == "Please select a model."


class TestListOrders:
    """Test GET /api/v1/orders endpoint."""

    def test_returns_empty_list(self, client):
        response = client.get("/api/v1/orders")
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_filters(self, client, kv_store, entity_store):
        _load_samples(kv_store, entity_store)

        def ids(**params) -> list[str]:
            return [o["id"] for o in client.get("/api/v1/orders", params=params).json()["data"]]

        assert ids() == ["o-3", "o-2", "o-1"]
        assert ids(search="JANE") == ["o-2"]
        assert ids(size="M") == ["o-2", "o-1"]
        assert ids(model="Classic Tee — White") == ["o-3"]
        assert ids(search="alex", size="M") == ["o-1"]


class TestListOrderModels:
    """Test GET /api/v1/orders/models endpoint."""

    def test_first_seen_order(self, client, kv_store, entity_store):
        _load_samples(kv_store, entity_store)

        response = client.get("/api/v1/orders/models")

        assert response.status_code == 200
        assert response.json()["data"] == ["Classic Tee — White", "Classic Tee — Black"]

    def test_empty(self, client):
        assert client.get("/api/v1/orders/models").json()["data"] == []


class TestDeleteOrder:
    """Test DELETE /api/v1/orders/{id} endpoint."""

    def test_deletes(self, client, entity_store):
        created = client.post("/api/v1/orders", json=_order_body(client)).json()["data"]

        response = client.delete(f"/api/v1/orders/{created['id']}")

        assert response.status_code == 200
        assert entity_store.orders == []

    def test_unknown_returns_404(self, client):
        response = client.delete("/api/v1/orders/missing")
        assert response.status_code == 404


class TestExportOrders:
    """Test GET /api/v1/orders/export endpoint."""

    def test_csv_download(self, client, kv_store, entity_store):
        _load_samples(kv_store, entity_store)

        response = client.get("/api/v1/orders/export?size=M")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="Bolos_Crew_orders.csv"' in response.headers["content-disposition"]
        lines = response.text.split("\n")
        assert lines[0].startswith("id,ts,client,model,modelImage,size,qty")
        assert [line.split(",")[0] for line in lines[1:]] == ["o-2", "o-1"]

    def test_empty_export(self, client):
        response = client.get("/api/v1/orders/export")
        assert response.status_code == 200
        assert response.text == ""


class TestSyncOrders:
    """Test POST /api/v1/orders/sync endpoint."""

    def test_pushes_filtered_orders(self, client, kv_store, entity_store, mock_sync_client):
        _load_samples(kv_store, entity_store)

        response = client.post("/api/v1/orders/sync?search=jane")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Orders synced."
        assert data["data"]["synced"] == 1
        (orders,) = mock_sync_client.push_orders.call_args.args
        assert [o.id for o in orders] == ["o-2"]

    def test_failure_returns_502_and_keeps_orders(self, client, kv_store, entity_store, mock_sync_client):
        _load_samples(kv_store, entity_store)
        mock_sync_client.push_orders = AsyncMock(side_effect=SyncError("Sync failed: 500 Internal Server Error"))

        response = client.post("/api/v1/orders/sync")

        assert response.status_code == 502
        assert len(entity_store.orders) == 3
        message = client.get("/api/v1/notifications").json()["data"]["message"]
        assert message == "Sync failed: 500 Internal Server Error"

    def test_no_webhook(self, client, mock_sync_client):
        mock_sync_client.push_orders = AsyncMock(side_effect=SyncError(NO_WEBHOOK_MESSAGE))

        response = client.post("/api/v1/orders/sync")

        assert response.status_code == 502
        assert response.json()["error"] == NO_WEBHOOK_MESSAGE
