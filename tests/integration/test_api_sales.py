import pytest
from fastapi.testclient import TestClient


def sale_items(client: TestClient, sale_id: str) -> list[dict]:
    response = client.get(f"/api/sales/{sale_id}/items")
    assert response.status_code == 200
    return response.json()["data"]["items"]


def test_seeded_sale_has_two_items(client: TestClient):
    response = client.get("/api/sales")
    sales = response.json()["data"]["items"]
    assert [s["id"] for s in sales] == ["sale-1"]
    assert sales[0]["totalAmount"] == 829.98

    items = sale_items(client, "sale-1")
    assert [i["id"] for i in items] == ["sitem-1", "sitem-2"]


def test_create_sale_with_items(client: TestClient):
    payload = {
        "saleData": {
            "saleNumber": "VTE-2024-002",
            "clientId": "client-2",
            "totalAmount": "59.98",
            "paymentMethod": "Cash",
        },
        "itemsData": [
            {"productId": "prod-2", "quantity": 2, "unitPrice": "29.99", "totalPrice": "59.98"}
        ],
    }
    response = client.post("/api/sales", json=payload)
    assert response.status_code == 201
    data = response.json()["data"]
    sale = data["sale"]
    assert sale["id"]
    assert sale["status"] == "pending"
    assert data["items"][0]["saleId"] == sale["id"]

    items = sale_items(client, sale["id"])
    assert len(items) == 1
    assert items[0]["quantity"] == 2

    # Items of the seeded sale are unaffected
    assert len(sale_items(client, "sale-1")) == 2


def test_update_sale_replaces_items(client: TestClient):
    payload = {
        "saleData": {"status": "refunded"},
        "itemsData": [{"productId": "prod-1", "quantity": 1, "unitPrice": "799.99"}],
    }
    response = client.put("/api/sales/sale-1", json=payload)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sale"]["status"] == "refunded"
    assert data["sale"]["saleNumber"] == "VTE-2024-001"

    items = sale_items(client, "sale-1")
    assert len(items) == 1
    assert items[0]["id"] not in {"sitem-1", "sitem-2"}
    assert items[0]["saleId"] == "sale-1"


def test_update_missing_sale(client: TestClient):
    response = client.put("/api/sales/sale-404", json={"saleData": {}, "itemsData": []})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Sale not found"}


def test_create_sale_requires_sale_data(client: TestClient):
    response = client.post("/api/sales", json={"itemsData": []})
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_delete_sale_removes_items(client: TestClient):
    response = client.delete("/api/sales/sale-1")
    assert response.status_code == 200
    assert response.json()["data"] == {"id": "sale-1", "deleted": True}

    assert client.get("/api/sales").json()["data"]["items"] == []
    assert sale_items(client, "sale-1") == []

    response = client.delete("/api/sales/sale-1")
    assert response.json()["data"]["deleted"] is False


def test_money_fields_are_json_numbers(client: TestClient):
    sale = client.get("/api/sales").json()["data"]["items"][0]
    assert isinstance(sale["totalAmount"], float)

    items = sale_items(client, "sale-1")
    assert sum(i["totalPrice"] for i in items) == pytest.approx(sale["totalAmount"])

    transactions = client.get("/api/transactions").json()["data"]["items"]
    assert all(isinstance(t["amount"], int | float) for t in transactions)
