from fastapi.testclient import TestClient


def test_users_roles_permissions_seeded(client: TestClient):
    users = client.get("/api/users").json()["data"]["items"]
    assert [u["id"] for u in users] == ["user-1", "user-2"]

    roles = client.get("/api/roles").json()["data"]["items"]
    assert [r["id"] for r in roles] == ["role-1", "role-2"]

    permissions = client.get("/api/permissions").json()["data"]["items"]
    assert {p["roleId"] for p in permissions} <= {"role-1", "role-2"}
    assert len(permissions) == 4


def test_create_role_and_permission(client: TestClient):
    response = client.post("/api/roles", json={"name": "Comptable"})
    assert response.status_code == 201
    role_id = response.json()["data"]["id"]

    response = client.post(
        "/api/permissions",
        json={"roleId": role_id, "module": "finance", "canRead": True},
    )
    assert response.status_code == 201
    permission = response.json()["data"]
    assert permission["canRead"] is True
    assert permission["canDelete"] is False


def test_transactions_and_categories(client: TestClient):
    transactions = client.get("/api/transactions").json()["data"]["items"]
    assert [t["id"] for t in transactions] == ["trans-1", "trans-2"]

    categories = client.get("/api/transaction-categories").json()["data"]["items"]
    assert [c["id"] for c in categories] == ["tcat-1", "tcat-2", "tcat-3"]

    response = client.post(
        "/api/transactions",
        json={"reference": "TR-3", "type": "revenue", "amount": "10.00", "sourceType": "other"},
    )
    assert response.status_code == 201
    created = response.json()["data"]
    assert created["status"] == "pending"
    assert created["amount"] == 10.0
