from fastapi.testclient import TestClient


def test_list_clients_returns_seeded_page(client: TestClient):
    response = client.get("/api/clients")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["next"] is None
    ids = [c["id"] for c in body["data"]["items"]]
    assert ids == ["client-1", "client-2"]


def test_client_lifecycle(client: TestClient):
    # 1. Create
    payload = {
        "firstName": "Jean",
        "lastName": "Dupont",
        "email": "jean@x.com",
        "clientType": "individual",
    }
    response = client.post("/api/clients", json=payload)
    assert response.status_code == 201
    created = response.json()["data"]
    assert created["id"]
    assert created["registrationDate"]
    assert created["createdAt"] == created["updatedAt"]
    assert created["createdBy"] == "user-1"
    assert created["firstName"] == "Jean"
    client_id = created["id"]

    # 2. Listed after the seeded rows
    response = client.get("/api/clients")
    ids = [c["id"] for c in response.json()["data"]["items"]]
    assert ids[-1] == client_id
    assert len(ids) == 3

    # 3. Partial update
    response = client.put(f"/api/clients/{client_id}", json={"city": "Lyon"})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["city"] == "Lyon"
    assert updated["lastName"] == "Dupont"
    assert updated["createdAt"] == created["createdAt"]
    assert updated["registrationDate"] == created["registrationDate"]

    # 4. Fetch by id
    response = client.get(f"/api/clients/{client_id}")
    assert response.status_code == 200
    assert response.json()["data"]["city"] == "Lyon"

    # 5. Delete
    response = client.delete(f"/api/clients/{client_id}")
    assert response.status_code == 200
    assert response.json()["data"] == {"id": client_id, "deleted": True}

    response = client.get(f"/api/clients/{client_id}")
    assert response.status_code == 404


def test_update_ignores_client_supplied_id(client: TestClient):
    response = client.put("/api/clients/client-1", json={"id": "hijack", "notes": "VIP"})
    assert response.status_code == 200
    assert response.json()["data"]["id"] == "client-1"
    assert client.get("/api/clients/hijack").status_code == 404


def test_update_missing_client(client: TestClient):
    response = client.put("/api/clients/nope", json={"city": "Lyon"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Client not found"}


def test_delete_missing_client_reports_false(client: TestClient):
    response = client.delete("/api/clients/nope")
    assert response.status_code == 200
    assert response.json()["data"] == {"id": "nope", "deleted": False}


def test_create_rejects_bad_enum(client: TestClient):
    response = client.post("/api/clients", json={"firstName": "X", "clientType": "alien"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert "clientType" in body["error"]
