from fastapi.testclient import TestClient


def test_health_endpoints(client: TestClient):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

    response = client.get("/readyz")
    assert response.json() == {"status": "ready"}


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}
