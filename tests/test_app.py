from storefront.config.database import get_database_manager


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "running"
    assert body["docs"] == "/docs"


def test_health_without_database(client):
    assert not get_database_manager().is_connected()
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "disconnected"


def test_database_unavailable_answers_503(client):
    from storefront.main import app
    app.dependency_overrides.clear()

    response = client.get("/api/products")
    assert response.status_code == 503
    assert response.json()["success"] is False


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}
