from unittest.mock import patch


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready(client):
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_ready_database_down(client):
    with patch("token_gateway.token_gateway.auth_service.routes.health.check_db_connection", return_value=False):
        response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["detail"]["status"] == "not_ready"


def test_storage_failure_is_500(client, auth_headers):
    from sqlalchemy.exc import OperationalError

    with patch(
        "token_gateway.token_gateway.auth_service.deps.validate_token",
        side_effect=OperationalError("SELECT 1", {}, Exception("db down")),
    ):
        response = client.get("/api/v1/users", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"errors": ["Internal server error"]}
