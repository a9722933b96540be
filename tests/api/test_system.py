"""Tests for system routes and error rendering."""

from fastapi import APIRouter
from fastapi.testclient import TestClient

from app.main import app


def test_ping(client: TestClient) -> None:
    response = client.get("/ping")
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["version"] == "3.0.0"
    assert "timestamp" in payload


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_unknown_route_returns_404_envelope(client: TestClient) -> None:
    response = client.get("/no-existe")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Ruta no encontrada: GET /no-existe"}


def test_malformed_body_returns_400(client: TestClient) -> None:
    response = client.post("/asignaciones", json={"equipo_id": "abc", "cliente_id": 1, "usuario_id": 1})
    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"] == "ValidationError"


def test_request_id_header_is_returned(client: TestClient) -> None:
    response = client.get("/ping")
    assert response.headers.get("X-Request-ID")


def test_unexpected_error_returns_generic_500() -> None:
    router = APIRouter()

    @router.get("/_boom")
    def boom():
        raise RuntimeError("secret internals")

    app.include_router(router)
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/_boom")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/_boom"]

    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "message": "Error interno del servidor", "error": "InternalError"}
    assert "secret" not in response.text
