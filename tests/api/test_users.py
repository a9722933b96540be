"""Tests for user API endpoints."""

from fastapi.testclient import TestClient


def test_list_users_strips_credentials(client: TestClient) -> None:
    payload = client.get("/usuarios").json()
    assert len(payload) == 15
    for user in payload:
        assert set(user) == {"id", "nombre", "email", "rol", "activo", "fecha_creacion"}


def test_login_success(client: TestClient) -> None:
    response = client.post("/usuarios/login", json={"email": "tecnico1@sistema.com", "contraseña": "tec123"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["usuario"] == {"id": 2, "nombre": "Técnico 1", "email": "tecnico1@sistema.com", "rol": "tecnico"}


def test_login_failure(client: TestClient) -> None:
    response = client.post("/usuarios/login", json={"email": "tecnico1@sistema.com", "contraseña": "nope"})
    assert response.status_code == 401
    assert response.json()["message"] == "Credenciales incorrectas"


def test_register_user_and_login(client: TestClient) -> None:
    response = client.post(
        "/usuarios",
        json={"nombre": "Vendedor", "email": "vend@sistema.com", "password": "v123", "rol": "vendedor"},
    )
    assert response.status_code == 201
    usuario = response.json()["usuario"]
    assert "password" not in usuario and "password_hash" not in usuario

    login = client.post("/usuarios/login", json={"email": "vend@sistema.com", "password": "v123"})
    assert login.json()["usuario"]["rol"] == "vendedor"

    duplicate = client.post("/usuarios", json={"nombre": "X", "email": "vend@sistema.com", "password": "x"})
    assert duplicate.status_code == 400


def test_user_client_territory(client: TestClient) -> None:
    assert client.post("/usuarios/7/clientes", json={"cliente_id": 2}).status_code == 201
    assert [c["id"] for c in client.get("/usuarios/7/clientes").json()] == [2]

    assert client.post("/usuarios/7/clientes", json={"cliente_id": 2}).status_code == 400
    assert client.get("/usuarios/999/clientes").status_code == 404
