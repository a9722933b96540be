"""Tests for clients API endpoints."""

from fastapi.testclient import TestClient

from app.infrastructure.seed import CLIENTS

SEED_COUNT = len(CLIENTS)


def test_list_clients_plain_array(client: TestClient) -> None:
    response = client.get("/clientes")
    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload, list)
    assert len(payload) == SEED_COUNT
    assert [c["id"] for c in payload] == list(range(1, SEED_COUNT + 1))


def test_list_clients_paginated(client: TestClient) -> None:
    response = client.get("/clientes", params={"page": 2, "limit": 10})
    payload = response.json()
    assert payload["total"] == SEED_COUNT
    assert payload["page"] == 2
    assert payload["limit"] == 10
    assert [c["id"] for c in payload["clientes"]] == [11, 12, 13, 14, 15]


def test_create_client(client: TestClient) -> None:
    response = client.post("/clientes", json={"nombre": "Ana", "email": "ana@x.com"})
    assert response.status_code == 201
    payload = response.json()
    assert payload["success"] is True
    assert payload["cliente"]["id"] == SEED_COUNT + 1
    assert payload["cliente"]["activo"] is True

    assert len(client.get("/clientes").json()) == SEED_COUNT + 1


def test_create_client_missing_fields(client: TestClient) -> None:
    response = client.post("/clientes", json={"nombre": "Ana"})
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert len(client.get("/clientes").json()) == SEED_COUNT


def test_create_client_with_alias_fields(client: TestClient) -> None:
    response = client.post("/clientes", json={"name": "Zoe", "phone": "0999-111222"})
    assert response.status_code == 201
    assert response.json()["cliente"]["telefono"] == "0999-111222"


def test_search_clients(client: TestClient) -> None:
    response = client.get("/clientes/buscar", params={"q": "email.com", "limit": 5})
    payload = response.json()
    assert payload["success"] is True
    assert payload["total"] == SEED_COUNT
    assert len(payload["clientes"]) == 5


def test_get_client_and_not_found(client: TestClient) -> None:
    assert client.get("/clientes/3").json()["nombre"] == "Carlos López"

    response = client.get("/clientes/999")
    assert response.status_code == 404
    assert response.json()["message"] == "Cliente no encontrado"


def test_toggle_client_active(client: TestClient) -> None:
    response = client.patch("/clientes/1/activo", json={"activo": False})
    assert response.status_code == 200
    assert response.json()["cliente"]["activo"] is False
    assert client.get("/dashboard").json()["clientes"]["activos"] == 12
