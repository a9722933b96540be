"""Tests for the dashboard endpoint."""

from fastapi.testclient import TestClient


def test_dashboard_seed_scenario(client: TestClient) -> None:
    """15 clients (2 inactive) and 15 units (2 free)."""
    payload = client.get("/dashboard").json()
    assert payload["clientes"] == {"total": 15, "activos": 13}
    assert payload["refrigeradores"]["libres"] == 2
    assert payload["refrigeradores"]["asignados"] == 13
    assert payload["usuarios"] == {"total": 15}
    assert "timestamp" in payload


def test_dashboard_is_recomputed(client: TestClient) -> None:
    client.post("/clientes", json={"nombre": "Nuevo", "email": "nuevo@x.com"})
    client.post("/asignaciones", json={"equipo_id": 5, "cliente_id": 16, "usuario_id": 1})

    payload = client.get("/dashboard").json()
    assert payload["clientes"] == {"total": 16, "activos": 14}
    assert payload["refrigeradores"]["libres"] == 1
