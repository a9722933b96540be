"""Tests for equipment API endpoints."""

from fastapi.testclient import TestClient

from app.infrastructure.seed import EQUIPMENT

SEED_COUNT = len(EQUIPMENT)

NEW_UNIT = {"cod_barras": "REF100", "marca": "LG", "modelo": "GS65SPP1", "tipo_equipo": "Freezer"}


def test_list_equipment_enriched(client: TestClient) -> None:
    payload = client.get("/equipos").json()
    assert len(payload) == SEED_COUNT
    first = payload[0]
    assert first["asignado_a"] == "Juan Pérez"
    assert first["estado_actual"] == "Funcionando correctamente"
    assert first["temperatura_freezer"] == -18.5


def test_create_equipment(client: TestClient) -> None:
    response = client.post("/equipos", json=NEW_UNIT)
    assert response.status_code == 201
    equipo = response.json()["equipo"]
    assert equipo["id"] == SEED_COUNT + 1
    assert equipo["marca_id"] is not None


def test_create_equipment_twice_same_barcode(client: TestClient) -> None:
    assert client.post("/equipos", json=NEW_UNIT).status_code == 201

    response = client.post("/equipos", json=NEW_UNIT)
    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["message"] == "El código de barras ya existe"

    found = client.get("/equipos/buscar", params={"q": "REF100"}).json()
    assert found["total"] == 1


def test_create_equipment_missing_fields(client: TestClient) -> None:
    response = client.post("/equipos", json={"cod_barras": "X"})
    assert response.status_code == 400
    assert response.json()["message"] == "Todos los campos son requeridos"


def test_create_equipment_barcode_alias(client: TestClient) -> None:
    body = {**NEW_UNIT}
    body["codigo_barras"] = body.pop("cod_barras")
    response = client.post("/equipos", json=body)
    assert response.status_code == 201
    assert response.json()["equipo"]["cod_barras"] == "REF100"


def test_search_equipment(client: TestClient) -> None:
    payload = client.get("/equipos/buscar", params={"q": "whirlpool"}).json()
    assert payload["success"] is True
    assert payload["total"] == 2
    assert {e["cod_barras"] for e in payload["equipos"]} == {"REF003", "REF013"}


def test_get_equipment(client: TestClient) -> None:
    assert client.get("/equipos/5").json()["asignado_a"] is None
    assert client.get("/equipos/500").status_code == 404


def test_catalog(client: TestClient) -> None:
    brands = client.get("/marcas").json()
    assert len(brands) == 10
    samsung = next(b for b in brands if b["nombre"] == "Samsung")
    models = client.get("/modelos", params={"marca_id": samsung["id"]}).json()
    assert {m["nombre"] for m in models} == {"RT38K5932SL", "RB29HSR2DWW"}
    assert client.get("/logos").json()[0]["nombre"] == "Sin logo"
