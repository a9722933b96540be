"""Tests for equipment registration and the equipment/status view."""

import pytest

from app.application.services.equipment_service import (
    list_equipment_with_status,
    list_models,
    register_equipment,
    search_equipment,
)
from app.core.exceptions import DuplicateError, ValidationError
from app.domain.schemas.equipment import EquipmentCreate


def _payload(**overrides) -> EquipmentCreate:
    data = {"cod_barras": "REF100", "marca": "Samsung", "modelo": "RT38K5932SL", "tipo_equipo": "Freezer"}
    data.update(overrides)
    return EquipmentCreate(**data)


def test_register_equipment_links_reference_tables(store) -> None:
    equipment = register_equipment(store, _payload(marca=" samsung "))
    assert equipment.id == 16
    assert equipment.marca == "samsung"
    assert equipment.marca_id == store.brands.find_by_name("Samsung").id
    assert equipment.modelo_id is not None


def test_register_equipment_with_unknown_brand(store) -> None:
    equipment = register_equipment(store, _payload(marca="Consul", modelo="CVU20"))
    assert equipment.marca_id is None
    assert equipment.modelo_id is None


def test_register_equipment_duplicate_barcode(store) -> None:
    with pytest.raises(DuplicateError):
        register_equipment(store, _payload(cod_barras="REF001"))
    assert store.equipment.count() == 15


def test_register_equipment_duplicate_after_trim(store) -> None:
    register_equipment(store, _payload(cod_barras="REF200"))
    with pytest.raises(DuplicateError):
        register_equipment(store, _payload(cod_barras="  REF200 "))


def test_register_equipment_missing_fields(store) -> None:
    with pytest.raises(ValidationError) as exc_info:
        register_equipment(store, EquipmentCreate(cod_barras="X1", marca="LG"))
    assert exc_info.value.details["missing"] == ["modelo", "tipo_equipo"]


def test_register_equipment_unknown_logo(store) -> None:
    with pytest.raises(ValidationError):
        register_equipment(store, _payload(logo_id=99))
    assert register_equipment(store, _payload(logo_id=2)).logo_id == 2


def test_equipment_view_joins_assignee_and_latest_status(store) -> None:
    view = {e.id: e for e in list_equipment_with_status(store)}

    assert view[1].asignado_a == "Juan Pérez"
    assert view[1].estado_actual == "Funcionando correctamente"
    assert view[2].funcionando is False

    # Unit 5's assignment is retired: no assignee, but its history remains
    assert view[5].asignado_a is None
    assert view[5].cliente_id is None
    assert view[5].estado_actual == "Apagado por cliente"


def test_equipment_view_for_new_unit(store) -> None:
    equipment = register_equipment(store, _payload())
    view = list_equipment_with_status(store)[-1]
    assert view.id == equipment.id
    assert view.estado_actual == "Sin revisar"
    assert view.funcionando is None


def test_search_equipment_matches_barcode_brand_model(store) -> None:
    assert [e.cod_barras for e in search_equipment(store, "ref00")] == [
        f"REF00{n}" for n in range(1, 10)
    ]
    assert {e.id for e in search_equipment(store, "SAMSUNG")} == {1, 11}
    assert [e.id for e in search_equipment(store, "gts")] == [9]
    assert search_equipment(store, "zzz") == []


def test_list_models_by_brand(store) -> None:
    lg = store.brands.find_by_name("LG")
    assert sorted(m.nombre for m in list_models(store, lg.id)) == ["GC-X247", "GS65SPP1"]
