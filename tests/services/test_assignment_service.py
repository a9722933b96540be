"""Tests for the assignment lifecycle."""

import pytest

from app.application.services.assignment_service import (
    PENDING_REVIEW,
    create_assignment,
    list_assignments_enriched,
    retire_assignment,
)
from app.application.services.equipment_service import get_equipment_with_status
from app.core.exceptions import ConflictError, InvalidReferenceError, NotFoundError, ValidationError
from app.domain.models.status_record import CensusState
from app.domain.schemas.assignment import AssignmentCreate


def test_create_assignment_inserts_seed_status(store) -> None:
    assignment, status = create_assignment(store, AssignmentCreate(equipo_id=5, cliente_id=3, usuario_id=2))

    assert assignment.id == 16
    assert assignment.activo is True
    assert status.asignacion_id == assignment.id
    assert status.estado_general == PENDING_REVIEW
    assert status.census_state == CensusState.PENDING
    assert (status.latitud, status.longitud) == (-25.2637, -57.5759)

    records = store.status_records.list_for_assignment(assignment.id)
    assert len(records) == 1
    assert records[0].estado_general == PENDING_REVIEW

    view = get_equipment_with_status(store, 5)
    assert view.cliente_id == 3
    assert view.asignado_a == "Carlos López"
    assert view.estado_actual == PENDING_REVIEW


def test_create_assignment_conflict_when_already_active(store) -> None:
    with pytest.raises(ConflictError):
        create_assignment(store, AssignmentCreate(equipo_id=1, cliente_id=2, usuario_id=1))
    assert store.assignments.count() == 15
    assert store.status_records.count() == 15


@pytest.mark.parametrize(
    "payload",
    [
        {"equipo_id": 999, "cliente_id": 1, "usuario_id": 1},
        {"equipo_id": 5, "cliente_id": 999, "usuario_id": 1},
        {"equipo_id": 5, "cliente_id": 1, "usuario_id": 999},
    ],
)
def test_create_assignment_unknown_reference(store, payload) -> None:
    with pytest.raises(InvalidReferenceError):
        create_assignment(store, AssignmentCreate(**payload))
    assert store.assignments.count() == 15
    assert store.status_records.count() == 15


def test_create_assignment_requires_all_ids(store) -> None:
    with pytest.raises(ValidationError):
        create_assignment(store, AssignmentCreate(equipo_id=5, cliente_id=1))


def test_retire_then_reassign_creates_new_row(store) -> None:
    retired = retire_assignment(store, 1)
    assert retired.activo is False
    assert retired.estado == "Retirado"
    assert retired.fecha_retiro is not None

    with pytest.raises(ConflictError):
        retire_assignment(store, 1)

    assignment, _ = create_assignment(store, AssignmentCreate(equipo_id=1, cliente_id=4, usuario_id=1))
    assert assignment.id == 16
    history = store.assignments.find_by("equipo_id", 1)
    assert [a.activo for a in history] == [False, True]


def test_retire_unknown_assignment(store) -> None:
    with pytest.raises(NotFoundError):
        retire_assignment(store, 404)


def test_list_assignments_enriched(store) -> None:
    active = list_assignments_enriched(store)
    assert len(active) == 13
    first = active[0]
    assert first.refrigerador == "Samsung RT38K5932SL"
    assert first.cliente == "Juan Pérez"
    assert first.estado_actual == "Funcionando correctamente"

    everything = list_assignments_enriched(store, include_inactive=True)
    assert len(everything) == 15
