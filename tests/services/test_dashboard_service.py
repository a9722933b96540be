"""Tests for the dashboard aggregate."""

from app.application.services.assignment_service import create_assignment, retire_assignment
from app.application.services.dashboard_service import dashboard_summary
from app.domain.schemas.assignment import AssignmentCreate


def test_dashboard_counts_seed(store) -> None:
    summary = dashboard_summary(store)

    assert summary.clientes.total == 15
    assert summary.clientes.activos == 13
    assert summary.refrigeradores.total == 15
    assert summary.refrigeradores.asignados == 13
    assert summary.refrigeradores.libres == 2
    assert summary.refrigeradores.funcionando == 10
    assert summary.refrigeradores.en_reparacion == 5
    assert summary.usuarios.total == 15


def test_dashboard_follows_assignment_lifecycle(store) -> None:
    create_assignment(store, AssignmentCreate(equipo_id=5, cliente_id=5, usuario_id=1))
    retire_assignment(store, 2)

    summary = dashboard_summary(store)
    assert summary.refrigeradores.asignados == 13
    assert summary.refrigeradores.libres == 2
    # Unit 5's newest record is the pending review seed, which is operational
    assert summary.refrigeradores.funcionando == 11
    assert summary.refrigeradores.en_reparacion == 4
