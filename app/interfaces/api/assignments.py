"""Assignment and status API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.infrastructure.store import Store
from app.interfaces.deps import get_store
from app.domain.models.status_record import CensusState
from app.domain.schemas.assignment import (
    AssignmentCreate,
    AssignmentEnriched,
    AssignmentRead,
    StatusFilter,
    StatusRecordCreate,
    StatusRecordEnriched,
    StatusRecordRead,
)
from app.application.services.assignment_service import (
    create_assignment,
    list_assignments_enriched,
    retire_assignment,
)
from app.application.services.status_service import list_status_records, record_status

router = APIRouter(tags=["Asignaciones"])


@router.get("/asignaciones", response_model=list[AssignmentEnriched])
def list_assignments(incluir_inactivas: bool = False, store: Store = Depends(get_store)):
    return list_assignments_enriched(store, include_inactive=incluir_inactivas)


@router.post("/asignaciones", status_code=status.HTTP_201_CREATED)
def assign(body: AssignmentCreate, store: Store = Depends(get_store)):
    assignment, seed_status = create_assignment(store, body)
    return {
        "success": True,
        "message": "Asignación creada correctamente",
        "asignacion": AssignmentRead.model_validate(assignment),
        "estado": StatusRecordRead.model_validate(seed_status),
    }


@router.post("/asignaciones/{assignment_id}/retirar")
def retire(assignment_id: int, store: Store = Depends(get_store)):
    assignment = retire_assignment(store, assignment_id)
    return {
        "success": True,
        "message": "Equipo retirado correctamente",
        "asignacion": AssignmentRead.model_validate(assignment),
    }


@router.get("/estados", response_model=list[StatusRecordEnriched])
def list_statuses(
    equipo_id: Optional[int] = None,
    cliente_id: Optional[int] = None,
    asignacion_id: Optional[int] = None,
    usuario_id: Optional[int] = None,
    census_state: Optional[CensusState] = None,
    synced: Optional[bool] = None,
    store: Store = Depends(get_store),
):
    filters = StatusFilter(
        equipo_id=equipo_id,
        cliente_id=cliente_id,
        asignacion_id=asignacion_id,
        usuario_id=usuario_id,
        census_state=census_state,
        synced=synced,
    )
    return list_status_records(store, filters)


@router.post("/estados", status_code=status.HTTP_201_CREATED)
def create_status(body: StatusRecordCreate, store: Store = Depends(get_store)):
    record = record_status(store, body)
    return {
        "success": True,
        "message": "Estado actualizado correctamente",
        "estado": StatusRecordRead.model_validate(record),
    }
