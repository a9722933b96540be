"""Assignment service: placing units at clients and retiring them."""

from typing import List, Tuple

import structlog

from app.config import get_settings
from app.core.exceptions import ConflictError, InvalidReferenceError, NotFoundError, ValidationError
from app.domain.models.assignment import ASSIGNED, RETIRED, Assignment
from app.domain.models.status_record import CensusState, StatusRecord
from app.domain.schemas.assignment import AssignmentCreate, AssignmentEnriched
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)

PENDING_REVIEW = "Asignado - Pendiente revisión"
NOT_FOUND_LABEL = "No encontrado"
NO_STATUS = "Sin estado"


def create_assignment(store: Store, data: AssignmentCreate) -> Tuple[Assignment, StatusRecord]:
    """Place a unit at a client.

    Inserts the assignment together with a seed status record awaiting the
    first field review. A unit can have only one active assignment.
    """
    if not data.equipo_id or not data.cliente_id or not data.usuario_id:
        raise ValidationError("Todos los IDs son requeridos")

    references = {
        "equipo_id": store.equipment.get_by_id(data.equipo_id),
        "cliente_id": store.clients.get_by_id(data.cliente_id),
        "usuario_id": store.users.get_by_id(data.usuario_id),
    }
    missing = [field for field, entity in references.items() if entity is None]
    if missing:
        raise InvalidReferenceError("Equipo, cliente o usuario no encontrado", {"missing": missing})

    settings = get_settings()
    with store.transaction(store.assignments, store.status_records):
        current = store.assignments.get_active_for_equipment(data.equipo_id)
        if current is not None:
            raise ConflictError(
                "El equipo ya está asignado",
                {"asignacion_id": current.id, "cliente_id": current.cliente_id},
            )

        assignment = store.assignments.create(
            {
                "equipo_id": data.equipo_id,
                "cliente_id": data.cliente_id,
                "usuario_id": data.usuario_id,
                "activo": True,
                "estado": ASSIGNED,
            }
        )
        status = store.status_records.create(
            {
                "asignacion_id": assignment.id,
                "equipo_id": data.equipo_id,
                "cliente_id": data.cliente_id,
                "usuario_id": data.usuario_id,
                "funcionando": True,
                "estado_general": PENDING_REVIEW,
                "latitud": settings.DEFAULT_LATITUDE,
                "longitud": settings.DEFAULT_LONGITUDE,
                "synced": True,
                "census_state": CensusState.PENDING,
            }
        )

    logger.info(
        "Assignment created",
        assignment_id=assignment.id,
        equipment_id=assignment.equipo_id,
        client_id=assignment.cliente_id,
    )
    return assignment, status


def retire_assignment(store: Store, assignment_id: int) -> Assignment:
    """Close an active assignment; the unit becomes free for a new one."""
    with store.transaction(store.assignments):
        assignment = store.assignments.get_by_id(assignment_id)
        if assignment is None:
            raise NotFoundError("Asignación no encontrada")
        if not assignment.activo:
            raise ConflictError("La asignación ya fue retirada")

        retired = store.assignments.update(
            assignment_id,
            {"activo": False, "fecha_retiro": store.now(), "estado": RETIRED},
        )

    logger.info("Assignment retired", assignment_id=assignment_id, equipment_id=retired.equipo_id)
    return retired


def list_assignments_enriched(store: Store, include_inactive: bool = False) -> List[AssignmentEnriched]:
    assignments = store.assignments.list() if include_inactive else store.assignments.list_active()

    result = []
    for assignment in assignments:
        equipment = store.equipment.get_by_id(assignment.equipo_id)
        client = store.clients.get_by_id(assignment.cliente_id)
        records = store.status_records.list_for_assignment(assignment.id)
        status = records[-1] if records else None

        result.append(
            AssignmentEnriched(
                id=assignment.id,
                refrigerador=equipment.label if equipment else NOT_FOUND_LABEL,
                cliente=client.nombre if client else NOT_FOUND_LABEL,
                equipo_id=assignment.equipo_id,
                cliente_id=assignment.cliente_id,
                fecha_asignacion=assignment.fecha_asignacion,
                fecha_retiro=assignment.fecha_retiro,
                activo=assignment.activo,
                estado_actual=status.estado_general if status else NO_STATUS,
                funcionando=status.funcionando if status else None,
                temperatura_actual=status.temperatura_actual if status else None,
            )
        )
    return result
