"""Status service: field observations of assigned units."""

from typing import List

import structlog

from app.config import get_settings
from app.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from app.domain.models.assignment import Assignment
from app.domain.models.status_record import CensusState, StatusRecord
from app.domain.schemas.assignment import (
    StatusFilter,
    StatusRecordCreate,
    StatusRecordEnriched,
    StatusRecordRead,
)
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)

NOT_FOUND_LABEL = "No encontrado"


def _resolve_assignment(store: Store, data: StatusRecordCreate) -> Assignment:
    if data.asignacion_id is not None:
        assignment = store.assignments.get_by_id(data.asignacion_id)
        if assignment is None:
            raise NotFoundError("Asignación no encontrada", {"asignacion_id": data.asignacion_id})
        if data.equipo_id is not None and data.equipo_id != assignment.equipo_id:
            raise ValidationError("La asignación no corresponde al equipo")
        if data.cliente_id is not None and data.cliente_id != assignment.cliente_id:
            raise ValidationError("La asignación no corresponde al cliente")
        return assignment

    if data.equipo_id is None or data.cliente_id is None:
        raise ValidationError("Se requiere asignacion_id, o equipo_id y cliente_id")

    assignment = store.assignments.get_active_for_equipment(data.equipo_id)
    if assignment is None or assignment.cliente_id != data.cliente_id:
        raise NotFoundError(
            "El equipo no tiene una asignación activa con ese cliente",
            {"equipo_id": data.equipo_id, "cliente_id": data.cliente_id},
        )
    return assignment


def record_status(store: Store, data: StatusRecordCreate) -> StatusRecord:
    """Store an observation sent by a field device.

    Whatever the device marked it as, a record that reached the server is
    synced and its census state is migrated.
    """
    estado_general = (data.estado_general or "").strip()
    if not data.usuario_id or data.funcionando is None or not estado_general:
        raise ValidationError("Datos incompletos")

    assignment = _resolve_assignment(store, data)
    if store.users.get_by_id(data.usuario_id) is None:
        raise InvalidReferenceError("Usuario no encontrado", {"usuario_id": data.usuario_id})

    settings = get_settings()
    record = store.status_records.create(
        {
            "asignacion_id": assignment.id,
            "equipo_id": assignment.equipo_id,
            "cliente_id": assignment.cliente_id,
            "usuario_id": data.usuario_id,
            "funcionando": data.funcionando,
            "estado_general": estado_general,
            "temperatura_actual": data.temperatura_actual,
            "temperatura_freezer": data.temperatura_freezer,
            "latitud": data.latitud if data.latitud is not None else settings.DEFAULT_LATITUDE,
            "longitud": data.longitud if data.longitud is not None else settings.DEFAULT_LONGITUDE,
            "fecha_captura": data.fecha_captura,
            "synced": True,
            "census_state": CensusState.MIGRATED,
        }
    )
    logger.info(
        "Status recorded",
        status_id=record.id,
        assignment_id=assignment.id,
        equipment_id=record.equipo_id,
        funcionando=record.funcionando,
    )
    return record


def list_status_records(store: Store, filters: StatusFilter) -> List[StatusRecordEnriched]:
    # Start from the most selective index available
    if filters.asignacion_id is not None:
        records = store.status_records.find_by("asignacion_id", filters.asignacion_id)
    elif filters.equipo_id is not None:
        records = store.status_records.find_by("equipo_id", filters.equipo_id)
    elif filters.cliente_id is not None:
        records = store.status_records.find_by("cliente_id", filters.cliente_id)
    else:
        records = store.status_records.list()

    criteria = filters.model_dump(exclude_none=True)
    records = [r for r in records if all(getattr(r, k) == v for k, v in criteria.items())]

    result = []
    for record in records:
        equipment = store.equipment.get_by_id(record.equipo_id)
        client = store.clients.get_by_id(record.cliente_id)
        user = store.users.get_by_id(record.usuario_id) if record.usuario_id else None
        result.append(
            StatusRecordEnriched(
                **StatusRecordRead.model_validate(record).model_dump(),
                refrigerador_info=equipment.label if equipment else NOT_FOUND_LABEL,
                cliente_nombre=client.nombre if client else NOT_FOUND_LABEL,
                usuario_nombre=user.nombre if user else NOT_FOUND_LABEL,
            )
        )
    return result
