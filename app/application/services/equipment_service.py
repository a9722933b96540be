"""Equipment service: registration, search and the equipment/status view."""

from typing import List, Optional

import structlog

from app.core.exceptions import NotFoundError, ValidationError
from app.domain.models.catalog import Brand, EquipmentModel, Logo
from app.domain.models.equipment import Equipment
from app.domain.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentWithStatus
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("cod_barras", "marca", "modelo", "tipo_equipo")
NOT_REVIEWED = "Sin revisar"


def register_equipment(store: Store, data: EquipmentCreate) -> Equipment:
    """Register a unit. Barcodes are unique; brand and model are linked to the
    reference tables when their names are known."""
    values = {field: (getattr(data, field) or "").strip() for field in REQUIRED_FIELDS}
    missing = [field for field, value in values.items() if not value]
    if missing:
        raise ValidationError("Todos los campos son requeridos", {"missing": missing})

    if data.logo_id is not None and store.logos.get_by_id(data.logo_id) is None:
        raise ValidationError("Logo no encontrado", {"logo_id": data.logo_id})

    brand = store.brands.find_by_name(values["marca"])
    model = store.models.find_by_name(values["modelo"], marca_id=brand.id) if brand else None

    equipment = store.equipment.create(
        {
            **values,
            "numero_serie": (data.numero_serie or "").strip() or None,
            "marca_id": brand.id if brand else None,
            "modelo_id": model.id if model else None,
            "logo_id": data.logo_id,
        }
    )
    logger.info("Equipment registered", equipment_id=equipment.id, cod_barras=equipment.cod_barras)
    return equipment


def with_status(store: Store, equipment: Equipment) -> EquipmentWithStatus:
    """Join a unit with its active assignee and its most recent status record."""
    assignment = store.assignments.get_active_for_equipment(equipment.id)
    client = store.clients.get_by_id(assignment.cliente_id) if assignment else None
    status = store.status_records.latest_for_equipment(equipment.id)

    return EquipmentWithStatus(
        **EquipmentRead.model_validate(equipment).model_dump(),
        asignado_a=client.nombre if client else None,
        cliente_id=client.id if client else None,
        asignacion_id=assignment.id if assignment else None,
        estado_actual=status.estado_general if status else NOT_REVIEWED,
        funcionando=status.funcionando if status else None,
        temperatura_actual=status.temperatura_actual if status else None,
        temperatura_freezer=status.temperatura_freezer if status else None,
        ultima_revision=status.fecha_revision if status else None,
    )


def list_equipment_with_status(store: Store) -> List[EquipmentWithStatus]:
    return [with_status(store, e) for e in store.equipment.list()]


def get_equipment_with_status(store: Store, equipment_id: int) -> EquipmentWithStatus:
    equipment = store.equipment.get_by_id(equipment_id)
    if equipment is None:
        raise NotFoundError("Equipo no encontrado")
    return with_status(store, equipment)


def search_equipment(store: Store, q: Optional[str]) -> List[Equipment]:
    """Case-insensitive substring match on barcode, brand and model. No ranking."""
    return store.equipment.search(q or "")


def list_brands(store: Store) -> List[Brand]:
    return store.brands.list()


def list_models(store: Store, marca_id: Optional[int] = None) -> List[EquipmentModel]:
    if marca_id is not None:
        return store.models.find_by("marca_id", marca_id)
    return store.models.list()


def list_logos(store: Store) -> List[Logo]:
    return store.logos.list()
