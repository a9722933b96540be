"""Status record: a point-in-time observation of an assigned unit."""

from datetime import datetime
from enum import Enum
from typing import Optional

from app.domain.models.base import Record


class CensusState(str, Enum):
    PENDING = "pending"
    MIGRATED = "migrated"


class StatusRecord(Record):
    asignacion_id: int
    equipo_id: int
    cliente_id: int
    usuario_id: Optional[int] = None

    funcionando: bool
    estado_general: str
    temperatura_actual: Optional[float] = None
    temperatura_freezer: Optional[float] = None

    latitud: float
    longitud: float

    fecha_revision: datetime
    fecha_captura: Optional[datetime] = None  # device clock, when captured offline

    synced: bool = True
    census_state: CensusState = CensusState.PENDING
