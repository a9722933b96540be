"""Assignment domain model: links one equipment unit to one client.

Lifecycle: active -> retired. A retired row is never reactivated; the
equipment gets a new Assignment row when it is placed again.
"""

from datetime import datetime
from typing import Optional

from app.domain.models.base import Record

ASSIGNED = "Asignado"
RETIRED = "Retirado"


class Assignment(Record):
    equipo_id: int
    cliente_id: int
    usuario_id: Optional[int] = None
    fecha_asignacion: datetime
    fecha_retiro: Optional[datetime] = None
    activo: bool = True
    estado: str = ASSIGNED

    def __repr__(self):
        return f"<Assignment(id={self.id}, equipo={self.equipo_id}, cliente={self.cliente_id}, active={self.activo})>"
