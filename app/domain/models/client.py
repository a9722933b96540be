"""Client domain model: customers that receive refrigeration equipment."""

from datetime import datetime
from typing import Optional

from app.domain.models.base import Record


class Client(Record):
    nombre: str
    email: Optional[str] = None
    telefono: str = ""
    direccion: str = ""
    ruc: Optional[str] = None  # tax id
    activo: bool = True
    fecha_creacion: datetime

    def __repr__(self):
        return f"<Client {self.id} - {self.nombre}>"
