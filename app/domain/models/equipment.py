"""Equipment domain model: one refrigeration unit, identified by its barcode."""

from datetime import datetime
from typing import Optional

from app.domain.models.base import Record


class Equipment(Record):
    cod_barras: str
    marca: str
    modelo: str
    tipo_equipo: str
    numero_serie: Optional[str] = None

    # Reference tables, resolved by name when the unit is registered
    marca_id: Optional[int] = None
    modelo_id: Optional[int] = None
    logo_id: Optional[int] = None

    fecha_creacion: datetime

    @property
    def label(self) -> str:
        return f"{self.marca} {self.modelo}"

    def __repr__(self):
        return f"<Equipment {self.cod_barras} - {self.label}>"
