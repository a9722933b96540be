"""Static reference tables for equipment: brands, models and branding logos."""

from datetime import datetime
from typing import Optional

from app.domain.models.base import Record


class Brand(Record):
    nombre: str
    fecha_creacion: Optional[datetime] = None


class EquipmentModel(Record):
    nombre: str
    marca_id: int
    fecha_creacion: Optional[datetime] = None


class Logo(Record):
    nombre: str
    fecha_creacion: Optional[datetime] = None
