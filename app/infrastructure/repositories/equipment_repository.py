"""
In-memory implementation of the Equipment Repository.
"""

from typing import List, Optional

from app.domain.models.equipment import Equipment
from app.domain.repositories.equipment_repository import EquipmentRepository
from app.infrastructure.repositories.base_repository import InMemoryRepository


class InMemoryEquipmentRepository(InMemoryRepository[Equipment], EquipmentRepository):
    """Equipment repository; barcodes are unique across the whole store."""

    def __init__(self):
        super().__init__(
            "equipos",
            Equipment,
            unique={"cod_barras": "El código de barras ya existe"},
            indexed=("marca_id",),
        )

    def get_by_barcode(self, cod_barras: str) -> Optional[Equipment]:
        return self.get_by("cod_barras", cod_barras)

    def search(self, q: str) -> List[Equipment]:
        needle = q.strip().lower()
        return self.list(
            where=lambda e: needle in e.cod_barras.lower()
            or needle in e.marca.lower()
            or needle in e.modelo.lower()
        )
