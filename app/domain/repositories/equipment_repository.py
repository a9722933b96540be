"""
Equipment Repository Interface.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.equipment import Equipment


class EquipmentRepository(BaseRepository[Equipment]):
    """Interface for Equipment-specific operations."""

    def get_by_barcode(self, cod_barras: str) -> Optional[Equipment]:
        """Get the unit carrying a barcode."""
        ...

    def search(self, q: str) -> List[Equipment]:
        """Case-insensitive substring match on barcode, brand and model."""
        ...
