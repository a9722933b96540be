"""
Reference tables (brands, models, logos). Populated once by the seed.
"""

from typing import Optional, TypeVar

from app.domain.models.catalog import Brand, EquipmentModel, Logo
from app.infrastructure.repositories.base_repository import InMemoryRepository

CatalogType = TypeVar("CatalogType", Brand, EquipmentModel, Logo)


class InMemoryCatalogRepository(InMemoryRepository[CatalogType]):

    def find_by_name(self, nombre: str, **filters) -> Optional[CatalogType]:
        needle = nombre.strip().lower()
        for row in self.list():
            if row.nombre.lower() != needle:
                continue
            if all(getattr(row, k) == v for k, v in filters.items()):
                return row
        return None


def brand_repository() -> InMemoryCatalogRepository[Brand]:
    return InMemoryCatalogRepository("marcas", Brand)


def model_repository() -> InMemoryCatalogRepository[EquipmentModel]:
    return InMemoryCatalogRepository("modelos", EquipmentModel, indexed=("marca_id",))


def logo_repository() -> InMemoryCatalogRepository[Logo]:
    return InMemoryCatalogRepository("logos", Logo)
