"""
In-memory implementation of the Client Repository.
"""

from typing import List, Tuple

from app.domain.models.client import Client
from app.domain.repositories.client_repository import ClientRepository
from app.infrastructure.repositories.base_repository import InMemoryRepository

SEARCH_FIELDS = ("nombre", "email", "telefono", "direccion", "ruc")


class InMemoryClientRepository(InMemoryRepository[Client], ClientRepository):
    """Client repository implementation backed by process memory."""

    def __init__(self):
        super().__init__("clientes", Client)

    def search(self, q: str, skip: int = 0, limit: int | None = None) -> Tuple[List[Client], int]:
        needle = q.strip().lower()

        def matches(client: Client) -> bool:
            return any(needle in (getattr(client, f) or "").lower() for f in SEARCH_FIELDS)

        found = self.list(where=matches)
        end = skip + limit if limit is not None else None
        return found[skip:end], len(found)

    def count_active(self) -> int:
        return self.count(where=lambda c: c.activo)
