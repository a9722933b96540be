"""
Client Repository Interface.
Defines specific data access operations for Clients.
"""

from typing import List, Tuple

from app.domain.repositories.base import BaseRepository
from app.domain.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Interface for Client-specific operations."""

    def search(self, q: str, skip: int = 0, limit: int | None = None) -> Tuple[List[Client], int]:
        """Case-insensitive substring search; returns the page and the total match count."""
        ...

    def count_active(self) -> int:
        """Count clients whose ``activo`` flag is set."""
        ...
