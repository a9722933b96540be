"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from contextlib import AbstractContextManager
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic storage operations.

    Records are never physically removed; logical deletion goes through
    ``update`` on an ``activo`` flag.
    """

    name: str

    def lock(self) -> AbstractContextManager:
        """Exclusive lock over this collection."""
        ...

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def get_by(self, field: str, value: Any) -> Optional[T]:
        """Get a single entity through a unique index."""
        ...

    def find_by(self, field: str, value: Any) -> List[T]:
        """Entities whose indexed ``field`` equals ``value``, in insertion order."""
        ...

    def list(self, skip: int = 0, limit: Optional[int] = None, where: Optional[Callable[[T], bool]] = None) -> List[T]:
        """List entities in insertion order with pagination."""
        ...

    def count(self, where: Optional[Callable[[T], bool]] = None) -> int:
        """Count entities, optionally filtered."""
        ...

    def create(self, obj_in: Dict[str, Any]) -> T:
        """Create a new entity; the store assigns id and creation time."""
        ...

    def update(self, id: int, changes: Dict[str, Any]) -> T:
        """Replace an entity with a copy carrying ``changes``."""
        ...
