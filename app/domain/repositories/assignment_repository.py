"""
Assignment and status record repository interfaces.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.assignment import Assignment
from app.domain.models.status_record import StatusRecord


class AssignmentRepository(BaseRepository[Assignment]):
    """Interface for Assignment-specific operations."""

    def get_active_for_equipment(self, equipo_id: int) -> Optional[Assignment]:
        """The single active assignment of a unit, if any."""
        ...

    def list_active(self) -> List[Assignment]:
        """Active assignments in insertion order."""
        ...


class StatusRecordRepository(BaseRepository[StatusRecord]):
    """Interface for StatusRecord-specific operations."""

    def latest_for_equipment(self, equipo_id: int) -> Optional[StatusRecord]:
        """Most recent record of a unit (highest id)."""
        ...

    def list_for_assignment(self, asignacion_id: int) -> List[StatusRecord]:
        """All records taken under one assignment."""
        ...
