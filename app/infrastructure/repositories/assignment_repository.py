"""
In-memory implementations of the Assignment and StatusRecord repositories.
"""

from typing import List, Optional

from app.domain.models.assignment import Assignment
from app.domain.models.status_record import StatusRecord
from app.domain.repositories.assignment_repository import AssignmentRepository, StatusRecordRepository
from app.infrastructure.repositories.base_repository import InMemoryRepository


class InMemoryAssignmentRepository(InMemoryRepository[Assignment], AssignmentRepository):

    def __init__(self):
        super().__init__(
            "asignaciones",
            Assignment,
            timestamp_field="fecha_asignacion",
            indexed=("equipo_id", "cliente_id"),
        )

    def get_active_for_equipment(self, equipo_id: int) -> Optional[Assignment]:
        for assignment in reversed(self.find_by("equipo_id", equipo_id)):
            if assignment.activo:
                return assignment
        return None

    def list_active(self) -> List[Assignment]:
        return self.list(where=lambda a: a.activo)


class InMemoryStatusRecordRepository(InMemoryRepository[StatusRecord], StatusRecordRepository):

    def __init__(self):
        super().__init__(
            "estados",
            StatusRecord,
            timestamp_field="fecha_revision",
            indexed=("equipo_id", "cliente_id", "asignacion_id", "usuario_id"),
        )

    def latest_for_equipment(self, equipo_id: int) -> Optional[StatusRecord]:
        # Index lists are kept in id order, and ids are monotonic
        records = self.find_by("equipo_id", equipo_id)
        return records[-1] if records else None

    def list_for_assignment(self, asignacion_id: int) -> List[StatusRecord]:
        return self.find_by("asignacion_id", asignacion_id)
