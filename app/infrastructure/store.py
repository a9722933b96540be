"""
Entity store: owns every collection of the registry.

Collections live in process memory and are rebuilt on every start.
"""

from contextlib import ExitStack, contextmanager
from datetime import datetime
from typing import Iterator

from app.infrastructure.repositories.base_repository import InMemoryRepository, now
from app.infrastructure.repositories.assignment_repository import (
    InMemoryAssignmentRepository,
    InMemoryStatusRecordRepository,
)
from app.infrastructure.repositories.catalog_repository import (
    brand_repository,
    logo_repository,
    model_repository,
)
from app.infrastructure.repositories.client_repository import InMemoryClientRepository
from app.infrastructure.repositories.equipment_repository import InMemoryEquipmentRepository
from app.infrastructure.repositories.user_repository import (
    InMemoryUserClientRepository,
    InMemoryUserRepository,
)


class Store:
    def __init__(self):
        self.clients = InMemoryClientRepository()
        self.equipment = InMemoryEquipmentRepository()
        self.brands = brand_repository()
        self.models = model_repository()
        self.logos = logo_repository()
        self.users = InMemoryUserRepository()
        self.assignments = InMemoryAssignmentRepository()
        self.status_records = InMemoryStatusRecordRepository()
        self.user_clients = InMemoryUserClientRepository()

    @property
    def collections(self) -> list[InMemoryRepository]:
        return [
            self.clients,
            self.equipment,
            self.brands,
            self.models,
            self.logos,
            self.users,
            self.assignments,
            self.status_records,
            self.user_clients,
        ]

    @contextmanager
    def transaction(self, *repos: InMemoryRepository) -> Iterator["Store"]:
        """Hold the locks of ``repos`` for a check-then-write sequence.

        Locks are always taken in the order of ``collections`` so two
        transactions over overlapping collections cannot deadlock.
        """
        wanted = {id(r) for r in repos}
        with ExitStack() as stack:
            for repo in self.collections:
                if id(repo) in wanted:
                    stack.enter_context(repo.lock())
            yield self

    def now(self) -> datetime:
        return now()


def build_store(seed: bool = True) -> Store:
    """Create a store, optionally loaded with the demo data set."""
    store = Store()
    if seed:
        from app.infrastructure.seed import seed_store
        seed_store(store)
    return store
