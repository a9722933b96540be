"""Dashboard service: aggregate counts, recomputed on every request."""

from app.application.services.client_service import count_clients
from app.domain.schemas.dashboard import ClientCounts, DashboardSummary, EquipmentCounts, UserCounts
from app.infrastructure.store import Store


def dashboard_summary(store: Store) -> DashboardSummary:
    """Totals for clients, equipment and users.

    A unit counts as assigned when it has an active assignment, and as
    operational or faulty according to its most recent status record.
    """
    equipment = store.equipment.list()
    assigned = 0
    operational = 0
    faulty = 0
    for unit in equipment:
        if store.assignments.get_active_for_equipment(unit.id) is not None:
            assigned += 1
        latest = store.status_records.latest_for_equipment(unit.id)
        if latest is None:
            continue
        if latest.funcionando:
            operational += 1
        else:
            faulty += 1

    return DashboardSummary(
        clientes=ClientCounts(**count_clients(store)),
        refrigeradores=EquipmentCounts(
            total=len(equipment),
            asignados=assigned,
            libres=len(equipment) - assigned,
            funcionando=operational,
            en_reparacion=faulty,
        ),
        usuarios=UserCounts(total=store.users.count()),
        timestamp=store.now(),
    )
