"""Client service: registration, activation and lookups."""

from typing import Any, Dict

import structlog

from app.core.exceptions import NotFoundError, ValidationError
from app.domain.models.client import Client
from app.domain.schemas.client import ClientCreate
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def register_client(store: Store, data: ClientCreate) -> Client:
    """Register a client. Needs a name and at least one contact (email or phone)."""
    nombre = _clean(data.nombre)
    email = _clean(data.email).lower() or None
    telefono = _clean(data.telefono)

    if not nombre or not (email or telefono):
        raise ValidationError("Nombre y email (o teléfono) son requeridos")

    client = store.clients.create(
        {
            "nombre": nombre,
            "email": email,
            "telefono": telefono,
            "direccion": _clean(data.direccion),
            "ruc": _clean(data.ruc) or None,
            "activo": True,
        }
    )
    logger.info("Client registered", client_id=client.id)
    return client


def get_client(store: Store, client_id: int) -> Client:
    client = store.clients.get_by_id(client_id)
    if client is None:
        raise NotFoundError("Cliente no encontrado")
    return client


def set_client_active(store: Store, client_id: int, activo: bool) -> Client:
    """Logical delete / restore. Clients are never removed."""
    get_client(store, client_id)
    client = store.clients.update(client_id, {"activo": activo})
    logger.info("Client active flag changed", client_id=client_id, activo=activo)
    return client


def list_clients(store: Store, page: int | None = None, limit: int | None = None) -> Dict[str, Any]:
    """Get clients with pagination; without page/limit the whole list is returned."""
    total = store.clients.count()
    if page is None and limit is None:
        return {"items": store.clients.list(), "total": total, "page": 1, "limit": total}

    page = page or 1
    limit = limit or total or 1
    items = store.clients.list(skip=(page - 1) * limit, limit=limit)
    return {"items": items, "total": total, "page": page, "limit": limit}


def search_clients(store: Store, q: str | None, page: int = 1, limit: int = 50) -> Dict[str, Any]:
    items, total = store.clients.search(q or "", skip=(page - 1) * limit, limit=limit)
    return {"items": items, "total": total, "page": page, "limit": limit}


def count_clients(store: Store) -> Dict[str, int]:
    return {"total": store.clients.count(), "activos": store.clients.count_active()}
