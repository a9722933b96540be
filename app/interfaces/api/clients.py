"""Client API routes: registration, listing, search and activation."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.config import get_settings
from app.infrastructure.store import Store
from app.interfaces.deps import get_store
from app.domain.schemas.client import ClientActiveUpdate, ClientCreate, ClientPage, ClientRead
from app.application.services.client_service import (
    get_client,
    list_clients,
    register_client,
    search_clients,
    set_client_active,
)

settings = get_settings()
router = APIRouter(prefix="/clientes", tags=["Clientes"])


@router.get("")
def list_all_clients(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
    store: Store = Depends(get_store),
):
    """Plain array, or a page envelope when ``page`` or ``limit`` is given."""
    result = list_clients(store, page, limit)
    clientes = [ClientRead.model_validate(c) for c in result["items"]]
    if page is None and limit is None:
        return clientes
    return ClientPage(total=result["total"], page=result["page"], limit=result["limit"], clientes=clientes)


@router.get("/buscar")
def search(
    q: str = "",
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    store: Store = Depends(get_store),
):
    result = search_clients(store, q, page, limit)
    return {
        "success": True,
        "clientes": [ClientRead.model_validate(c) for c in result["items"]],
        "total": result["total"],
        "page": result["page"],
        "limit": result["limit"],
    }


@router.get("/{client_id}", response_model=ClientRead)
def get_one(client_id: int, store: Store = Depends(get_store)):
    return ClientRead.model_validate(get_client(store, client_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create(body: ClientCreate, store: Store = Depends(get_store)):
    client = register_client(store, body)
    return {
        "success": True,
        "message": "Cliente creado correctamente",
        "cliente": ClientRead.model_validate(client),
    }


@router.patch("/{client_id}/activo")
def toggle_active(client_id: int, body: ClientActiveUpdate, store: Store = Depends(get_store)):
    client = set_client_active(store, client_id, body.activo)
    return {
        "success": True,
        "message": "Cliente activado" if client.activo else "Cliente desactivado",
        "cliente": ClientRead.model_validate(client),
    }
