"""Equipment API routes: the equipment/status view, search and registration."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.infrastructure.store import Store
from app.interfaces.deps import get_store
from app.domain.schemas.equipment import (
    BrandRead,
    EquipmentCreate,
    EquipmentModelRead,
    EquipmentRead,
    EquipmentWithStatus,
    LogoRead,
)
from app.application.services.equipment_service import (
    get_equipment_with_status,
    list_brands,
    list_equipment_with_status,
    list_logos,
    list_models,
    register_equipment,
    search_equipment,
)

router = APIRouter(tags=["Equipos"])


@router.get("/equipos", response_model=list[EquipmentWithStatus])
def list_equipment(store: Store = Depends(get_store)):
    return list_equipment_with_status(store)


@router.get("/equipos/buscar")
def search(q: str = "", store: Store = Depends(get_store)):
    found = search_equipment(store, q)
    return {
        "success": True,
        "equipos": [EquipmentRead.model_validate(e) for e in found],
        "total": len(found),
    }


@router.get("/equipos/{equipment_id}", response_model=EquipmentWithStatus)
def get_one(equipment_id: int, store: Store = Depends(get_store)):
    return get_equipment_with_status(store, equipment_id)


@router.post("/equipos", status_code=status.HTTP_201_CREATED)
def create(body: EquipmentCreate, store: Store = Depends(get_store)):
    equipment = register_equipment(store, body)
    return {
        "success": True,
        "message": "Equipo creado correctamente",
        "equipo": EquipmentRead.model_validate(equipment),
    }


@router.get("/marcas", response_model=list[BrandRead])
def brands(store: Store = Depends(get_store)):
    return [BrandRead.model_validate(b) for b in list_brands(store)]


@router.get("/modelos", response_model=list[EquipmentModelRead])
def models(marca_id: Optional[int] = None, store: Store = Depends(get_store)):
    return [EquipmentModelRead.model_validate(m) for m in list_models(store, marca_id)]


@router.get("/logos", response_model=list[LogoRead])
def logos(store: Store = Depends(get_store)):
    return [LogoRead.model_validate(l) for l in list_logos(store)]
