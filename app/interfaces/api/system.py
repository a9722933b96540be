"""System routes: liveness probes."""

from fastapi import APIRouter, Depends

from app.config import get_settings
from app.infrastructure.store import Store
from app.interfaces.deps import get_store

router = APIRouter(tags=["System"])


@router.get("/ping")
def ping(store: Store = Depends(get_store)):
    return {
        "success": True,
        "message": "Servidor funcionando correctamente",
        "timestamp": store.now(),
        "version": get_settings().APP_VERSION,
    }


@router.get("/health")
def health():
    return {"status": "healthy"}
