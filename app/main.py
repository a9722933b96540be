"""FastAPI application: main entry point."""

import structlog
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.config import get_settings
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import setup_exception_handlers
from app.infrastructure.store import build_store

# Import routers
from app.interfaces.api.system import router as system_router
from app.interfaces.api.clients import router as clients_router
from app.interfaces.api.equipment import router as equipment_router
from app.interfaces.api.users import router as users_router
from app.interfaces.api.assignments import router as assignments_router
from app.interfaces.api.dashboard import router as dashboard_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the in-memory store on startup."""
    logger.info("Starting equipment registry...", env=settings.ENVIRONMENT, version=settings.APP_VERSION)

    if getattr(app.state, "store", None) is None:
        app.state.store = build_store(seed=settings.SEED_DEMO_DATA)

    store = app.state.store
    logger.info(
        "Store ready",
        clientes=store.clients.count(),
        equipos=store.equipment.count(),
    )

    yield

    logger.info("Equipment registry stopped")


app = FastAPI(
    title=settings.APP_NAME,
    description="API Backend: inventario de refrigeradores asignados a clientes",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

setup_middleware(app)
setup_exception_handlers(app)

app.include_router(system_router)
app.include_router(clients_router)
app.include_router(equipment_router)
app.include_router(users_router)
app.include_router(assignments_router)
app.include_router(dashboard_router)


def run() -> None:
    """Serve the API on the configured host and port."""
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
