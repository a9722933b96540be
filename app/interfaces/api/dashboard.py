"""Dashboard API: aggregated counts for the mobile app home screen."""

from fastapi import APIRouter, Depends

from app.infrastructure.store import Store
from app.interfaces.deps import get_store
from app.domain.schemas.dashboard import DashboardSummary
from app.application.services.dashboard_service import dashboard_summary

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
def summary(store: Store = Depends(get_store)):
    return dashboard_summary(store)
