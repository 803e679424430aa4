# app/routers/dashboard.py

from fastapi import APIRouter, Depends

from app.core.deps import get_repository
from app.repositories.base import CrmRepository
from app.schemas.dashboard import DashboardOverviewResponse
from app.services.dashboard import get_dashboard_overview

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/overview", response_model=DashboardOverviewResponse)
def dashboard_overview(repo: CrmRepository = Depends(get_repository)):
    return get_dashboard_overview(repo)
