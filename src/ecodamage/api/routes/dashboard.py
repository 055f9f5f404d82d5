"""
API routes for the dashboard and service health
"""
from datetime import datetime, UTC

from fastapi import APIRouter, Depends

from ecodamage.api.dependencies import get_category_service, get_dashboard_service
from ecodamage.api.schemas import (
    CategoryResponse,
    DashboardResponse,
    ReportResponse,
    StatisticsResponse,
)
from ecodamage.domain.category import CategoryService
from ecodamage.domain.dashboard import DashboardService

router = APIRouter(tags=["dashboard"])


@router.get("/health-check")
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    service: DashboardService = Depends(get_dashboard_service),
    category_service: CategoryService = Depends(get_category_service),
):
    """Report statistics, the latest reports and the selectable categories"""
    stats = service.get_statistics()
    return DashboardResponse(
        statistics=StatisticsResponse(
            total_reports=stats.total_reports,
            total_damage=stats.total_damage,
            critical_reports=stats.critical_reports,
            active_categories=stats.active_categories,
        ),
        recent_reports=[ReportResponse.model_validate(r) for r in stats.recent_reports],
        categories=[CategoryResponse.model_validate(c) for c in category_service.list_categories()],
    )
