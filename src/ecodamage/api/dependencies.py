"""FastAPI dependencies shared by the route modules."""

from typing import AsyncIterator

from fastapi import Depends, Header, Request

from ecodamage.database.base import Database
from ecodamage.domain.category import CategoryService
from ecodamage.domain.dashboard import DashboardService
from ecodamage.domain.report import ReportService


async def get_db(request: Request) -> AsyncIterator[Database]:
    """Serve one request from the application database.

    The session is closed once the request is done, so the next request starts
    from a fresh session even if this one failed half-way.
    """
    db = request.app.state.db
    try:
        yield db
    finally:
        db.disconnect()


def get_category_service(db: Database = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_report_service(db: Database = Depends(get_db)) -> ReportService:
    return ReportService(db)


def get_dashboard_service(db: Database = Depends(get_db)) -> DashboardService:
    return DashboardService(db)


def get_current_user_id(x_user_id: int = Header(..., ge=1, description="ID of the acting user")) -> int:
    """Identify the acting user.

    Authentication happens in front of this service; it forwards the user ID.
    """
    return x_user_id
