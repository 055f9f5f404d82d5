"""
API routes for environmental reports
"""
from fastapi import APIRouter, Depends, Query, Response, status

from ecodamage.api.dependencies import get_current_user_id, get_report_service
from ecodamage.api.schemas import ReportPageResponse, ReportRequest, ReportResponse
from ecodamage.domain.report import DEFAULT_PER_PAGE, ReportService

router = APIRouter(prefix="/environmental-reports", tags=["reports"])


@router.get("", response_model=ReportPageResponse)
async def list_reports(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=100),
    service: ReportService = Depends(get_report_service),
):
    """List reports, newest first"""
    result = service.list_reports(page=page, per_page=per_page)
    return ReportPageResponse(
        data=[ReportResponse.model_validate(report) for report in result.items],
        current_page=result.page,
        per_page=result.per_page,
        total=result.total,
        last_page=result.last_page,
    )


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    request: ReportRequest,
    user_id: int = Depends(get_current_user_id),
    service: ReportService = Depends(get_report_service),
):
    """Create a report and price its damage"""
    report_id = service.create_report(user_id=user_id, **_report_fields(request))
    return ReportResponse.model_validate(service.require_report(report_id))


@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
):
    """Get report by ID"""
    return ReportResponse.model_validate(service.require_report(report_id))


@router.put("/{report_id}", response_model=ReportResponse)
async def update_report(
    report_id: int,
    request: ReportRequest,
    service: ReportService = Depends(get_report_service),
):
    """Replace a report's details and recompute its damage"""
    report = service.update_report(report_id, **_report_fields(request))
    return ReportResponse.model_validate(report)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    report_id: int,
    service: ReportService = Depends(get_report_service),
):
    """Delete a report"""
    service.delete_report(report_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _report_fields(request: ReportRequest) -> dict:
    fields = request.model_dump()
    if fields["status"] is None:
        fields.pop("status")
    return fields
