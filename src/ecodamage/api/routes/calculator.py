"""
API route for ad-hoc damage calculation
"""
from fastapi import APIRouter, Depends

from ecodamage.api.dependencies import get_report_service
from ecodamage.api.schemas import CalculateDamageRequest, CalculateDamageResponse
from ecodamage.domain.entities import IncidentParameters
from ecodamage.domain.report import ReportService

router = APIRouter(tags=["calculator"])


@router.post("/calculate-damage", response_model=CalculateDamageResponse)
async def calculate_damage(
    request: CalculateDamageRequest,
    service: ReportService = Depends(get_report_service),
):
    """Price an incident against a damage category without saving it"""
    params = IncidentParameters(
        affected_area=request.affected_area,
        pollutant_volume=request.pollutant_volume,
        affected_animals=request.affected_animals,
        severity_level=request.severity_level,
    )
    result = service.calculate(request.damage_category_id, params)
    return CalculateDamageResponse.from_result(result)
