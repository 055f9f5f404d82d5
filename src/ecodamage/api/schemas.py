"""Request and response models for the HTTP API.

Request models are the validation layer in front of the calculator: a request
that does not satisfy them never reaches the domain services.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecodamage.domain.calculator import format_amount
from ecodamage.domain.entities import (
    CalculationResult,
    ReportStatus,
    SeverityLevel,
    UnitType,
)


class IncidentRequest(BaseModel):
    """Incident measurements shared by calculation and report requests"""
    damage_category_id: int = Field(..., description="ID of an existing damage category")
    affected_area: Optional[Decimal] = Field(default=None, ge=0, description="Affected area")
    pollutant_volume: Optional[Decimal] = Field(default=None, ge=0, description="Pollutant volume")
    affected_animals: Optional[int] = Field(default=None, ge=0, description="Affected animal count")
    severity_level: SeverityLevel = Field(..., description="low, medium, high or critical")


class CalculateDamageRequest(IncidentRequest):
    """Request model for an ad-hoc damage calculation"""


class ReportRequest(IncidentRequest):
    """Request model for creating or updating a report"""
    location: str = Field(..., min_length=1, max_length=255)
    latitude: Optional[Decimal] = Field(default=None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(default=None, ge=-180, le=180)
    notes: Optional[str] = None
    ecological_data: Optional[dict[str, Any]] = None
    status: Optional[ReportStatus] = None

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Location is required.")
        return v


class BreakdownResponse(BaseModel):
    """Factors behind a calculated damage amount"""
    base_cost: Decimal
    unit_value: Decimal
    unit_type: str
    severity_multiplier: Decimal
    category_multiplier: Decimal
    total: Decimal


class CalculateDamageResponse(BaseModel):
    """Calculation response model"""
    success: bool = True
    calculated_damage: str
    breakdown: Optional[BreakdownResponse] = None

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculateDamageResponse":
        breakdown = None
        if result.breakdown is not None:
            breakdown = BreakdownResponse(**result.breakdown.as_dict())
        return cls(calculated_damage=format_amount(result.amount), breakdown=breakdown)


class CategoryResponse(BaseModel):
    """Damage category response model"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    base_cost_per_unit: Decimal
    unit_type: str
    severity_multiplier: Decimal
    active: bool

    @field_validator("unit_type", mode="before")
    @classmethod
    def unit_type_value(cls, v):
        if isinstance(v, UnitType):
            return v.value
        return v


class ReportResponse(BaseModel):
    """Environmental report response model"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    case_number: str
    user_id: int
    damage_category_id: int
    location: str
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    affected_area: Optional[Decimal] = None
    pollutant_volume: Optional[Decimal] = None
    affected_animals: Optional[int] = None
    severity_level: SeverityLevel
    calculated_damage: Decimal
    ecological_data: Optional[dict[str, Any]] = None
    notes: Optional[str] = None
    ai_analysis: Optional[dict[str, Any]] = None
    status: ReportStatus
    created_at: datetime
    updated_at: datetime


class ReportPageResponse(BaseModel):
    """Paginated report listing"""
    data: list[ReportResponse]
    current_page: int
    per_page: int
    total: int
    last_page: int


class StatisticsResponse(BaseModel):
    total_reports: int
    total_damage: Decimal
    critical_reports: int
    active_categories: int


class DashboardResponse(BaseModel):
    """Dashboard response model"""
    statistics: StatisticsResponse
    recent_reports: list[ReportResponse]
    categories: list[CategoryResponse]
