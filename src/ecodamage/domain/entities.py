"""Domain model entities for ecodamage.

These are pure data classes representing business concepts, independent of
database schema. The persistence layer maps its rows onto them, so pricing
logic never touches ORM objects.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


class UnitType(str, Enum):
    """Measurable unit a damage category is priced in."""

    AREA = "area"
    VOLUME = "volume"
    COUNT = "count"

    @classmethod
    def _missing_(cls, value):
        # Accept the legacy unit names still found in older databases
        alias = _UNIT_TYPE_ALIASES.get(value) if isinstance(value, str) else None
        if alias is not None:
            return cls(alias)
        return None


_UNIT_TYPE_ALIASES = {
    "sqm": "area",
    "cubic_meter": "volume",
    "animal": "count",
}


class SeverityLevel(str, Enum):
    """Per-incident severity assessment."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ReportStatus(str, Enum):
    """Lifecycle status of an environmental report."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    REVIEWED = "reviewed"
    CLOSED = "closed"


def coerce_unit_type(value: Union[UnitType, str]) -> Union[UnitType, str]:
    """Return the UnitType for value, or the raw string if it is not a known unit."""
    try:
        return UnitType(value)
    except ValueError:
        return value


def coerce_severity_level(value: Union[SeverityLevel, str, None]) -> Optional[SeverityLevel]:
    """Return the SeverityLevel for value, or None if it is absent or unknown."""
    if value is None:
        return None
    try:
        return SeverityLevel(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class DamageCategory:
    """Damage category domain entity (pricing reference data)."""

    id: int
    name: str
    description: Optional[str]
    base_cost_per_unit: Decimal
    unit_type: Union[UnitType, str]
    severity_multiplier: Decimal
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class EnvironmentalReport:
    """Environmental report domain entity."""

    id: int
    case_number: str
    user_id: int
    damage_category_id: int
    location: str
    latitude: Optional[Decimal]
    longitude: Optional[Decimal]
    affected_area: Optional[Decimal]
    pollutant_volume: Optional[Decimal]
    affected_animals: Optional[int]
    severity_level: SeverityLevel
    calculated_damage: Decimal
    ecological_data: Optional[dict[str, Any]]
    notes: Optional[str]
    ai_analysis: Optional[dict[str, Any]]
    status: ReportStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_closed(self) -> bool:
        return self.status == ReportStatus.CLOSED


@dataclass(frozen=True)
class IncidentParameters:
    """Incident measurements a damage calculation is based on."""

    affected_area: Optional[Decimal] = None
    pollutant_volume: Optional[Decimal] = None
    affected_animals: Optional[int] = None
    severity_level: Union[SeverityLevel, str, None] = None

    @classmethod
    def from_report(cls, report: EnvironmentalReport) -> "IncidentParameters":
        """Snapshot the incident parameters stored on a report."""
        return cls(
            affected_area=report.affected_area,
            pollutant_volume=report.pollutant_volume,
            affected_animals=report.affected_animals,
            severity_level=report.severity_level,
        )


@dataclass(frozen=True)
class CalculationBreakdown:
    """Factors whose product is the calculated damage amount."""

    base_cost: Decimal
    unit_value: Decimal
    unit_type: Union[UnitType, str]
    severity_multiplier: Decimal
    category_multiplier: Decimal
    total: Decimal

    def as_dict(self) -> dict[str, Any]:
        unit_type = self.unit_type.value if isinstance(self.unit_type, UnitType) else self.unit_type
        return {
            "base_cost": self.base_cost,
            "unit_value": self.unit_value,
            "unit_type": unit_type,
            "severity_multiplier": self.severity_multiplier,
            "category_multiplier": self.category_multiplier,
            "total": self.total,
        }


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a damage calculation.

    ``breakdown`` is None when no category was available to price against.
    """

    amount: Decimal
    breakdown: Optional[CalculationBreakdown] = None


@dataclass(frozen=True)
class ReportPage:
    """One page of environmental reports."""

    items: list[EnvironmentalReport]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        if self.total == 0:
            return 1
        return (self.total + self.per_page - 1) // self.per_page


@dataclass(frozen=True)
class DashboardStatistics:
    """Headline figures shown on the dashboard."""

    total_reports: int
    total_damage: Decimal
    critical_reports: int
    active_categories: int
    recent_reports: list[EnvironmentalReport] = field(default_factory=list)
