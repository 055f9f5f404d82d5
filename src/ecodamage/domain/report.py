"""Environmental report domain service."""

import logging
from datetime import datetime, UTC
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from ecodamage.database.base import Database
from ecodamage.domain.calculator import compute, round_amount
from ecodamage.domain.case_number import month_bounds, next_case_number
from ecodamage.domain.entities import (
    CalculationResult,
    DamageCategory,
    EnvironmentalReport as ReportEntity,
    IncidentParameters,
    ReportPage,
    ReportStatus,
    SeverityLevel,
)
from ecodamage.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    case_number_exhausted,
    category_invalid,
    negative_value,
    report_closed,
    report_not_found,
)

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 15
MAX_CASE_NUMBER_ATTEMPTS = 5


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReportService:
    """Service for recording environmental reports and pricing their damage."""

    def __init__(self, db: Database, clock: Optional[Callable[[], datetime]] = None):
        """Initialize report service.

        Args:
            db: Database instance
            clock: Callable returning the current time, used for creation
                timestamps and case numbers (defaults to UTC now)
        """
        self.db = db
        self.clock = clock or _utcnow

    def calculate(self, damage_category_id: int, params: IncidentParameters) -> CalculationResult:
        """Price an incident against a stored category without saving anything.

        Raises:
            ValidationError: If the category does not exist
        """
        category = self._resolve_category(damage_category_id)
        return compute(category, params)

    def calculate_report_damage(self, report: ReportEntity) -> CalculationResult:
        """Price a stored report from its category and incident snapshot.

        A report whose category has disappeared prices at zero.
        """
        category = self.db.get_category(report.damage_category_id)
        return compute(category, IncidentParameters.from_report(report))

    def create_report(
        self,
        user_id: int,
        damage_category_id: int,
        location: str,
        severity_level: Union[SeverityLevel, str],
        latitude: Optional[Decimal] = None,
        longitude: Optional[Decimal] = None,
        affected_area: Optional[Decimal] = None,
        pollutant_volume: Optional[Decimal] = None,
        affected_animals: Optional[int] = None,
        ecological_data: Optional[dict[str, Any]] = None,
        notes: Optional[str] = None,
        status: Union[ReportStatus, str] = ReportStatus.DRAFT,
    ) -> int:
        """Create a report, price it and assign a case number.

        Args:
            user_id: ID of the user filing the report
            damage_category_id: Damage category ID
            location: Free-text incident location
            severity_level: Severity assessment
            latitude: Optional latitude in [-90, 90]
            longitude: Optional longitude in [-180, 180]
            affected_area: Affected area, used by area categories
            pollutant_volume: Pollutant volume, used by volume categories
            affected_animals: Affected animal count, used by count categories
            ecological_data: Optional opaque ecological information
            notes: Optional notes
            status: Initial status (default draft)

        Returns:
            Report ID

        Raises:
            ValidationError: If a field is invalid or the category does not exist
            ConflictError: If no free case number could be allocated
        """
        severity, report_status = self._validate_fields(
            location, severity_level, status, latitude, longitude,
            affected_area, pollutant_volume, affected_animals,
        )
        category = self._resolve_category(damage_category_id)
        params = IncidentParameters(
            affected_area=affected_area,
            pollutant_volume=pollutant_volume,
            affected_animals=affected_animals,
            severity_level=severity,
        )
        damage = round_amount(compute(category, params).amount)

        now = self.clock()
        month_start, next_month_start = month_bounds(now)
        existing = self.db.count_reports(created_from=month_start, created_before=next_month_start)

        for attempt in range(MAX_CASE_NUMBER_ATTEMPTS):
            case_number = next_case_number(now.year, now.month, existing + attempt)
            try:
                report_id = self.db.create_report(
                    case_number=case_number,
                    user_id=user_id,
                    damage_category_id=damage_category_id,
                    location=location.strip(),
                    severity_level=severity,
                    calculated_damage=damage,
                    latitude=latitude,
                    longitude=longitude,
                    affected_area=affected_area,
                    pollutant_volume=pollutant_volume,
                    affected_animals=affected_animals,
                    ecological_data=ecological_data,
                    notes=notes,
                    status=report_status or ReportStatus.DRAFT,
                    created_at=now,
                )
            except ConflictError:
                logger.warning("Case number %s already taken, trying the next one", case_number)
                continue
            logger.info("Created report %s (%s) with damage %s", report_id, case_number, damage)
            return report_id

        raise ConflictError(case_number_exhausted(MAX_CASE_NUMBER_ATTEMPTS))

    def get_report(self, report_id: int) -> Optional[ReportEntity]:
        """Get report by ID.

        Args:
            report_id: Report ID

        Returns:
            Report entity or None if not found
        """
        return self.db.get_report(report_id)

    def require_report(self, report_id: int) -> ReportEntity:
        """Get report by ID or raise NotFoundError."""
        report = self.db.get_report(report_id)
        if report is None:
            raise NotFoundError(report_not_found(report_id))
        return report

    def update_report(
        self,
        report_id: int,
        damage_category_id: int,
        location: str,
        severity_level: Union[SeverityLevel, str],
        latitude: Optional[Decimal] = None,
        longitude: Optional[Decimal] = None,
        affected_area: Optional[Decimal] = None,
        pollutant_volume: Optional[Decimal] = None,
        affected_animals: Optional[int] = None,
        ecological_data: Optional[dict[str, Any]] = None,
        notes: Optional[str] = None,
        status: Union[ReportStatus, str, None] = None,
    ) -> ReportEntity:
        """Replace the editable fields of a report and recompute its damage.

        The creator and case number never change. ``status`` is kept when None.

        Returns:
            The updated report entity

        Raises:
            NotFoundError: If the report does not exist
            ConflictError: If the report is closed
            ValidationError: If a field is invalid or the category does not exist
        """
        report = self.require_report(report_id)
        if report.is_closed:
            raise ConflictError(report_closed(report_id))

        severity, report_status = self._validate_fields(
            location, severity_level, status, latitude, longitude,
            affected_area, pollutant_volume, affected_animals,
        )
        category = self._resolve_category(damage_category_id)
        params = IncidentParameters(
            affected_area=affected_area,
            pollutant_volume=pollutant_volume,
            affected_animals=affected_animals,
            severity_level=severity,
        )
        damage = round_amount(compute(category, params).amount)

        self.db.update_report(
            report_id=report_id,
            damage_category_id=damage_category_id,
            location=location.strip(),
            severity_level=severity,
            calculated_damage=damage,
            latitude=latitude,
            longitude=longitude,
            affected_area=affected_area,
            pollutant_volume=pollutant_volume,
            affected_animals=affected_animals,
            ecological_data=ecological_data,
            notes=notes,
            status=report_status,
        )
        logger.info("Updated report %s (%s) with damage %s", report_id, report.case_number, damage)
        return self.require_report(report_id)

    def recalculate_report(self, report_id: int) -> CalculationResult:
        """Recompute and store the damage of a report, e.g. after a price change.

        Raises:
            NotFoundError: If the report does not exist
            ConflictError: If the report is closed
        """
        report = self.require_report(report_id)
        if report.is_closed:
            raise ConflictError(report_closed(report_id))

        result = self.calculate_report_damage(report)
        self.db.update_report(
            report_id=report.id,
            damage_category_id=report.damage_category_id,
            location=report.location,
            severity_level=report.severity_level,
            calculated_damage=round_amount(result.amount),
            latitude=report.latitude,
            longitude=report.longitude,
            affected_area=report.affected_area,
            pollutant_volume=report.pollutant_volume,
            affected_animals=report.affected_animals,
            ecological_data=report.ecological_data,
            notes=report.notes,
        )
        return result

    def delete_report(self, report_id: int) -> None:
        """Delete a report.

        Raises:
            NotFoundError: If the report does not exist
        """
        report = self.require_report(report_id)
        self.db.delete_report(report_id)
        logger.info("Deleted report %s (%s)", report_id, report.case_number)

    def list_reports(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> ReportPage:
        """List reports newest first, one page at a time.

        Raises:
            ValidationError: If page or per_page is below 1
        """
        if page < 1:
            raise ValidationError("Page must be at least 1.", field="page")
        if per_page < 1:
            raise ValidationError("Page size must be at least 1.", field="per_page")

        items = self.db.list_reports(offset=(page - 1) * per_page, limit=per_page)
        return ReportPage(items=items, total=self.db.count_reports(), page=page, per_page=per_page)

    def list_recent_reports(self, limit: int = 5) -> list[ReportEntity]:
        return self.db.list_reports(limit=limit)

    def _resolve_category(self, damage_category_id: int) -> DamageCategory:
        category = self.db.get_category(damage_category_id)
        if category is None:
            raise ValidationError(category_invalid(), field="damage_category_id")
        return category

    def _validate_fields(
        self,
        location: str,
        severity_level: Union[SeverityLevel, str],
        status: Union[ReportStatus, str, None],
        latitude: Optional[Decimal],
        longitude: Optional[Decimal],
        affected_area: Optional[Decimal],
        pollutant_volume: Optional[Decimal],
        affected_animals: Optional[int],
    ) -> tuple[SeverityLevel, Optional[ReportStatus]]:
        """Check report fields, returning the parsed severity and status."""
        if not location or not location.strip():
            raise ValidationError("Location is required.", field="location")
        if len(location.strip()) > 255:
            raise ValidationError("Location may not be longer than 255 characters.", field="location")

        try:
            severity = SeverityLevel(severity_level)
        except ValueError:
            raise ValidationError("Invalid severity level selected.", field="severity_level")

        report_status = None
        if status is not None:
            try:
                report_status = ReportStatus(status)
            except ValueError:
                raise ValidationError("Invalid report status selected.", field="status")

        if latitude is not None and not -90 <= latitude <= 90:
            raise ValidationError("Latitude must be between -90 and 90.", field="latitude")
        if longitude is not None and not -180 <= longitude <= 180:
            raise ValidationError("Longitude must be between -180 and 180.", field="longitude")

        for field_name, value in (
            ("affected_area", affected_area),
            ("pollutant_volume", pollutant_volume),
            ("affected_animals", affected_animals),
        ):
            if value is not None and value < 0:
                raise ValidationError(negative_value(field_name), field=field_name)

        return severity, report_status
