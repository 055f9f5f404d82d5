"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ecodamage.domain.entities import (
    DamageCategory,
    EnvironmentalReport,
    ReportStatus,
    SeverityLevel,
    UnitType,
)


class Database(ABC):
    """Abstract database interface for ecodamage."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Damage category operations
    @abstractmethod
    def create_category(
        self,
        name: str,
        base_cost_per_unit: Decimal,
        unit_type: UnitType,
        severity_multiplier: Decimal = Decimal("1.00"),
        description: Optional[str] = None,
        active: bool = True,
    ) -> int:
        """Create a damage category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[DamageCategory]:
        """Get damage category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[DamageCategory]:
        """Get damage category by name."""
        pass

    @abstractmethod
    def list_categories(self, active_only: bool = False) -> list[DamageCategory]:
        """List damage categories ordered by name."""
        pass

    @abstractmethod
    def count_categories(self, active_only: bool = False) -> int:
        """Count damage categories."""
        pass

    @abstractmethod
    def set_category_active(self, category_id: int, active: bool) -> None:
        """Activate or deactivate a damage category."""
        pass

    # Report operations
    @abstractmethod
    def create_report(
        self,
        case_number: str,
        user_id: int,
        damage_category_id: int,
        location: str,
        severity_level: SeverityLevel,
        calculated_damage: Decimal,
        latitude: Optional[Decimal] = None,
        longitude: Optional[Decimal] = None,
        affected_area: Optional[Decimal] = None,
        pollutant_volume: Optional[Decimal] = None,
        affected_animals: Optional[int] = None,
        ecological_data: Optional[dict[str, Any]] = None,
        notes: Optional[str] = None,
        status: ReportStatus = ReportStatus.DRAFT,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Create a report. Returns report ID.

        Raises:
            ConflictError: If the case number is already taken
        """
        pass

    @abstractmethod
    def get_report(self, report_id: int) -> Optional[EnvironmentalReport]:
        """Get report by ID."""
        pass

    @abstractmethod
    def update_report(
        self,
        report_id: int,
        damage_category_id: int,
        location: str,
        severity_level: SeverityLevel,
        calculated_damage: Decimal,
        latitude: Optional[Decimal] = None,
        longitude: Optional[Decimal] = None,
        affected_area: Optional[Decimal] = None,
        pollutant_volume: Optional[Decimal] = None,
        affected_animals: Optional[int] = None,
        ecological_data: Optional[dict[str, Any]] = None,
        notes: Optional[str] = None,
        status: Optional[ReportStatus] = None,
    ) -> None:
        """Replace the editable fields of a report.

        ``status`` is left unchanged when None. Case number, creator and
        creation time are never touched.
        """
        pass

    @abstractmethod
    def delete_report(self, report_id: int) -> None:
        """Delete a report."""
        pass

    @abstractmethod
    def list_reports(self, offset: int = 0, limit: Optional[int] = None) -> list[EnvironmentalReport]:
        """List reports, newest first."""
        pass

    @abstractmethod
    def count_reports(
        self,
        severity_level: Optional[SeverityLevel] = None,
        created_from: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
    ) -> int:
        """Count reports, optionally by severity and creation window [from, before)."""
        pass

    @abstractmethod
    def get_total_damage(self) -> Decimal:
        """Sum of calculated damage over all reports."""
        pass
