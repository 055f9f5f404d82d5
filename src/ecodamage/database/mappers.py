"""Mapper functions to convert between domain models and SQLAlchemy models.

Enumerated columns are stored as plain strings; this layer turns them back
into domain enums. A severity outside the known levels reads as medium, the
level the calculator prices it at.
"""

from ecodamage.domain import entities as domain
from ecodamage.database.models import (
    DamageCategory as ORMDamageCategory,
    EnvironmentalReport as ORMEnvironmentalReport,
)


def damage_category_to_domain(orm_category: ORMDamageCategory) -> domain.DamageCategory:
    """Convert SQLAlchemy DamageCategory model to domain DamageCategory entity."""
    return domain.DamageCategory(
        id=orm_category.id,
        name=orm_category.name,
        description=orm_category.description,
        base_cost_per_unit=orm_category.base_cost_per_unit,
        unit_type=domain.coerce_unit_type(orm_category.unit_type),
        severity_multiplier=orm_category.severity_multiplier,
        active=orm_category.active,
        created_at=orm_category.created_at,
    )


def report_to_domain(orm_report: ORMEnvironmentalReport) -> domain.EnvironmentalReport:
    """Convert SQLAlchemy EnvironmentalReport model to domain EnvironmentalReport entity."""
    return domain.EnvironmentalReport(
        id=orm_report.id,
        case_number=orm_report.case_number,
        user_id=orm_report.user_id,
        damage_category_id=orm_report.damage_category_id,
        location=orm_report.location,
        latitude=orm_report.latitude,
        longitude=orm_report.longitude,
        affected_area=orm_report.affected_area,
        pollutant_volume=orm_report.pollutant_volume,
        affected_animals=orm_report.affected_animals,
        severity_level=domain.coerce_severity_level(orm_report.severity_level) or domain.SeverityLevel.MEDIUM,
        calculated_damage=orm_report.calculated_damage,
        ecological_data=orm_report.ecological_data,
        notes=orm_report.notes,
        ai_analysis=orm_report.ai_analysis,
        status=domain.ReportStatus(orm_report.status),
        created_at=orm_report.created_at,
        updated_at=orm_report.updated_at,
    )
