"""Environmental damage calculation.

The damage estimate is a unit-price multiplication::

    amount = base_cost_per_unit * unit_value * severity_multiplier * category_multiplier

``unit_value`` is the single incident measurement that matches the category's
unit type. Degenerate inputs never raise here: an unknown severity prices as
medium, an absent measurement counts as zero, an unknown unit type counts as
one unit, and a missing category yields a zero amount with no breakdown.
Request validation happens before this module is reached.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from ecodamage.domain.entities import (
    CalculationBreakdown,
    CalculationResult,
    DamageCategory,
    IncidentParameters,
    SeverityLevel,
    UnitType,
    coerce_severity_level,
    coerce_unit_type,
)

logger = logging.getLogger(__name__)

SEVERITY_MULTIPLIERS: dict[SeverityLevel, Decimal] = {
    SeverityLevel.LOW: Decimal("0.5"),
    SeverityLevel.MEDIUM: Decimal("1.0"),
    SeverityLevel.HIGH: Decimal("2.0"),
    SeverityLevel.CRITICAL: Decimal("5.0"),
}
DEFAULT_SEVERITY_MULTIPLIER = SEVERITY_MULTIPLIERS[SeverityLevel.MEDIUM]

# Incident field read for each unit type
UNIT_VALUE_FIELDS: dict[UnitType, str] = {
    UnitType.AREA: "affected_area",
    UnitType.VOLUME: "pollutant_volume",
    UnitType.COUNT: "affected_animals",
}
UNKNOWN_UNIT_VALUE = Decimal("1")

CENTS = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def severity_multiplier(severity_level: Union[SeverityLevel, str, None]) -> Decimal:
    """Return the multiplier for a severity level, 1.0 if the level is unknown."""
    level = coerce_severity_level(severity_level)
    if level is None:
        return DEFAULT_SEVERITY_MULTIPLIER
    return SEVERITY_MULTIPLIERS[level]


def unit_value(unit_type: Union[UnitType, str], params: IncidentParameters) -> Decimal:
    """Select the incident measurement that matches unit_type.

    Args:
        unit_type: Category unit type
        params: Incident parameters

    Returns:
        The measurement as a Decimal, 0 if it is absent, or 1 if unit_type is
        not a known unit or legacy alias
    """
    unit = coerce_unit_type(unit_type)
    if not isinstance(unit, UnitType):
        logger.warning("Unknown unit type %r, pricing as a single unit", unit_type)
        return UNKNOWN_UNIT_VALUE

    value = getattr(params, UNIT_VALUE_FIELDS[unit])
    if value is None:
        return Decimal("0")
    return _to_decimal(value)


def compute(category: Optional[DamageCategory], params: IncidentParameters) -> CalculationResult:
    """Compute the monetary damage for an incident.

    Args:
        category: Resolved damage category, or None if the report has none
        params: Incident parameters

    Returns:
        CalculationResult with the full-precision amount and its breakdown
    """
    if category is None:
        return CalculationResult(amount=Decimal("0"))

    multiplier = severity_multiplier(params.severity_level)
    value = unit_value(category.unit_type, params)
    amount = (
        _to_decimal(category.base_cost_per_unit)
        * value
        * multiplier
        * _to_decimal(category.severity_multiplier)
    )

    return CalculationResult(
        amount=amount,
        breakdown=CalculationBreakdown(
            base_cost=category.base_cost_per_unit,
            unit_value=value,
            unit_type=coerce_unit_type(category.unit_type),
            severity_multiplier=multiplier,
            category_multiplier=category.severity_multiplier,
            total=amount,
        ),
    )


def round_amount(amount: Decimal) -> Decimal:
    """Round a monetary amount half-up to cents."""
    return _to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    """Format a monetary amount for display, e.g. ``112,500.00``."""
    return f"{round_amount(amount):,.2f}"
