"""Damage category domain service."""

import logging
from decimal import Decimal
from typing import Optional, Union

from ecodamage.database.base import Database
from ecodamage.domain.entities import DamageCategory as DamageCategoryEntity, UnitType
from ecodamage.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    unknown_unit_type,
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for managing damage categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self,
        name: str,
        base_cost_per_unit: Decimal,
        unit_type: Union[UnitType, str],
        severity_multiplier: Decimal = Decimal("1.0"),
        description: Optional[str] = None,
        active: bool = True,
    ) -> int:
        """Create a damage category.

        Args:
            name: Category name (e.g., "Water Pollution")
            base_cost_per_unit: Cost of one unit of damage
            unit_type: Unit the category is priced in; legacy names such as
                "sqm" are accepted
            severity_multiplier: Inherent severity weight of the category
            description: Optional description
            active: Whether the category is offered for selection

        Returns:
            Category ID

        Raises:
            ValidationError: If a field is empty, negative or unknown
        """
        if not name or not name.strip():
            raise ValidationError("Category name is required.", field="name")

        try:
            unit = UnitType(unit_type)
        except ValueError:
            raise ValidationError(unknown_unit_type(str(unit_type)), field="unit_type")

        if base_cost_per_unit < 0:
            raise ValidationError(
                "Base cost per unit must not be negative.", field="base_cost_per_unit"
            )
        if severity_multiplier <= 0:
            raise ValidationError(
                "Severity multiplier must be greater than zero.", field="severity_multiplier"
            )

        category_id = self.db.create_category(
            name=name.strip(),
            base_cost_per_unit=base_cost_per_unit,
            unit_type=unit,
            severity_multiplier=severity_multiplier,
            description=description,
            active=active,
        )
        logger.info("Created damage category %s (%s, %s)", category_id, name, unit.value)
        return category_id

    def get_category(self, category_id: int) -> Optional[DamageCategoryEntity]:
        """Get damage category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> DamageCategoryEntity:
        """Get damage category by ID or raise.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_categories(self, include_inactive: bool = False) -> list[DamageCategoryEntity]:
        """List damage categories ordered by name.

        Args:
            include_inactive: Also list categories hidden from selection

        Returns:
            List of category entities
        """
        return self.db.list_categories(active_only=not include_inactive)

    def activate_category(self, category_id: int) -> None:
        """Make a category available for selection."""
        self.require_category(category_id)
        self.db.set_category_active(category_id, True)

    def deactivate_category(self, category_id: int) -> None:
        """Hide a category from selection lists.

        Existing reports keep pricing against it.
        """
        self.require_category(category_id)
        self.db.set_category_active(category_id, False)
