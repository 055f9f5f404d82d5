"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Args:
        message: Human readable message
        field: Optional name of the offending input field
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations or edits to closed reports."""


def category_not_found(category_id: int) -> str:
    """Return message for missing damage category by ID."""
    return f"Damage category {category_id} not found"


def category_invalid() -> str:
    """Return message for a report or calculation referencing an unknown category."""
    return "Selected damage category is invalid."


def report_not_found(report_id: int) -> str:
    """Return message for missing report by ID."""
    return f"Environmental report {report_id} not found"


def report_closed(report_id: int) -> str:
    """Return message when trying to edit a closed report."""
    return f"Environmental report {report_id} is closed and cannot be modified"


def duplicate_case_number(case_number: str) -> str:
    """Return message for duplicate case number."""
    return f"Case number '{case_number}' already exists"


def case_number_exhausted(attempts: int) -> str:
    """Return message when no free case number was found."""
    return f"Could not allocate a unique case number after {attempts} attempts"


def unknown_unit_type(value: str) -> str:
    """Return message for a unit type outside the known set."""
    return f"Unknown unit type '{value}'. Expected one of: area, volume, count"


def negative_value(field: str) -> str:
    """Return message for a negative measurement."""
    return f"{field.replace('_', ' ').capitalize()} must be a positive number."
