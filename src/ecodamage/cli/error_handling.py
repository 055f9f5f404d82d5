"""CLI error handling helpers."""

import logging

import click

from ecodamage.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

# Option names for the validation fields whose CLI spelling differs
OPTION_NAMES = {
    "damage_category_id": "--category",
    "severity_level": "--severity",
    "affected_area": "--area",
    "pollutant_volume": "--volume",
    "affected_animals": "--animals",
    "base_cost_per_unit": "--cost",
    "severity_multiplier": "--multiplier",
    "unit_type": "--unit",
    "name": "NAME",
}


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error, naming the offending option, and exit with failure."""
    logger.debug("Command %s failed", ctx.command_path, exc_info=error)
    field = error.field if isinstance(error, ValidationError) else None
    if field:
        option = OPTION_NAMES.get(field, "--" + field.replace("_", "-"))
        click.echo(f"Error: {error} ({option})", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
