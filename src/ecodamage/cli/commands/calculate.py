"""Ad-hoc damage calculation command."""

import click
from ecodamage.cli.error_handling import handle_domain_error
from ecodamage.domain.calculator import format_amount
from ecodamage.domain.entities import IncidentParameters, SeverityLevel
from ecodamage.domain.report import ReportService
from ecodamage.utils.amount_parser import parse_non_negative_amount


@click.command("calculate")
@click.option("--category", "category_id", required=True, type=int, help="Damage category ID")
@click.option(
    "--severity",
    required=True,
    type=click.Choice([s.value for s in SeverityLevel], case_sensitive=False),
    help="Severity level",
)
@click.option("--area", help="Affected area (area categories)")
@click.option("--volume", help="Pollutant volume (volume categories)")
@click.option("--animals", type=click.IntRange(min=0), help="Affected animals (count categories)")
@click.pass_context
def calculate(
    ctx,
    category_id: int,
    severity: str,
    area: str | None,
    volume: str | None,
    animals: int | None,
):
    """Calculate the damage for an incident without recording a report.

    Examples:
        ecodamage calculate --category 1 --severity critical --volume 100
        ecodamage calculate --category 4 --severity low --animals 10
    """
    service = ReportService(ctx.obj["db"])

    try:
        affected_area = parse_non_negative_amount(area) if area is not None else None
        pollutant_volume = parse_non_negative_amount(volume) if volume is not None else None
    except ValueError as e:
        click.echo(f"Error: Invalid measurement: {e}", err=True)
        ctx.exit(1)

    params = IncidentParameters(
        affected_area=affected_area,
        pollutant_volume=pollutant_volume,
        affected_animals=animals,
        severity_level=SeverityLevel(severity.lower()),
    )
    try:
        result = service.calculate(category_id, params)
    except ValueError as e:
        handle_domain_error(ctx, e)

    breakdown = result.breakdown
    click.echo(f"Calculated damage: ${format_amount(result.amount)}")
    click.echo(f"  Base cost per unit: {breakdown.base_cost}")
    click.echo(f"  Unit value: {breakdown.unit_value} ({breakdown.as_dict()['unit_type']})")
    click.echo(f"  Severity multiplier: {breakdown.severity_multiplier}")
    click.echo(f"  Category multiplier: {breakdown.category_multiplier}")


def register_commands(cli):
    """Register calculate command with main CLI."""
    cli.add_command(calculate)
