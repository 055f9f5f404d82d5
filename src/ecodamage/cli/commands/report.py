"""Environmental report management commands."""

import click
from decimal import Decimal
from ecodamage.cli.error_handling import handle_domain_error
from ecodamage.domain.calculator import format_amount
from ecodamage.domain.category import CategoryService
from ecodamage.domain.entities import ReportStatus, SeverityLevel
from ecodamage.domain.report import DEFAULT_PER_PAGE, ReportService
from ecodamage.utils.amount_parser import parse_amount, parse_non_negative_amount

SEVERITY_CHOICE = click.Choice([s.value for s in SeverityLevel], case_sensitive=False)
STATUS_CHOICE = click.Choice([s.value for s in ReportStatus], case_sensitive=False)


def _parse_decimal(ctx, label: str, value: str | None, non_negative: bool = True) -> Decimal | None:
    """Parse an optional numeric option, exiting with an error if it is malformed."""
    if value is None:
        return None
    try:
        return parse_non_negative_amount(value) if non_negative else parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def report_group():
    """Manage environmental reports."""
    pass


@report_group.command("create")
@click.option("--category", "category_id", required=True, type=int, help="Damage category ID")
@click.option("--location", required=True, help="Incident location")
@click.option("--severity", required=True, type=SEVERITY_CHOICE, help="Severity level")
@click.option("--area", help="Affected area (area categories)")
@click.option("--volume", help="Pollutant volume (volume categories)")
@click.option("--animals", type=click.IntRange(min=0), help="Affected animals (count categories)")
@click.option("--latitude", help="Latitude (-90 to 90)")
@click.option("--longitude", help="Longitude (-180 to 180)")
@click.option("--notes", help="Notes")
@click.option("--status", type=STATUS_CHOICE, default=ReportStatus.DRAFT.value, show_default=True)
@click.option(
    "--user-id",
    required=True,
    type=click.IntRange(min=1),
    envvar="ECODAMAGE_USER_ID",
    help="ID of the reporting user (or ECODAMAGE_USER_ID)",
)
@click.pass_context
def create_report(
    ctx,
    category_id: int,
    location: str,
    severity: str,
    area: str | None,
    volume: str | None,
    animals: int | None,
    latitude: str | None,
    longitude: str | None,
    notes: str | None,
    status: str,
    user_id: int,
):
    """Record a new environmental report and calculate its damage.

    Examples:
        ecodamage report create --user-id 1 --category 1 --location "River Thames" --severity critical --volume 100
    """
    service = ReportService(ctx.obj["db"])

    try:
        report_id = service.create_report(
            user_id=user_id,
            damage_category_id=category_id,
            location=location,
            severity_level=severity.lower(),
            latitude=_parse_decimal(ctx, "latitude", latitude, non_negative=False),
            longitude=_parse_decimal(ctx, "longitude", longitude, non_negative=False),
            affected_area=_parse_decimal(ctx, "area", area),
            pollutant_volume=_parse_decimal(ctx, "volume", volume),
            affected_animals=animals,
            notes=notes,
            status=status.lower(),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    report = service.require_report(report_id)
    click.echo(f"Created report {report.case_number} (ID: {report.id})")
    click.echo(f"  Calculated damage: ${format_amount(report.calculated_damage)}")


@report_group.command("list")
@click.option("--page", default=1, type=click.IntRange(min=1), show_default=True)
@click.option("--per-page", default=DEFAULT_PER_PAGE, type=click.IntRange(min=1), show_default=True)
@click.pass_context
def list_reports(ctx, page: int, per_page: int):
    """List reports, newest first."""
    db = ctx.obj["db"]
    service = ReportService(db)
    category_service = CategoryService(db)

    result = service.list_reports(page=page, per_page=per_page)
    if not result.items:
        click.echo("No reports found.")
        return

    categories = {cat.id: cat.name for cat in category_service.list_categories(include_inactive=True)}

    click.echo(f"\nPage {result.page} of {result.last_page} ({result.total} report(s)):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<6} {'Case number':<17} {'Status':<10} {'Severity':<9} {'Damage':>16}  "
        f"{'Category':<20} {'Location':<25}"
    )
    click.echo("-" * 110)
    for report in result.items:
        damage_str = f"${format_amount(report.calculated_damage)}"
        category_name = categories.get(report.damage_category_id, "Unknown")
        click.echo(
            f"{report.id:<6} {report.case_number:<17} {report.status.value:<10} "
            f"{report.severity_level.value:<9} {damage_str:>16}  {category_name[:20]:<20} "
            f"{report.location[:25]:<25}"
        )


@report_group.command("show")
@click.argument("report_id", type=int)
@click.pass_context
def show_report(ctx, report_id: int):
    """Show a report with its damage breakdown."""
    db = ctx.obj["db"]
    service = ReportService(db)

    try:
        report = service.require_report(report_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    category = CategoryService(db).get_category(report.damage_category_id)
    result = service.calculate_report_damage(report)

    click.echo(f"\nReport {report.case_number} (ID: {report.id})")
    click.echo(f"  Status: {report.status.value}")
    click.echo(f"  Reported by user: {report.user_id}")
    click.echo(f"  Category: {category.name if category else 'Unknown'}")
    click.echo(f"  Location: {report.location}")
    if report.latitude is not None and report.longitude is not None:
        click.echo(f"  Coordinates: {report.latitude}, {report.longitude}")
    click.echo(f"  Severity: {report.severity_level.value}")
    if report.affected_area is not None:
        click.echo(f"  Affected area: {report.affected_area}")
    if report.pollutant_volume is not None:
        click.echo(f"  Pollutant volume: {report.pollutant_volume}")
    if report.affected_animals is not None:
        click.echo(f"  Affected animals: {report.affected_animals}")
    click.echo(f"  Calculated damage: ${format_amount(report.calculated_damage)}")
    if result.breakdown is not None:
        factors = result.breakdown
        click.echo(
            f"    = {factors.base_cost} x {factors.unit_value} x "
            f"{factors.severity_multiplier} x {factors.category_multiplier}"
        )
    if report.notes:
        click.echo(f"  Notes: {report.notes}")
    click.echo(f"  Created: {report.created_at}")
    click.echo(f"  Updated: {report.updated_at}")


@report_group.command("update")
@click.argument("report_id", type=int)
@click.option("--category", "category_id", type=int, help="Damage category ID")
@click.option("--location", help="Incident location")
@click.option("--severity", type=SEVERITY_CHOICE, help="Severity level")
@click.option("--area", help="Affected area, or empty string to clear")
@click.option("--volume", help="Pollutant volume, or empty string to clear")
@click.option("--animals", type=click.IntRange(min=0), help="Affected animals")
@click.option("--latitude", help="Latitude (-90 to 90)")
@click.option("--longitude", help="Longitude (-180 to 180)")
@click.option("--notes", help="Notes")
@click.option("--status", type=STATUS_CHOICE, help="Report status")
@click.pass_context
def update_report(
    ctx,
    report_id: int,
    category_id: int | None,
    location: str | None,
    severity: str | None,
    area: str | None,
    volume: str | None,
    animals: int | None,
    latitude: str | None,
    longitude: str | None,
    notes: str | None,
    status: str | None,
):
    """Update a report and recalculate its damage.

    Updates only the fields that are provided. Use --area "" or --volume "" to clear a measurement.

    Examples:
        ecodamage report update 1 --severity high
        ecodamage report update 1 --status closed
    """
    service = ReportService(ctx.obj["db"])

    try:
        current = service.require_report(report_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    def _measurement(label, value, existing):
        if value is None:
            return existing
        if value == "":
            return None
        return _parse_decimal(ctx, label, value)

    try:
        report = service.update_report(
            report_id,
            damage_category_id=category_id if category_id is not None else current.damage_category_id,
            location=location if location is not None else current.location,
            severity_level=severity.lower() if severity is not None else current.severity_level,
            latitude=(
                _parse_decimal(ctx, "latitude", latitude, non_negative=False)
                if latitude is not None
                else current.latitude
            ),
            longitude=(
                _parse_decimal(ctx, "longitude", longitude, non_negative=False)
                if longitude is not None
                else current.longitude
            ),
            affected_area=_measurement("area", area, current.affected_area),
            pollutant_volume=_measurement("volume", volume, current.pollutant_volume),
            affected_animals=animals if animals is not None else current.affected_animals,
            ecological_data=current.ecological_data,
            notes=notes if notes is not None else current.notes,
            status=status.lower() if status is not None else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated report {report.case_number} (ID: {report.id})")
    click.echo(f"  Calculated damage: ${format_amount(report.calculated_damage)}")


@report_group.command("recalculate")
@click.argument("report_id", type=int)
@click.pass_context
def recalculate_report(ctx, report_id: int):
    """Recalculate a report's damage from its current category prices."""
    service = ReportService(ctx.obj["db"])
    try:
        result = service.recalculate_report(report_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recalculated report {report_id}: ${format_amount(result.amount)}")


@report_group.command("delete")
@click.argument("report_id", type=int)
@click.pass_context
def delete_report(ctx, report_id: int):
    """Delete a report.

    Examples:
        ecodamage report delete 1
    """
    service = ReportService(ctx.obj["db"])

    report = service.get_report(report_id)
    if report is None:
        click.echo(f"Error: Environmental report {report_id} not found", err=True)
        ctx.exit(1)

    # Confirm deletion
    if not click.confirm(f"Are you sure you want to delete report {report.case_number}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_report(report_id)
        click.echo(f"Deleted report {report.case_number}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
