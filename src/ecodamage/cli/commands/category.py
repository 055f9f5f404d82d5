"""Damage category management commands."""

import click
from ecodamage.cli.error_handling import handle_domain_error
from ecodamage.domain.calculator import format_amount
from ecodamage.domain.category import CategoryService
from ecodamage.domain.entities import UnitType
from ecodamage.utils.amount_parser import parse_non_negative_amount


def _unit_label(unit_type) -> str:
    return unit_type.value if isinstance(unit_type, UnitType) else str(unit_type)


@click.group()
def category_group():
    """Manage damage categories."""
    pass


@category_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive categories")
@click.pass_context
def list_categories(ctx, include_inactive: bool):
    """List damage categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories(include_inactive=include_inactive)
    if not categories:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    click.echo("\nDamage categories:")
    click.echo("-" * 80)
    click.echo(f"{'ID':<6} {'Name':<28} {'Cost/unit':>12} {'Unit':<8} {'Multiplier':>10} {'Active':<6}")
    click.echo("-" * 80)
    for cat in categories:
        click.echo(
            f"{cat.id:<6} {cat.name[:28]:<28} {format_amount(cat.base_cost_per_unit):>12} "
            f"{_unit_label(cat.unit_type):<8} {cat.severity_multiplier:>10} {'yes' if cat.active else 'no':<6}"
        )


@category_group.command("create")
@click.argument("name")
@click.option("--cost", required=True, help="Base cost per unit (e.g., 150.00)")
@click.option(
    "--unit",
    "unit_type",
    required=True,
    type=click.Choice([u.value for u in UnitType], case_sensitive=False),
    help="Unit the category is priced in",
)
@click.option("--multiplier", default="1.0", show_default=True, help="Category severity multiplier")
@click.option("--description", help="Category description")
@click.option("--inactive", is_flag=True, help="Create the category hidden from selection")
@click.pass_context
def create_category(
    ctx,
    name: str,
    cost: str,
    unit_type: str,
    multiplier: str,
    description: str | None,
    inactive: bool,
):
    """Create a new damage category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        base_cost = parse_non_negative_amount(cost)
        severity_multiplier = parse_non_negative_amount(multiplier)
    except ValueError as e:
        click.echo(f"Error: Invalid number: {e}", err=True)
        ctx.exit(1)

    try:
        category_id = service.create_category(
            name=name,
            base_cost_per_unit=base_cost,
            unit_type=unit_type.lower(),
            severity_multiplier=severity_multiplier,
            description=description,
            active=not inactive,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name}' (ID: {category_id})")


@category_group.command("activate")
@click.argument("category_id", type=int)
@click.pass_context
def activate_category(ctx, category_id: int):
    """Make a category available for selection."""
    service = CategoryService(ctx.obj["db"])
    try:
        service.activate_category(category_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Activated category {category_id}")


@category_group.command("deactivate")
@click.argument("category_id", type=int)
@click.pass_context
def deactivate_category(ctx, category_id: int):
    """Hide a category from selection lists."""
    service = CategoryService(ctx.obj["db"])
    try:
        service.deactivate_category(category_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deactivated category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
