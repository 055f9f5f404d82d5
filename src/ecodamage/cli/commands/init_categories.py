"""Initialize default damage categories."""

import click
from decimal import Decimal
from ecodamage.domain.category import CategoryService
from ecodamage.domain.entities import UnitType


# Default categories: (name, description, base cost per unit, unit type, severity multiplier)
DEFAULT_CATEGORIES = [
    (
        "Water Pollution",
        "Contamination of water bodies including rivers, lakes, groundwater, and marine environments",
        Decimal("150.00"),
        UnitType.VOLUME,
        Decimal("1.5"),
    ),
    (
        "Soil Contamination",
        "Chemical contamination of soil affecting agricultural land, residential areas, and natural habitats",
        Decimal("200.00"),
        UnitType.AREA,
        Decimal("2.0"),
    ),
    (
        "Air Pollution",
        "Release of harmful substances into the atmosphere affecting air quality and public health",
        Decimal("100.00"),
        UnitType.VOLUME,
        Decimal("1.2"),
    ),
    (
        "Wildlife Impact",
        "Direct harm to wildlife including injury, death, or habitat destruction affecting animal populations",
        Decimal("500.00"),
        UnitType.COUNT,
        Decimal("3.0"),
    ),
    (
        "Vegetation Damage",
        "Destruction or contamination of plant life including forests, crops, and natural vegetation",
        Decimal("75.00"),
        UnitType.AREA,
        Decimal("1.3"),
    ),
    (
        "Noise Pollution",
        "Excessive noise affecting wildlife behavior, human health, and ecosystem balance",
        Decimal("25.00"),
        UnitType.AREA,
        Decimal("0.8"),
    ),
    (
        "Waste Dumping",
        "Illegal disposal of hazardous or non-hazardous waste in unauthorized locations",
        Decimal("300.00"),
        UnitType.VOLUME,
        Decimal("2.5"),
    ),
    (
        "Chemical Spill",
        "Accidental or intentional release of toxic chemicals into the environment",
        Decimal("800.00"),
        UnitType.VOLUME,
        Decimal("4.0"),
    ),
]


@click.command("init-categories")
@click.option("--force", is_flag=True, help="Add the default categories even if categories exist")
@click.pass_context
def init_categories(ctx, force: bool):
    """Initialize database with the default damage categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    # Check if categories already exist
    existing = service.list_categories(include_inactive=True)
    if existing and not force:
        click.echo("Categories already exist. Use --force to add missing defaults.")
        return

    existing_names = {cat.name for cat in existing}
    click.echo("Creating default damage categories...")

    created = 0
    errors = 0

    for name, description, cost, unit_type, multiplier in DEFAULT_CATEGORIES:
        # --force fills in missing defaults without duplicating the others
        if name in existing_names:
            continue
        try:
            service.create_category(
                name=name,
                base_cost_per_unit=cost,
                unit_type=unit_type,
                severity_multiplier=multiplier,
                description=description,
            )
            created += 1
        except ValueError as e:
            click.echo(f"Warning: Could not create category '{name}': {e}", err=True)
            errors += 1

    if errors == 0:
        click.echo(f"Successfully created {created} categories.")
    else:
        click.echo(f"Created {created} categories with {errors} errors.")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
