"""Dashboard summary command."""

import click
from ecodamage.domain.calculator import format_amount
from ecodamage.domain.dashboard import DashboardService


@click.command("summary")
@click.option("--recent", default=5, type=click.IntRange(min=0), show_default=True, help="Recent reports to show")
@click.pass_context
def summary(ctx, recent: int):
    """Show report statistics and the most recent reports."""
    service = DashboardService(ctx.obj["db"])
    stats = service.get_statistics(recent_limit=recent)

    click.echo("\nEnvironmental damage summary")
    click.echo("=" * 50)
    click.echo(f"{'Total reports:':<25} {stats.total_reports:>24}")
    click.echo(f"{'Total damage:':<25} {'$' + format_amount(stats.total_damage):>24}")
    click.echo(f"{'Critical reports:':<25} {stats.critical_reports:>24}")
    click.echo(f"{'Active categories:':<25} {stats.active_categories:>24}")

    if stats.recent_reports:
        click.echo("\nRecent reports:")
        for report in stats.recent_reports:
            damage_str = f"${format_amount(report.calculated_damage)}"
            click.echo(
                f"  {report.case_number:<17} {report.severity_level.value:<9} {damage_str:>16}  {report.location[:30]}"
            )


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
