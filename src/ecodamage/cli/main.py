"""Main CLI entry point."""

import click
from ecodamage.database.factories import create_database
from ecodamage.logging_config import DEFAULT_LOG_LEVEL, configure_logging

# Import and register all commands at module level
from ecodamage.cli.commands import (
    init_categories,
    category,
    calculate,
    report,
    summary,
    serve,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ECODAMAGE_DB_PATH environment variable)",
    envvar="ECODAMAGE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="ECODAMAGE_LOG_LEVEL",
    show_default=True,
    help="Logging level",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ecodamage - Environmental damage reporting.

    Record environmental-damage incidents, categorize them and compute
    monetary damage estimates.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_categories.register_commands(cli)
category.register_commands(cli)
calculate.register_commands(cli)
report.register_commands(cli)
summary.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
