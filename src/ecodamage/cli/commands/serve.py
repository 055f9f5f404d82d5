"""HTTP server command."""

import click
import uvicorn

from ecodamage.api.app import create_app


@click.command("serve")
@click.option("--host", default="127.0.0.1", envvar="ECODAMAGE_HOST", show_default=True, help="Bind address")
@click.option("--port", default=8000, type=click.IntRange(1, 65535), envvar="ECODAMAGE_PORT", show_default=True)
@click.pass_context
def serve(ctx, host: str, port: int):
    """Serve the damage calculator and report API over HTTP."""
    app = create_app(ctx.obj["db"])
    click.echo(f"Serving on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_config=None)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
