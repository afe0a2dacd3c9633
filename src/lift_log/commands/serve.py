"""Web server command."""

import os

import click

from ..db.engine import DATA_DIR_ENV
from .base import db_path_for, ensure_initialized, get_data_dir


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the local web server.

    Serves the workout log as a JSON API for a browser front end.

    Examples:

        # Start on default port (8000)
        lift-log serve

        # Development mode with auto-reload
        lift-log serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting lift-log web server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    if reload:
        # The reloader imports the factory itself and only sees the environment
        if get_data_dir(ctx) is not None:
            os.environ[DATA_DIR_ENV] = str(get_data_dir(ctx))
        uvicorn.run(
            "lift_log.web:create_app",
            host=host,
            port=port,
            reload=True,
            factory=True,
        )
        return

    uvicorn.run(create_app(db_path_for(ctx)), host=host, port=port)
