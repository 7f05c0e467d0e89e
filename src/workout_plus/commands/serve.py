"""Web server command."""

import click

from ..config import get_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: from settings)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool):
    """Start the API server.

    The database schema is created and the exercise catalog seeded on
    startup, so no separate init step is required.

    Examples:

        # Start on the configured port
        workout-plus serve

        # Expose to network (all interfaces)
        workout-plus serve --host 0.0.0.0 --port 3000

        # Development mode with auto-reload
        workout-plus serve --reload
    """
    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting workout-plus API...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "workout_plus.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
