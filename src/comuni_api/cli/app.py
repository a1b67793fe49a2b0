"""Typer CLI root application with serve command."""

import typer

from comuni_api.core.config import get_settings
from comuni_api.core.logging import setup_logging

app = typer.Typer(name="comuni-api", help="Italian comuni reference data CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "comuni_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from comuni_api.cli.comuni_cmd import comuni_app
    from comuni_api.cli.db_cmd import db_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(comuni_app, name="comuni", help="Comuni dataset import and maintenance")


_register_subcommands()
