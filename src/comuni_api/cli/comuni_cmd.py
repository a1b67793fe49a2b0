"""Comuni dataset CLI commands: JSON import and table truncate."""

import asyncio
import json
from pathlib import Path
from typing import Any

import typer
from loguru import logger

comuni_app = typer.Typer()


def _load_records(file_path: Path, encoding: str) -> list[dict[str, Any]]:
    """Decode a JSON array of comuni objects from a file.

    Exits with code 1 if the file is not valid JSON or not an array.
    """
    try:
        data = json.loads(file_path.read_text(encoding=encoding))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        typer.echo(f"Import failed: {file_path} is not valid JSON: {e}", err=True)
        raise typer.Exit(code=1) from e
    if not isinstance(data, list):
        typer.echo(f"Import failed: {file_path} must contain a JSON array of comuni objects", err=True)
        raise typer.Exit(code=1)
    return data


@comuni_app.command("import")
def import_comuni_cmd(
    file: Path = typer.Argument(..., help="Path to the comuni JSON file", exists=True, dir_okay=False),  # noqa: B008
    truncate: bool = typer.Option(False, "--truncate", help="Replace the current comuni table contents"),
) -> None:
    """Import comuni records from a JSON array."""
    from comuni_api.core.config import get_settings
    from comuni_api.services.comuni_service import ComuneImportError

    settings = get_settings()
    records = _load_records(file, settings.import_file_encoding)
    try:
        count = asyncio.run(_import_comuni(records, truncate))
    except ComuneImportError as e:
        typer.echo(f"Import failed: {e}", err=True)
        raise typer.Exit(code=1) from e
    typer.echo(f"Imported {count} comuni from {file.name}")


async def _import_comuni(records: list[dict[str, Any]], truncate: bool) -> int:
    """Async implementation of comuni import.

    With ``truncate`` the table is cleared in the import's own transaction,
    so a rejected batch leaves the existing rows in place.
    """
    from comuni_api.core.config import get_settings
    from comuni_api.core.database import standalone_session
    from comuni_api.services.comuni_service import ComuniService

    settings = get_settings()
    async with standalone_session(settings.database_url, schema=settings.database_schema) as session:
        return await ComuniService(session).import_comuni(records, replace=truncate)


@comuni_app.command("truncate")
def truncate_cmd(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Delete every comune from the database."""
    if not yes:
        typer.confirm("This removes all comuni records. Continue?", abort=True)
    asyncio.run(_truncate())
    logger.info("Comuni table truncated from CLI")
    typer.echo("Comuni table truncated")


async def _truncate() -> None:
    """Async implementation of comuni truncate."""
    from comuni_api.core.config import get_settings
    from comuni_api.core.database import standalone_session
    from comuni_api.services.comuni_service import ComuniService

    settings = get_settings()
    async with standalone_session(settings.database_url, schema=settings.database_schema) as session:
        await ComuniService(session).truncate()
