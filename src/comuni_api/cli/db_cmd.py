"""Schema migration CLI commands driving Alembic programmatically."""

from pathlib import Path

import typer
from loguru import logger

db_app = typer.Typer()

_CONFIG_OPTION = typer.Option(Path("alembic.ini"), "--config", "-c", help="Path to alembic.ini")  # noqa: B008


def _alembic_config(config_path: Path):  # type: ignore[no-untyped-def]
    """Load the Alembic configuration, failing fast when the file is missing."""
    from alembic.config import Config

    if not config_path.is_file():
        typer.echo(f"Alembic config not found: {config_path}", err=True)
        raise typer.Exit(code=1)
    return Config(str(config_path))


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    config_path: Path = _CONFIG_OPTION,
) -> None:
    """Apply migrations up to the target revision (creates the comuni table)."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Upgrading comuni schema to {revision}")
    command.upgrade(config, revision)
    logger.info("Schema upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: Path = _CONFIG_OPTION,
) -> None:
    """Roll migrations back to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Downgrading comuni schema to {revision}")
    command.downgrade(config, revision)
    logger.info("Schema downgrade complete")


@db_app.command()
def current(config_path: Path = _CONFIG_OPTION) -> None:
    """Show the revision the database is currently at."""
    from alembic import command

    command.current(_alembic_config(config_path), verbose=True)
