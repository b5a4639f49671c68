"""Database migration CLI commands using Alembic programmatically."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer()

_CONFIG_OPTION = typer.Option("alembic.ini", "--config", "-c", help="Path to alembic.ini")


def _alembic_config(path: str) -> Config:
    """Load the Alembic configuration, failing cleanly when it is missing."""
    from pathlib import Path

    from alembic.config import Config

    if not Path(path).is_file():
        typer.echo(f"Error: Alembic config not found: {path}", err=True)
        raise typer.Exit(code=1)
    return Config(path)


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    config_path: str = _CONFIG_OPTION,
) -> None:
    """Apply migrations up to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Upgrading election schema to {revision}")
    command.upgrade(config, revision)
    logger.info("Election schema upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: str = _CONFIG_OPTION,
) -> None:
    """Roll the schema back to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Downgrading election schema to {revision}")
    command.downgrade(config, revision)
    logger.info("Election schema downgrade complete")


@db_app.command()
def current(config_path: str = _CONFIG_OPTION) -> None:
    """Show the revision the database is at."""
    from alembic import command

    command.current(_alembic_config(config_path), verbose=True)
