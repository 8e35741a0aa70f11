"""Wiring between CLI options, settings and the rental manager."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from rentfleet.cli.ui import error_panel
from rentfleet.core.config import SettingsManager
from rentfleet.core.manager import RentalManager
from rentfleet.exceptions import SettingsError

logger = logging.getLogger(__name__)
console = Console()


def open_manager(data_dir: Optional[Path] = None) -> RentalManager:
    """Load settings, apply CLI overrides and build a RentalManager.

    Exits with status 1 if settings.toml is invalid or names an unknown
    payment processor.
    """
    try:
        settings = SettingsManager().load()
    except SettingsError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    if data_dir is not None:
        settings = settings.model_copy(update={"data_dir": Path(data_dir)})

    try:
        manager = RentalManager.from_settings(settings)
    except ValueError as e:
        console.print(error_panel("Invalid settings: payment_processor", str(e)))
        raise typer.Exit(1)

    logger.info("Data directory: %s", settings.data_dir)
    return manager
