"""Rent and return command implementations."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from rentfleet.cli.session import open_manager
from rentfleet.cli.ui import (
    error_panel,
    persistence_warnings,
    success_panel,
    warning_panel,
)
from rentfleet.exceptions import RentfleetError

logger = logging.getLogger(__name__)
console = Console()


def run_rent(
    brand: str,
    model: str,
    days: int,
    payment_method: str,
    data_dir: Optional[Path] = None,
) -> None:
    """Rent a vehicle non-interactively."""
    manager = open_manager(data_dir)
    logger.info("CLI rent: brand=%s model=%s days=%d", brand, model, days)

    try:
        outcome = manager.rent_vehicle(brand, model, days, payment_method)
    except RentfleetError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    console.print(f"Total cost for {outcome.days} days: [bold]{outcome.total_display}[/bold]")

    if not outcome.succeeded:
        console.print(warning_panel(outcome.message or "Payment failed. Rental cancelled."))
        raise typer.Exit(1)

    console.print(success_panel(f"Rental successful: {outcome.vehicle_details}"))
    console.print(f"Return by [bold]{outcome.record.return_date.isoformat()}[/bold]")
    for panel in persistence_warnings(outcome.saved, outcome.logged):
        console.print(panel)


def run_return(brand: str, model: str, data_dir: Optional[Path] = None) -> None:
    """Return a rented vehicle."""
    manager = open_manager(data_dir)

    try:
        outcome = manager.return_vehicle(brand, model)
    except RentfleetError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    console.print(success_panel(f"Returned: {outcome.vehicle_details}"))
    for panel in persistence_warnings(outcome.saved):
        console.print(panel)
