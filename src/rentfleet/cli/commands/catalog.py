"""Catalog listing and vehicle creation commands."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from rentfleet.cli.session import open_manager
from rentfleet.cli.ui import (
    create_catalog_table,
    error_panel,
    persistence_warnings,
    success_panel,
)
from rentfleet.exceptions import RentfleetError
from rentfleet.models import Bike, Car, VehicleBase

logger = logging.getLogger(__name__)
console = Console()


def run_list(data_dir: Optional[Path] = None) -> None:
    """Print the catalog as a table."""
    manager = open_manager(data_dir)
    vehicles = manager.vehicles

    console.print()
    if not vehicles:
        console.print("[dim]  No vehicles available.[/dim]")
        return

    console.print(create_catalog_table(vehicles))
    available = sum(1 for v in vehicles if v.available)
    console.print()
    console.print(f"[dim]  {available} of {len(vehicles)} vehicle(s) available.[/dim]")


def run_add_car(
    brand: str,
    model: str,
    price: str,
    doors: int,
    engine: str,
    data_dir: Optional[Path] = None,
) -> None:
    """Validate and add a car."""
    _add(
        lambda: Car(
            brand=brand,
            model=model,
            rental_price=price,
            door_count=doors,
            engine_displacement=engine,
        ),
        data_dir,
    )


def run_add_bike(
    brand: str,
    model: str,
    price: str,
    helmet: bool,
    data_dir: Optional[Path] = None,
) -> None:
    """Validate and add a bike."""
    _add(
        lambda: Bike(brand=brand, model=model, rental_price=price, has_helmet=helmet),
        data_dir,
    )


def _add(build, data_dir: Optional[Path]) -> None:
    try:
        vehicle: VehicleBase = build()
    except RentfleetError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(error_panel("Invalid vehicle details.", str(e)))
        raise typer.Exit(1)

    manager = open_manager(data_dir)
    saved = manager.add_vehicle(vehicle)
    console.print(success_panel(f"Added: {vehicle.details}"))
    for panel in persistence_warnings(saved):
        console.print(panel)
