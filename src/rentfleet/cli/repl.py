"""Interactive menu loop for rentfleet."""

import logging
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from rentfleet import __version__
from rentfleet.cli.ui import (
    error_panel,
    persistence_warnings,
    success_panel,
    warning_panel,
)
from rentfleet.core.manager import RentalManager
from rentfleet.exceptions import RentfleetError
from rentfleet.models import Bike, Car, VehicleBase

logger = logging.getLogger(__name__)
console = Console()


class RentalREPL:
    """Menu-driven console session over one RentalManager."""

    def __init__(self, manager: RentalManager) -> None:
        self.manager = manager

    def run(self) -> None:
        """Main entry point."""
        self._show_banner()

        try:
            self._loop()
        except KeyboardInterrupt:
            console.print()
            console.print("[dim]Goodbye![/dim]")

    # --- Main loop ---

    def _loop(self) -> None:
        """Main menu loop."""
        actions = self._build_actions()
        while True:
            self._show_menu(actions)

            choice = Prompt.ask("  [bold]>[/bold]").strip().lower()

            if choice == "q":
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break

            action = actions.get(choice)
            if action:
                action["handler"]()
            else:
                console.print("  [red]Invalid choice.[/red]")

    def _show_banner(self) -> None:
        console.print()
        console.print(f"[bold blue]rentfleet[/bold blue] [dim]v{__version__}[/dim]")

    def _build_actions(self) -> dict:
        """Build menu actions."""
        return {
            "d": {"label": "Display vehicles", "handler": self._action_display},
            "r": {"label": "Rent a vehicle", "handler": self._action_rent},
            "t": {"label": "Return a vehicle", "handler": self._action_return},
            "a": {"label": "Add a vehicle", "handler": self._action_add_vehicle},
            "q": {"label": "Exit", "handler": lambda: None},
        }

    def _show_menu(self, actions: dict) -> None:
        """Display the menu."""
        console.print()
        for key, action in actions.items():
            console.print(f"  [bold cyan]\\[{key}][/bold cyan] {action['label']}")
        console.print()

    # --- Actions ---

    def _action_display(self) -> None:
        """Print one line per catalog entry."""
        console.print()
        lines = self.manager.display_available_vehicles()
        if not lines:
            console.print("  [dim]No vehicles available.[/dim]")
            return
        for line in lines:
            console.print(f"  {escape(line)}", soft_wrap=True)

    def _action_rent(self) -> None:
        """Prompt for a rental and run it."""
        console.print()
        console.print("  [bold cyan]Rent Vehicle[/bold cyan]")
        console.print()

        brand = Prompt.ask("  Brand")
        model = Prompt.ask("  Model")
        days = IntPrompt.ask("  Rental days")
        payment_method = Prompt.ask("  Payment method")
        logger.info("REPL rent: brand=%s model=%s days=%d", brand, model, days)

        try:
            outcome = self.manager.rent_vehicle(brand, model, days, payment_method)
        except RentfleetError as e:
            console.print()
            console.print(error_panel(e.message, e.details))
            return
        except Exception as e:
            logger.exception("Unexpected error in REPL rent")
            console.print(error_panel("Unexpected error.", str(e)))
            return

        console.print()
        console.print(
            f"  Total cost for {outcome.days} days: "
            f"[bold]{outcome.total_display}[/bold]"
        )
        if outcome.succeeded:
            console.print(success_panel(f"Rental successful: {outcome.vehicle_details}"))
            console.print(f"  Return by [bold]{outcome.record.return_date.isoformat()}[/bold]")
            for panel in persistence_warnings(outcome.saved, outcome.logged):
                console.print(panel)
        else:
            console.print(warning_panel(outcome.message or "Payment failed. Rental cancelled."))

    def _action_return(self) -> None:
        """Prompt for a vehicle to return."""
        console.print()
        brand = Prompt.ask("  Brand")
        model = Prompt.ask("  Model")

        try:
            outcome = self.manager.return_vehicle(brand, model)
        except RentfleetError as e:
            console.print()
            console.print(error_panel(e.message, e.details))
            return
        except Exception as e:
            logger.exception("Unexpected error in REPL return")
            console.print(error_panel("Unexpected error.", str(e)))
            return

        console.print()
        console.print(success_panel(f"Returned: {outcome.vehicle_details}"))
        for panel in persistence_warnings(outcome.saved):
            console.print(panel)

    def _action_add_vehicle(self) -> None:
        """Add a car or bike to the catalog."""
        console.print()
        console.print("  [bold cyan]Add Vehicle[/bold cyan]")
        console.print()

        vehicle = self._collect_vehicle()
        if vehicle is None:
            return

        try:
            saved = self.manager.add_vehicle(vehicle)
        except Exception as e:
            logger.exception("Unexpected error in REPL add")
            console.print(error_panel("Unexpected error.", str(e)))
            return

        console.print()
        console.print(success_panel(f"Added: {vehicle.details}"))
        for panel in persistence_warnings(saved):
            console.print(panel)

    # --- Input collection ---

    def _collect_vehicle(self) -> Optional[VehicleBase]:
        """Collect vehicle fields interactively. None if validation fails."""
        kind = Prompt.ask("  Type", choices=["car", "bike"], default="car")
        brand = Prompt.ask("  Brand")
        model = Prompt.ask("  Model")
        price = Prompt.ask("  Price per day")

        try:
            if kind == "car":
                doors = IntPrompt.ask("  Doors")
                engine = Prompt.ask("  Engine (litres)")
                return Car(
                    brand=brand,
                    model=model,
                    rental_price=price,
                    door_count=doors,
                    engine_displacement=engine,
                )
            helmet = Confirm.ask("  Includes helmet?", default=False)
            return Bike(brand=brand, model=model, rental_price=price, has_helmet=helmet)
        except RentfleetError as e:
            console.print()
            console.print(error_panel(e.message, e.details))
        except ValidationError as e:
            console.print()
            for error in e.errors():
                field = error["loc"][-1] if error["loc"] else "vehicle"
                console.print(f"  [red]{field}: {escape(error['msg'])}[/red]")
        return None


def run_repl(manager: RentalManager) -> None:
    """Entry point for the REPL."""
    repl = RentalREPL(manager)
    repl.run()
