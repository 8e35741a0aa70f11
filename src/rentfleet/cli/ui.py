"""Rich console UI helpers."""

from decimal import Decimal
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rentfleet.models import CURRENCY, Car, VehicleBase

console = Console()

SAVE_FAILED_MESSAGE = "Error saving vehicle data. Changes may be lost."
HISTORY_FAILED_MESSAGE = "Error saving rental history."


def success_panel(message: str) -> Panel:
    """Create a success message panel."""
    return Panel(
        f"[green]✓[/green] {escape(message)}",
        border_style="green",
        padding=(0, 1),
    )


def error_panel(message: str, details: str | None = None) -> Panel:
    """Create an error message panel."""
    content = f"[red]✗[/red] {escape(message)}"
    if details:
        content += f"\n\n[dim]{escape(details)}[/dim]"
    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(0, 1),
    )


def warning_panel(message: str) -> Panel:
    """Create a warning message panel."""
    return Panel(
        f"[yellow]⚠[/yellow] {escape(message)}",
        border_style="yellow",
        padding=(0, 1),
    )


def persistence_warnings(saved: bool, logged: bool = True) -> list[Panel]:
    """Warning panels for failed snapshot or history writes."""
    panels = []
    if not logged:
        panels.append(warning_panel(HISTORY_FAILED_MESSAGE))
    if not saved:
        panels.append(warning_panel(SAVE_FAILED_MESSAGE))
    return panels


def format_amount(amount: Decimal) -> str:
    """Format a money amount with the catalog currency."""
    return f"{amount} {CURRENCY}"


def create_catalog_table(vehicles: Sequence[VehicleBase]) -> Table:
    """Create a table listing every catalog entry."""
    table = Table(title="Vehicles", show_lines=False)
    table.add_column("#", style="dim", width=3)
    table.add_column("Type")
    table.add_column("Brand", style="bold")
    table.add_column("Model")
    table.add_column("Specs", style="dim")
    table.add_column("Price/day", justify="right")
    table.add_column("Status")

    for i, v in enumerate(vehicles, 1):
        if isinstance(v, Car):
            specs = f"{v.door_count} doors, {v.engine_displacement}L"
        else:
            specs = "helmet" if v.has_helmet else "no helmet"
        status = (
            "[green]Available[/green]"
            if v.available
            else f"[yellow]Rented[/yellow] [dim](return {v.return_date.isoformat()})[/dim]"
        )
        table.add_row(
            str(i),
            v.kind.capitalize(),
            escape(v.brand),
            escape(v.model),
            specs,
            format_amount(v.rental_price),
            status,
        )

    return table
