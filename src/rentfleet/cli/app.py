"""Main CLI application."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from rentfleet import __version__
from rentfleet.logging import setup_logging

app = typer.Typer(
    name="rentfleet",
    help="Track, rent and return rental vehicles from the command line.",
    rich_markup_mode="rich",
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        help="Directory holding the vehicle snapshot and rental history.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Echo activity log messages to stderr.",
    ),
) -> None:
    """rentfleet - Console vehicle rental manager.

    Run without a command to open the interactive menu.
    """
    if version:
        console.print(f"rentfleet v{__version__}")
        raise typer.Exit()

    logger = setup_logging(verbose=verbose)
    logger.debug("rentfleet v%s started", __version__)
    ctx.obj = data_dir

    if ctx.invoked_subcommand is None:
        from rentfleet.cli.repl import run_repl
        from rentfleet.cli.session import open_manager

        run_repl(open_manager(data_dir))


@app.command("list")
def list_vehicles(ctx: typer.Context) -> None:
    """Show every vehicle and whether it is available."""
    from rentfleet.cli.commands.catalog import run_list

    run_list(data_dir=ctx.obj)


@app.command()
def rent(
    ctx: typer.Context,
    brand: str = typer.Option(..., "--brand", help="Vehicle brand (case-insensitive)"),
    model: str = typer.Option(..., "--model", help="Vehicle model (case-insensitive)"),
    days: int = typer.Option(..., "--days", help="Rental length in days (1-30)"),
    payment: str = typer.Option(..., "--payment", help="Payment method, e.g. cash or card"),
) -> None:
    """Rent the first available matching vehicle."""
    from rentfleet.cli.commands.rent import run_rent

    run_rent(brand=brand, model=model, days=days, payment_method=payment, data_dir=ctx.obj)


@app.command("return")
def return_(
    ctx: typer.Context,
    brand: str = typer.Option(..., "--brand", help="Vehicle brand (case-insensitive)"),
    model: str = typer.Option(..., "--model", help="Vehicle model (case-insensitive)"),
) -> None:
    """Return a rented vehicle."""
    from rentfleet.cli.commands.rent import run_return

    run_return(brand=brand, model=model, data_dir=ctx.obj)


@app.command("add-car")
def add_car(
    ctx: typer.Context,
    brand: str = typer.Option(..., "--brand"),
    model: str = typer.Option(..., "--model"),
    price: str = typer.Option(..., "--price", help="Price per day"),
    doors: int = typer.Option(..., "--doors"),
    engine: str = typer.Option(..., "--engine", help="Engine displacement in litres"),
) -> None:
    """Add a car to the catalog."""
    from rentfleet.cli.commands.catalog import run_add_car

    run_add_car(brand, model, price, doors, engine, data_dir=ctx.obj)


@app.command("add-bike")
def add_bike(
    ctx: typer.Context,
    brand: str = typer.Option(..., "--brand"),
    model: str = typer.Option(..., "--model"),
    price: str = typer.Option(..., "--price", help="Price per day"),
    helmet: bool = typer.Option(False, "--helmet", help="Bike comes with a helmet"),
) -> None:
    """Add a bike to the catalog."""
    from rentfleet.cli.commands.catalog import run_add_bike

    run_add_bike(brand, model, price, helmet, data_dir=ctx.obj)


if __name__ == "__main__":
    app()
