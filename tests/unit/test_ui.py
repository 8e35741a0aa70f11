"""Tests for CLI UI helpers."""

from datetime import date
from decimal import Decimal

from rich.console import Console

from rentfleet.cli.ui import (
    HISTORY_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    create_catalog_table,
    error_panel,
    format_amount,
    persistence_warnings,
    success_panel,
    warning_panel,
)


def render(renderable) -> str:
    console = Console(width=160, record=True)
    console.print(renderable)
    return console.export_text()


class TestFormatAmount:
    def test_whole(self):
        assert format_amount(Decimal("5000")) == "5000 PKR"

    def test_keeps_precision(self):
        assert format_amount(Decimal("1000.005")) == "1000.005 PKR"


class TestPanels:
    def test_success_panel(self):
        assert "It worked!" in render(success_panel("It worked!"))

    def test_error_panel_with_details(self):
        text = render(error_panel("Failed", details="More info here"))
        assert "Failed" in text
        assert "More info here" in text

    def test_warning_panel(self):
        assert "Watch out!" in render(warning_panel("Watch out!"))

    def test_markup_escaped(self):
        assert "[bold]" in render(error_panel("Model [bold] X"))


class TestPersistenceWarnings:
    def test_nothing_when_all_written(self):
        assert persistence_warnings(saved=True, logged=True) == []

    def test_snapshot_failure(self):
        panels = persistence_warnings(saved=False)
        assert len(panels) == 1
        assert SAVE_FAILED_MESSAGE in render(panels[0])

    def test_both_failures(self):
        text = "".join(render(p) for p in persistence_warnings(saved=False, logged=False))
        assert HISTORY_FAILED_MESSAGE in text
        assert SAVE_FAILED_MESSAGE in text


class TestCatalogTable:
    def test_rows(self, corolla, cd70):
        cd70.rent_vehicle(5, today=date(2025, 1, 29))
        table = create_catalog_table([corolla, cd70])
        assert table.row_count == 2
        text = render(table)
        assert "Toyota" in text
        assert "4 doors, 1.8L" in text
        assert "Available" in text
        assert "2025-02-03" in text

    def test_empty(self):
        assert create_catalog_table([]).row_count == 0
