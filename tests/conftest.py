"""Shared test fixtures for rentfleet."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from rentfleet.core.history import RentalHistory
from rentfleet.core.manager import RentalManager
from rentfleet.core.storage import CatalogStore
from rentfleet.models import Bike, Car, PaymentReceipt
from rentfleet.payments.base import PaymentProcessor
from rentfleet.payments.stub import StubPaymentProcessor


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path, monkeypatch):
    """Point platformdirs at a temp directory so tests never touch $HOME."""
    config_root = tmp_path / ".config"

    def fake_user_config_dir(appname=None, *args, ensure_exists=False, **kwargs):
        path = config_root / (appname or "")
        if ensure_exists:
            path.mkdir(parents=True, exist_ok=True)
        return str(path)

    monkeypatch.setattr("platformdirs.user_config_dir", fake_user_config_dir)
    return config_root


@pytest.fixture(autouse=True)
def restore_rentfleet_logger():
    """Drop handlers added during a test so each test configures logging fresh."""
    logger = logging.getLogger("rentfleet")
    saved = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def data_dir(tmp_path):
    """Provide isolated data directory for snapshot and history files."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def store(data_dir):
    return CatalogStore(data_dir / "vehicles.toml")


@pytest.fixture
def history(data_dir):
    return RentalHistory(data_dir / "rental_history.txt")


class DecliningPaymentProcessor(PaymentProcessor):
    """Declines every charge and remembers what it was asked."""

    name = "declining"

    def __init__(self) -> None:
        self.charges = []

    def charge(self, amount, method):
        self.charges.append((amount, method))
        return PaymentReceipt(
            approved=False,
            amount=amount,
            method=method,
            message="Card declined",
        )


@pytest.fixture
def declining_processor():
    return DecliningPaymentProcessor()


@pytest.fixture
def fixed_today():
    return date(2025, 1, 29)


@pytest.fixture
def make_manager(store, history, fixed_today):
    """Factory for managers over the shared temp files."""

    def _make(processor=None):
        return RentalManager(
            store=store,
            history=history,
            processor=processor or StubPaymentProcessor(),
            today=lambda: fixed_today,
        )

    return _make


@pytest.fixture
def corolla():
    return Car(
        brand="Toyota",
        model="Corolla",
        rental_price=Decimal("1000"),
        door_count=4,
        engine_displacement=Decimal("1.8"),
    )


@pytest.fixture
def cd70():
    return Bike(brand="Honda", model="CD70", rental_price=Decimal("300"), has_helmet=True)
