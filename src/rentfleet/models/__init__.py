"""Data models for rentfleet."""

from rentfleet.models.catalog import CatalogSnapshot
from rentfleet.models.payment import PaymentReceipt
from rentfleet.models.rental import (
    RentalOutcome,
    RentalRecord,
    RentalStatus,
    ReturnOutcome,
)
from rentfleet.models.settings import AppSettings
from rentfleet.models.vehicle import (
    CURRENCY,
    Bike,
    Car,
    Vehicle,
    VehicleBase,
    vehicle_details,
)

__all__ = [
    # Vehicle
    "Vehicle",
    "VehicleBase",
    "Car",
    "Bike",
    "CURRENCY",
    "vehicle_details",
    # Catalog
    "CatalogSnapshot",
    # Rental
    "RentalRecord",
    "RentalOutcome",
    "RentalStatus",
    "ReturnOutcome",
    # Payment
    "PaymentReceipt",
    # Settings
    "AppSettings",
]
