"""Rental manager: owns the catalog and runs the rent workflow."""

import logging
from datetime import date
from typing import Callable, Optional

from rentfleet.core.history import RentalHistory
from rentfleet.core.storage import CatalogStore
from rentfleet.exceptions import InvalidConfiguration
from rentfleet.models import (
    AppSettings,
    RentalOutcome,
    RentalRecord,
    RentalStatus,
    ReturnOutcome,
    VehicleBase,
)
from rentfleet.payments import PaymentProcessor, get_processor

logger = logging.getLogger(__name__)

MIN_RENTAL_DAYS = 1
MAX_RENTAL_DAYS = 30


class RentalManager:
    """Holds the in-memory catalog and persists it after every mutation.

    The catalog is loaded once, here, from the snapshot store. Each mutation
    rewrites the whole snapshot. Rent side effects (mutate, log, snapshot)
    are not transactional: a failed snapshot write leaves the in-memory
    catalog and the history log ahead of the file on disk.
    """

    def __init__(
        self,
        store: CatalogStore,
        history: RentalHistory,
        processor: PaymentProcessor,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.history = history
        self.processor = processor
        self._today = today
        self._vehicles: list[VehicleBase] = store.load()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "RentalManager":
        """Build a manager wired to the files and processor named in settings."""
        processor_cls = get_processor(settings.payment_processor)
        logger.debug("Using payment processor: %s", processor_cls.__name__)
        return cls(
            store=CatalogStore(settings.snapshot_path),
            history=RentalHistory(settings.history_path),
            processor=processor_cls(),
        )

    @property
    def vehicles(self) -> tuple[VehicleBase, ...]:
        """Catalog in insertion order (read-only view of the live entries)."""
        return tuple(self._vehicles)

    # --- Catalog ---

    def add_vehicle(self, vehicle: VehicleBase) -> bool:
        """Append a vehicle and rewrite the snapshot. Duplicates are allowed.

        Returns:
            False if the snapshot could not be written (the vehicle stays
            in the in-memory catalog)
        """
        self._vehicles.append(vehicle)
        logger.info("Vehicle added: %s", vehicle.details)
        return self.store.save(self._vehicles)

    def find_available(self, brand: str, model: str) -> Optional[VehicleBase]:
        """First available vehicle matching brand and model, ignoring case."""
        for vehicle in self._vehicles:
            if vehicle.available and vehicle.matches(brand, model):
                return vehicle
        return None

    def _find_rented(self, brand: str, model: str) -> Optional[VehicleBase]:
        for vehicle in self._vehicles:
            if not vehicle.available and vehicle.matches(brand, model):
                return vehicle
        return None

    def display_available_vehicles(self) -> list[str]:
        """One display line per catalog entry, rented ones included."""
        return [f"{v.details} | {v.status_display}" for v in self._vehicles]

    # --- Rentals ---

    def rent_vehicle(
        self,
        brand: str,
        model: str,
        days: int,
        payment_method: str,
    ) -> RentalOutcome:
        """Rent the first available matching vehicle for ``days`` days.

        Returns:
            RentalOutcome with status RENTED, or PAYMENT_FAILED if the
            processor declined (nothing is changed in that case)

        Raises:
            InvalidConfiguration: If days is out of range or no matching
                vehicle is available
        """
        if days < MIN_RENTAL_DAYS or days > MAX_RENTAL_DAYS:
            raise InvalidConfiguration(
                f"Rental days must be between {MIN_RENTAL_DAYS} and {MAX_RENTAL_DAYS}",
                f"Got {days}",
            )

        vehicle = self.find_available(brand, model)
        if vehicle is None:
            raise InvalidConfiguration(
                "Vehicle not available for rent",
                f"No available vehicle matches '{brand} {model}'.",
            )

        total_cost = vehicle.rental_price * days
        details = vehicle.details
        logger.info("Renting %s for %d days, total %s", details, days, total_cost)

        receipt = self.processor.charge(total_cost, payment_method)
        if not receipt.approved:
            logger.warning("Payment declined for %s: %s", details, receipt.message)
            return RentalOutcome(
                status=RentalStatus.PAYMENT_FAILED,
                vehicle_details=details,
                days=days,
                total_cost=total_cost,
                message=receipt.message or "Payment failed. Rental cancelled.",
            )

        vehicle.rent_vehicle(days, today=self._today())
        record = RentalRecord(
            vehicle_details=details,
            days=days,
            total_cost=total_cost,
            payment_method=payment_method,
            payment_reference=receipt.reference,
            return_date=vehicle.return_date,
        )
        logged = self.history.append(record)
        saved = self.store.save(self._vehicles)

        return RentalOutcome(
            status=RentalStatus.RENTED,
            vehicle_details=details,
            days=days,
            total_cost=total_cost,
            record=record,
            saved=saved,
            logged=logged,
        )

    def return_vehicle(self, brand: str, model: str) -> ReturnOutcome:
        """Return the first rented vehicle matching brand and model.

        Raises:
            InvalidConfiguration: If no matching vehicle is currently rented
        """
        vehicle = self._find_rented(brand, model)
        if vehicle is None:
            raise InvalidConfiguration(
                "Vehicle is not currently rented",
                f"No rented vehicle matches '{brand} {model}'.",
            )

        vehicle.return_vehicle()
        logger.info("Vehicle returned: %s", vehicle.details)
        saved = self.store.save(self._vehicles)
        return ReturnOutcome(vehicle_details=vehicle.details, saved=saved)
