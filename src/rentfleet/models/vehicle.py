"""Vehicle data models."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from rentfleet.exceptions import InvalidConfiguration

CURRENCY = "PKR"


class VehicleBase(BaseModel):
    """Fields and state shared by every rentable vehicle."""

    brand: str = Field(..., description="Manufacturer, e.g. 'Toyota'")
    model: str = Field(..., description="Model name, e.g. 'Corolla'")
    rental_price: Decimal = Field(..., description="Price per rental day")
    available: bool = Field(default=True)
    return_date: Optional[date] = Field(
        default=None,
        description="Due date while rented, None while available",
    )

    @field_validator("rental_price")
    @classmethod
    def validate_price(cls, v: Decimal) -> Decimal:
        """Reject non-positive daily prices."""
        if v <= 0:
            raise InvalidConfiguration(
                "Rental price must be positive",
                f"Got {v}",
            )
        return v

    @model_validator(mode="after")
    def check_rental_state(self) -> "VehicleBase":
        """A vehicle is rented exactly when it has a return date."""
        if self.available == (self.return_date is not None):
            raise ValueError("available must be False exactly when return_date is set")
        return self

    def matches(self, brand: str, model: str) -> bool:
        """Case-insensitive (brand, model) comparison."""
        return (
            self.brand.lower() == brand.lower()
            and self.model.lower() == model.lower()
        )

    def rent_vehicle(self, days: int, today: Optional[date] = None) -> None:
        """Mark rented for ``days`` days starting ``today``.

        Day bounds are the caller's responsibility.
        """
        start = today or date.today()
        self.available = False
        self.return_date = start + timedelta(days=days)

    def return_vehicle(self) -> None:
        """Mark available again. No-op for a vehicle that was never rented."""
        self.available = True
        self.return_date = None

    @property
    def details(self) -> str:
        """Human-readable one-line description."""
        return vehicle_details(self)

    @property
    def status_display(self) -> str:
        """'Available' or the rented marker with its return date."""
        if self.available:
            return "Available"
        return f"Rented (Return: {self.return_date.isoformat()})"


class Car(VehicleBase):
    """A rentable car."""

    kind: Literal["car"] = "car"
    door_count: int = Field(..., description="Number of doors")
    engine_displacement: Decimal = Field(..., description="Engine size in litres")

    @model_validator(mode="after")
    def validate_car_details(self) -> "Car":
        """Doors and engine size must both be positive."""
        if self.door_count <= 0 or self.engine_displacement <= 0:
            raise InvalidConfiguration(
                "Invalid car details",
                "Door count and engine displacement must be positive.",
            )
        return self


class Bike(VehicleBase):
    """A rentable bike."""

    kind: Literal["bike"] = "bike"
    has_helmet: bool = Field(default=False)


Vehicle = Annotated[Union[Car, Bike], Field(discriminator="kind")]


def vehicle_details(vehicle: VehicleBase) -> str:
    """Render the details line for a Car or Bike."""
    price = f"Price: {vehicle.rental_price} {CURRENCY}"
    if isinstance(vehicle, Car):
        return (
            f"Car: {vehicle.brand} {vehicle.model}"
            f" | Doors: {vehicle.door_count}"
            f" | Engine: {vehicle.engine_displacement}L"
            f" | {price}"
        )
    if isinstance(vehicle, Bike):
        helmet = "Yes" if vehicle.has_helmet else "No"
        return f"Bike: {vehicle.brand} {vehicle.model} | Helmet: {helmet} | {price}"
    raise TypeError(f"Unknown vehicle type: {type(vehicle).__name__}")
