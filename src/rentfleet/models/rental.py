"""Rental record and outcome models."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from rentfleet.models.vehicle import CURRENCY


class RentalStatus(str, Enum):
    """How a rental attempt ended."""

    RENTED = "rented"
    PAYMENT_FAILED = "payment_failed"


class RentalRecord(BaseModel):
    """One completed rental, as written to the audit log."""

    vehicle_details: str
    days: int
    total_cost: Decimal
    payment_method: str
    payment_reference: Optional[str] = None
    return_date: date
    rented_at: datetime = Field(default_factory=datetime.now)

    @property
    def log_line(self) -> str:
        """Single audit log line, no trailing newline."""
        return (
            f"{self.rented_at.strftime('%Y-%m-%d %H:%M:%S')}"
            f" | Rented: {self.vehicle_details}"
            f" | Days: {self.days}"
            f" | Cost: {self.total_cost}"
            f" | Payment: {self.payment_method}"
            f" | Return: {self.return_date.isoformat()}"
        )


class RentalOutcome(BaseModel):
    """Result of a rent request that found a vehicle."""

    status: RentalStatus
    vehicle_details: str
    days: int
    total_cost: Decimal
    record: Optional[RentalRecord] = None
    message: Optional[str] = None
    saved: bool = Field(default=True, description="Snapshot rewrite succeeded")
    logged: bool = Field(default=True, description="History line written")

    @property
    def succeeded(self) -> bool:
        return self.status == RentalStatus.RENTED

    @property
    def total_display(self) -> str:
        """Format total cost with currency."""
        return f"{self.total_cost} {CURRENCY}"


class ReturnOutcome(BaseModel):
    """Result of returning a rented vehicle."""

    vehicle_details: str
    saved: bool = True
