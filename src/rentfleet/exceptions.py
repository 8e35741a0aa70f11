"""Custom exceptions for rentfleet."""

from typing import Optional


class RentfleetError(Exception):
    """Base exception for all rentfleet errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


# ─────────────────────────────────────────────────────────────────────────────
# Rental Errors
# ─────────────────────────────────────────────────────────────────────────────


class InvalidConfiguration(RentfleetError):
    """A vehicle or rental request breaks a business rule.

    Covers non-positive prices, bad car details, out-of-range rental days
    and lookups that find no matching vehicle.
    """


# ─────────────────────────────────────────────────────────────────────────────
# Settings Errors
# ─────────────────────────────────────────────────────────────────────────────


class SettingsError(RentfleetError):
    """Base class for settings file errors."""


class SettingsValidationError(SettingsError):
    """Settings file could not be parsed or validated."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Invalid settings: {field}",
            reason,
        )
