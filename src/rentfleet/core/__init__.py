"""Core services for rentfleet."""

from rentfleet.core.config import SettingsManager
from rentfleet.core.history import RentalHistory
from rentfleet.core.manager import RentalManager
from rentfleet.core.storage import CatalogStore

__all__ = [
    "CatalogStore",
    "RentalHistory",
    "RentalManager",
    "SettingsManager",
]
