"""Catalog snapshot persistence."""

import logging
from pathlib import Path
from typing import Sequence

import tomli
import tomli_w
from pydantic import ValidationError

from rentfleet.exceptions import RentfleetError
from rentfleet.models import CatalogSnapshot, VehicleBase
from rentfleet.models.catalog import SNAPSHOT_VERSION

logger = logging.getLogger(__name__)


class CatalogStore:
    """Reads and rewrites the full catalog snapshot file.

    Neither operation raises: a failed save is logged and reported through
    the return value, a failed load yields an empty catalog.
    """

    def __init__(self, snapshot_path: Path) -> None:
        self._path = Path(snapshot_path)

    @property
    def snapshot_path(self) -> Path:
        return self._path

    @property
    def exists(self) -> bool:
        return self._path.exists()

    def save(self, vehicles: Sequence[VehicleBase]) -> bool:
        """Overwrite the snapshot with the whole catalog.

        Returns:
            True if the snapshot was written, False on I/O failure
        """
        snapshot = CatalogSnapshot(version=SNAPSHOT_VERSION, vehicles=list(vehicles))
        data = snapshot.model_dump(mode="json", exclude_none=True)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(tomli_w.dumps(data), encoding="utf-8")
        except OSError:
            logger.exception("Error saving vehicle data to %s", self._path)
            return False

        logger.debug("Snapshot saved: %d vehicles → %s", len(vehicles), self._path)
        return True

    def load(self) -> list[VehicleBase]:
        """Read the snapshot, or return an empty catalog if unavailable."""
        if not self.exists:
            logger.info("No existing vehicle data found at %s", self._path)
            return []

        try:
            raw = tomli.loads(self._path.read_text(encoding="utf-8"))
            snapshot = CatalogSnapshot.model_validate(raw)
        except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError, ValidationError, RentfleetError):
            logger.exception("Failed to load vehicle data from %s; starting empty", self._path)
            return []

        if snapshot.version != SNAPSHOT_VERSION:
            logger.warning(
                "Snapshot version %d differs from supported version %d",
                snapshot.version,
                SNAPSHOT_VERSION,
            )

        logger.info("Loaded %d vehicles from %s", len(snapshot.vehicles), self._path)
        return list(snapshot.vehicles)
