"""Append-only rental history log."""

import logging
from pathlib import Path

from rentfleet.models import RentalRecord

logger = logging.getLogger(__name__)


class RentalHistory:
    """Audit trail of completed rentals, one line per rental.

    The file is opened in append mode for every write and never read back
    by the program.
    """

    def __init__(self, history_path: Path) -> None:
        self._path = Path(history_path)

    @property
    def history_path(self) -> Path:
        return self._path

    def append(self, record: RentalRecord) -> bool:
        """Append one record.

        Returns:
            True if the line was written, False on I/O failure
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as f:
                f.write(record.log_line + "\n")
        except OSError:
            logger.exception("Error saving rental history to %s", self._path)
            return False
        return True
