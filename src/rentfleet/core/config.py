"""Settings management."""

import logging
from pathlib import Path
from typing import Optional

import platformdirs
import tomli
from pydantic import ValidationError

from rentfleet.exceptions import SettingsValidationError
from rentfleet.models import AppSettings

logger = logging.getLogger(__name__)


class SettingsManager:
    """Reads the optional settings.toml file."""

    SETTINGS_FILENAME = "settings.toml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Override config directory (for testing)
        """
        if config_dir:
            self._config_dir = Path(config_dir)
        else:
            self._config_dir = Path(platformdirs.user_config_dir("rentfleet"))

    @property
    def settings_path(self) -> Path:
        """Path to settings file."""
        return self._config_dir / self.SETTINGS_FILENAME

    @property
    def exists(self) -> bool:
        """Check if settings file exists."""
        return self.settings_path.exists()

    def load(self) -> AppSettings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            SettingsValidationError: If the file cannot be read, is not valid
                TOML, or fails validation
        """
        if not self.exists:
            return AppSettings()

        try:
            raw = tomli.loads(self.settings_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            raise SettingsValidationError("settings.toml", str(e))

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise SettingsValidationError("settings.toml", str(e))

        logger.debug("Settings loaded from %s", self.settings_path)
        return settings
