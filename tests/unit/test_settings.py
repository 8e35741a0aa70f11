"""Tests for AppSettings and SettingsManager."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rentfleet.core.config import SettingsManager
from rentfleet.exceptions import SettingsValidationError
from rentfleet.models import AppSettings


class TestAppSettings:
    def test_defaults(self):
        s = AppSettings()
        assert s.data_dir == Path(".")
        assert s.snapshot_path == Path(".") / "vehicles.toml"
        assert s.history_path == Path(".") / "rental_history.txt"
        assert s.payment_processor == "stub"

    def test_custom_data_dir(self, tmp_path):
        s = AppSettings(data_dir=tmp_path)
        assert s.snapshot_path == tmp_path / "vehicles.toml"

    def test_filename_with_directory_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(snapshot_file="sub/vehicles.toml")

    def test_blank_filename_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(history_file="   ")


class TestSettingsManager:
    def test_defaults_when_missing(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        assert manager.exists is False
        assert manager.load() == AppSettings()

    def test_load_from_file(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings_path.write_text(
            f"data_dir = \"{(tmp_path / 'data').as_posix()}\"\n"
            'history_file = "log.txt"\n',
            encoding="utf-8",
        )
        assert manager.exists is True
        loaded = manager.load()
        assert loaded.data_dir == tmp_path / "data"
        assert loaded.history_file == "log.txt"
        assert loaded.snapshot_file == "vehicles.toml"

    def test_default_dir_uses_platformdirs(self, isolated_user_dirs):
        manager = SettingsManager()
        assert manager.settings_path == isolated_user_dirs / "rentfleet" / "settings.toml"

    def test_invalid_toml(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings_path.write_text("data_dir = ", encoding="utf-8")
        with pytest.raises(SettingsValidationError):
            manager.load()

    def test_invalid_values(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings_path.write_text('snapshot_file = "a/b.toml"\n', encoding="utf-8")
        with pytest.raises(SettingsValidationError) as exc:
            manager.load()
        assert "settings.toml" in exc.value.message

    def test_non_utf8_file(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings_path.write_bytes(b'history_file = "\xff\xfe.txt"\n')
        with pytest.raises(SettingsValidationError) as exc:
            manager.load()
        assert exc.value.message == "Invalid settings: settings.toml"

    def test_unreadable_file(self, tmp_path):
        manager = SettingsManager(config_dir=tmp_path)
        manager.settings_path.mkdir()
        with pytest.raises(SettingsValidationError):
            manager.load()
