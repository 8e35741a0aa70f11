"""Application settings model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class AppSettings(BaseModel):
    """User-tunable settings, read from settings.toml."""

    data_dir: Path = Field(
        default=Path("."),
        description="Directory holding the catalog snapshot and rental history",
    )
    snapshot_file: str = Field(default="vehicles.toml")
    history_file: str = Field(default="rental_history.txt")
    payment_processor: str = Field(
        default="stub",
        description="Payment processor registry key",
    )

    @field_validator("snapshot_file", "history_file")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """File names must be bare names inside data_dir."""
        v = v.strip()
        if not v or Path(v).name != v:
            raise ValueError("Must be a plain file name without directories")
        return v

    @property
    def snapshot_path(self) -> Path:
        return self.data_dir / self.snapshot_file

    @property
    def history_path(self) -> Path:
        return self.data_dir / self.history_file
