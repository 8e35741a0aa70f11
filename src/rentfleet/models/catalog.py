"""Catalog snapshot model."""

from pydantic import BaseModel, Field

from rentfleet.models.vehicle import Vehicle

# Current snapshot schema version
SNAPSHOT_VERSION = 1


class CatalogSnapshot(BaseModel):
    """The whole catalog as persisted on disk."""

    version: int = Field(default=SNAPSHOT_VERSION, description="Snapshot schema version")
    vehicles: list[Vehicle] = Field(default_factory=list)
