"""Allow running as ``python -m rentfleet``."""

from rentfleet.cli.app import app

app()
