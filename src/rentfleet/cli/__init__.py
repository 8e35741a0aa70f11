"""Command-line interface for rentfleet."""
