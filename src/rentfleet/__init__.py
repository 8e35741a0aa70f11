"""rentfleet - Console vehicle rental manager."""

__version__ = "0.1.0"
