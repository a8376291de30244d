"""Two-tranche loan split optimizer."""

__version__ = "1.0.0"
