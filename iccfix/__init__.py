"""Correction of construction cost index CSV files, with a cursor-based vector."""

__version__ = "0.1.0"
__all__ = ["__version__"]