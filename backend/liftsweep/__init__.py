"""Lift/sweep motion classifier."""

__version__ = "1.0.0"
