"""Dealership inventory simulation with a rate-limited animation driver."""

__version__ = "0.1.0"
