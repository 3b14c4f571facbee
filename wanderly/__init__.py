"""Wanderly travel-discovery backend."""

__version__ = "0.1.0"
