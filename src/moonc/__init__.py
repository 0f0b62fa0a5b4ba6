"""Concurrent batch compilation driver for MoonScript sources."""

__version__ = "0.1.0"
