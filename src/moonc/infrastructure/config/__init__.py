"""Configuration package."""

from moonc.infrastructure.config.loader import ConfigLoader, DriverSettings

__all__ = ["ConfigLoader", "DriverSettings"]
