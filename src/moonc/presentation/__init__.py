"""Presentation layer package."""

from moonc.presentation.cli import main, create_orchestrator_from_settings

__all__ = ["main", "create_orchestrator_from_settings"]
