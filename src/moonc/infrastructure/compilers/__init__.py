"""Compiler backends."""

from moonc.infrastructure.compilers.command import CommandCompiler

__all__ = ["CommandCompiler"]
