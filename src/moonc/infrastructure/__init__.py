"""Infrastructure layer package."""

from moonc.infrastructure.compilers import CommandCompiler
from moonc.infrastructure.config import ConfigLoader, DriverSettings
from moonc.infrastructure.io import SourceFileReader, OutputFileWriter, StreamConsole

__all__ = [
    "CommandCompiler",
    "ConfigLoader",
    "DriverSettings",
    "SourceFileReader",
    "OutputFileWriter",
    "StreamConsole",
]
