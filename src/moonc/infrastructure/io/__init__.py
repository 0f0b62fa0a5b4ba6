"""IO infrastructure."""

from moonc.infrastructure.io.files import SourceFileReader, OutputFileWriter
from moonc.infrastructure.io.console import StreamConsole

__all__ = ["SourceFileReader", "OutputFileWriter", "StreamConsole"]
