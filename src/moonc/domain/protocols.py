"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol, Tuple

from .models import CompilerConfig


class ICompiler(Protocol):
    """Interface to the external MoonScript compiler."""

    def parse(self, source: str) -> Any:
        """Parse source without generating code. Raises ParseError on failure."""
        ...

    def compile(self, source: str, config: CompilerConfig) -> Tuple[str, str]:
        """Compile source into (generated_code, diagnostic).

        Empty generated code signals failure; the diagnostic explains it.
        """
        ...

    def version(self) -> str:
        """Version string of the compiler."""
        ...


class IConsole(Protocol):
    """Interface for user-facing console output."""

    def emit(self, text: str) -> None:
        """Write one message followed by a newline."""
        ...


class ILogger(Protocol):
    """Interface for logging."""

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        ...

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        ...


class IMetricsCollector(Protocol):
    """Interface for collecting metrics."""

    def record_metric(self, name: str, value: float) -> None:
        """Record a metric value."""
        ...

    def increment_counter(self, name: str, amount: int = 1) -> None:
        """Increment a named counter."""
        ...

    def get_summary(self) -> dict:
        """Get summary of all metrics."""
        ...


class ISourceReader(Protocol):
    """Interface for loading source files."""

    def read(self, path: str) -> str:
        """Return the full text of path. Raises ReadError."""
        ...


class IOutputWriter(Protocol):
    """Interface for storing generated files."""

    def write(self, path: str, text: str) -> int:
        """Truncate path and write text to it, returning bytes written. Raises WriteError."""
        ...
