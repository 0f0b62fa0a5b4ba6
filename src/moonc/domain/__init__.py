"""Domain layer package."""

from .models import (
    CompilerConfig,
    BatchRequest,
    CompileOutcome,
    Compiled,
    CompiledToStdout,
    CompileFailed,
    ReadFailed,
    WriteFailed,
    TimingReport,
)
from .exceptions import (
    DomainException,
    UsageError,
    ReadError,
    CompileError,
    ParseError,
    WriteError,
    ConfigurationError,
    CompilerNotAvailableError,
)
from .protocols import (
    ICompiler,
    IConsole,
    ISourceReader,
    IOutputWriter,
    ILogger,
    IMetricsCollector,
)

__all__ = [
    # Models
    "CompilerConfig",
    "BatchRequest",
    "CompileOutcome",
    "Compiled",
    "CompiledToStdout",
    "CompileFailed",
    "ReadFailed",
    "WriteFailed",
    "TimingReport",
    # Exceptions
    "DomainException",
    "UsageError",
    "ReadError",
    "CompileError",
    "ParseError",
    "WriteError",
    "ConfigurationError",
    "CompilerNotAvailableError",
    # Protocols
    "ICompiler",
    "IConsole",
    "ISourceReader",
    "IOutputWriter",
    "ILogger",
    "IMetricsCollector",
]
