"""Domain exceptions for the batch compilation driver."""


class DomainException(Exception):
    """Base exception for all domain errors."""
    pass


class UsageError(DomainException):
    """Raised when command line flags are missing or combined illegally."""
    pass


class ReadError(DomainException):
    """Raised when a source file cannot be read."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Cannot read {path}: {reason}" if reason else f"Cannot read {path}")
        self.path = path


class CompileError(DomainException):
    """Raised when the compiler rejects a source or cannot be run on it."""

    def __init__(self, diagnostic: str):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class ParseError(CompileError):
    """Raised when a parse-only run fails."""
    pass


class WriteError(DomainException):
    """Raised when an output file cannot be written."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Cannot write {path}: {reason}" if reason else f"Cannot write {path}")
        self.path = path


class ConfigurationError(DomainException):
    """Raised when configuration is invalid."""
    pass


class CompilerNotAvailableError(DomainException):
    """Raised when the compiler backend cannot be found."""
    pass
