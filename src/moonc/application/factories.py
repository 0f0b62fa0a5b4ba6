"""Factory for creating compiler backends."""

from typing import Optional

from moonc.domain.protocols import ICompiler
from moonc.domain.exceptions import CompilerNotAvailableError
from moonc.infrastructure.compilers import CommandCompiler
from moonc.infrastructure.config import DriverSettings
from moonc.shared.logging import get_logger


class CompilerFactory:
    """
    Factory for creating the compiler backend from settings.

    The backend is probed before any task is scheduled so a missing
    executable is reported once instead of once per input file.
    """

    def __init__(self, settings: Optional[DriverSettings] = None):
        self._settings = settings or DriverSettings()
        self._logger = get_logger(__name__)

    def create(self, reserve_line_numbers: bool = False, probe: bool = True) -> ICompiler:
        """
        Create compiler backend.

        Args:
            reserve_line_numbers: Whether the batch asks for line numbers
            probe: Check that the executable exists

        Returns:
            Compiler instance

        Raises:
            CompilerNotAvailableError: If the executable cannot be found
        """
        settings = self._settings
        compiler = CommandCompiler(
            executable=settings.compiler_executable,
            compile_args=settings.compile_args,
            parse_args=settings.parse_args,
            version_args=settings.version_args,
            line_number_args=settings.line_number_args,
            timeout_seconds=settings.timeout_seconds,
        )

        if probe and not compiler.is_available():
            raise CompilerNotAvailableError(
                f"Compiler executable not found: {settings.compiler_executable} "
                f"(set compiler_executable or MOONC_EXECUTABLE)"
            )

        if reserve_line_numbers and not settings.line_number_args:
            self._logger.warning(
                "Line numbers requested but line_number_args is empty; "
                "output will not carry source line numbers"
            )

        self._logger.debug(f"Using compiler backend: {settings.compiler_executable}")
        return compiler
