"""Domain models for batch compilation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple

from .exceptions import UsageError


@dataclass(frozen=True)
class CompilerConfig:
    """Options handed to the compiler for every file of a batch."""

    reserve_line_numbers: bool = False
    extra_args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BatchRequest:
    """Everything one invocation asks for."""

    files: Tuple[str, ...]
    target_dir: Optional[str] = None
    explicit_output_file: Optional[str] = None
    write_to_disk: bool = True
    dump_timing: bool = False
    config: CompilerConfig = field(default_factory=CompilerConfig)

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable
        object.__setattr__(self, 'files', tuple(self.files))
        if self.explicit_output_file and len(self.files) > 1:
            raise UsageError("-o can not be used with multiple input files.")


@dataclass(frozen=True)
class CompileOutcome(ABC):
    """Result of compiling one file."""

    input_path: str

    success: ClassVar[bool] = False
    kind: ClassVar[str] = "outcome"

    @abstractmethod
    def render(self) -> str:
        """Text shown on the console for this outcome."""


@dataclass(frozen=True)
class Compiled(CompileOutcome):
    output_path: str = ""
    bytes_written: int = 0

    success: ClassVar[bool] = True
    kind: ClassVar[str] = "compiled"

    def render(self) -> str:
        return f"Built {self.input_path}"


@dataclass(frozen=True)
class CompiledToStdout(CompileOutcome):
    """Print mode result.

    Printing is an inspection mode, so it counts as a failure at the process
    level.
    """

    text: str = ""

    success: ClassVar[bool] = False
    kind: ClassVar[str] = "printed"

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class CompileFailed(CompileOutcome):
    diagnostic: str = ""

    kind: ClassVar[str] = "compile_failed"

    def render(self) -> str:
        return f"Fail to compile: {self.input_path}.\n{self.diagnostic}"


@dataclass(frozen=True)
class ReadFailed(CompileOutcome):
    kind: ClassVar[str] = "read_failed"

    def render(self) -> str:
        return f"Fail to read file: {self.input_path}."


@dataclass(frozen=True)
class WriteFailed(CompileOutcome):
    output_path: str = ""

    kind: ClassVar[str] = "write_failed"

    def render(self) -> str:
        return f"Fail to write file: {self.output_path}."


@dataclass(frozen=True)
class TimingReport(CompileOutcome):
    parse_ms: float = 0.0
    compile_ms: float = 0.0

    success: ClassVar[bool] = True
    kind: ClassVar[str] = "timed"

    @property
    def total_ms(self) -> float:
        return self.parse_ms + self.compile_ms

    def render(self) -> str:
        return (
            f"{self.input_path} \n"
            f"Parse time:     {self.parse_ms:.5g} ms\n"
            f"Compile time:   {self.compile_ms:.5g} ms\n"
        )
