"""External compiler executable wrapper."""

import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from moonc.domain.models import CompilerConfig
from moonc.domain.exceptions import CompileError, ParseError, CompilerNotAvailableError
from moonc.shared.logging import get_logger

INPUT_PLACEHOLDER = "{input}"
OPTIONS_PLACEHOLDER = "{options}"

DEFAULT_COMPILE_ARGS = ("-p", INPUT_PLACEHOLDER)
DEFAULT_PARSE_ARGS = ("-T", INPUT_PLACEHOLDER)
DEFAULT_VERSION_ARGS = ("-v",)


class CommandCompiler:
    """
    Implements ICompiler by running a compiler executable per call.

    The source is handed over through a temporary file whose path replaces
    ``{input}`` in the argument templates. Per-batch options go where
    ``{options}`` stands, or before the template when it has no such slot.
    Generated code is read from stdout, diagnostics from stderr.
    """

    def __init__(
        self,
        executable: str = "moonc",
        compile_args: Sequence[str] = DEFAULT_COMPILE_ARGS,
        parse_args: Sequence[str] = DEFAULT_PARSE_ARGS,
        version_args: Sequence[str] = DEFAULT_VERSION_ARGS,
        line_number_args: Sequence[str] = (),
        timeout_seconds: Optional[float] = None
    ):
        self.executable = executable
        self.compile_args = tuple(compile_args)
        self.parse_args = tuple(parse_args)
        self.version_args = tuple(version_args)
        self.line_number_args = tuple(line_number_args)
        self.timeout_seconds = timeout_seconds
        self._logger = get_logger(__name__)

    def is_available(self) -> bool:
        """Check if the executable can be found."""
        return shutil.which(self.executable) is not None

    def compile(self, source: str, config: CompilerConfig) -> Tuple[str, str]:
        """
        Compile source text.

        Args:
            source: Full MoonScript source
            config: Shared compiler options

        Returns:
            (generated_code, diagnostic); generated_code is empty on failure
        """
        options: List[str] = []
        if config.reserve_line_numbers:
            if not self.line_number_args:
                self._logger.debug("Line numbers requested but no line_number_args configured")
            options.extend(self.line_number_args)
        options.extend(config.extra_args)

        with self._source_file(source) as input_file:
            result = self._run(self._expand(self.compile_args, input_file, options))

        if result.returncode != 0:
            return "", self._diagnostic(result)
        if not result.stdout:
            return "", result.stderr.strip() or "compiler produced no output"
        return result.stdout, result.stderr.strip()

    def parse(self, source: str) -> str:
        """
        Run the parse phase only.

        Returns:
            Whatever the executable prints for the parse tree

        Raises:
            ParseError: If the executable rejects the source
        """
        with self._source_file(source) as input_file:
            result = self._run(self._expand(self.parse_args, input_file, []))

        if result.returncode != 0:
            raise ParseError(self._diagnostic(result))
        return result.stdout

    def version(self) -> str:
        """Get version reported by the executable."""
        result = self._run(list(self.version_args))
        if result.returncode != 0:
            raise CompileError(self._diagnostic(result))
        return result.stdout.strip()

    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        cmd = [self.executable] + args
        self._logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding='utf-8',
                timeout=self.timeout_seconds
            )
        except FileNotFoundError:
            raise CompilerNotAvailableError(f"Compiler executable not found: {self.executable}")
        except subprocess.TimeoutExpired:
            raise CompileError(f"{self.executable} timed out after {self.timeout_seconds}s")

    @staticmethod
    def _expand(template: Sequence[str], input_file: Path, options: List[str]) -> List[str]:
        args: List[str] = []
        if OPTIONS_PLACEHOLDER not in template:
            args.extend(options)
        for arg in template:
            if arg == OPTIONS_PLACEHOLDER:
                args.extend(options)
            else:
                args.append(arg.replace(INPUT_PLACEHOLDER, str(input_file)))
        return args

    @staticmethod
    def _diagnostic(result: subprocess.CompletedProcess) -> str:
        return (result.stderr or result.stdout or "").strip() or f"exit status {result.returncode}"

    @contextmanager
    def _source_file(self, source: str) -> Iterator[Path]:
        with tempfile.TemporaryDirectory(prefix="moonc_") as tmp:
            path = Path(tmp) / "input.moon"
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(source)
            yield path
