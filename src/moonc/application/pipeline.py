"""Per-file compilation pipeline: read, compile, time or write."""

import time
from typing import Optional

from moonc.domain.models import (
    BatchRequest, CompileOutcome, Compiled, CompiledToStdout, CompileFailed,
    ReadFailed, WriteFailed, TimingReport,
)
from moonc.domain.protocols import (
    ICompiler, IConsole, ISourceReader, IOutputWriter, ILogger, IMetricsCollector
)
from moonc.domain.exceptions import CompileError, ReadError, WriteError
from moonc.application.path_resolver import normalize_target_dir, resolve_output_path
from moonc.shared.logging import LoggerAdapter, get_logger


class CompilationPipeline:
    """
    Unit of work run once per input file.

    Every step short-circuits on failure. The resulting outcome is emitted to
    the console before it is returned, so each file reports independently of
    the rest of the batch.
    """

    def __init__(
        self,
        compiler: ICompiler,
        request: BatchRequest,
        console: IConsole,
        reader: ISourceReader,
        writer: IOutputWriter,
        logger: Optional[ILogger] = None,
        metrics: Optional[IMetricsCollector] = None
    ):
        self._compiler = compiler
        self._request = request
        self._config = request.config
        self._target_dir = normalize_target_dir(request.target_dir)
        self._console = console
        self._reader = reader
        self._writer = writer
        self._logger = logger or LoggerAdapter(get_logger(__name__))
        self._metrics = metrics

    def run(self, input_path: str) -> CompileOutcome:
        """Compile one file and report the outcome."""
        try:
            outcome = self._run(input_path)
        except Exception as e:
            self._logger.exception(f"Unexpected failure while compiling {input_path}: {e}")
            outcome = CompileFailed(input_path, diagnostic=str(e))

        if self._metrics is not None:
            self._metrics.increment_counter(outcome.kind)
        self._console.emit(outcome.render())
        return outcome

    def _run(self, input_path: str) -> CompileOutcome:
        # 1. Read
        try:
            source = self._reader.read(input_path)
        except ReadError as e:
            self._logger.debug(str(e))
            return ReadFailed(input_path)

        # 2. Compile
        started = time.perf_counter()
        try:
            code, diagnostic = self._compiler.compile(source, self._config)
        except CompileError as e:
            code, diagnostic = "", e.diagnostic
        total_ms = (time.perf_counter() - started) * 1000
        if self._metrics is not None:
            self._metrics.record_metric('compile_duration', total_ms / 1000)

        if not code:
            self._logger.debug(f"{input_path}: compiler returned no output")
            return CompileFailed(input_path, diagnostic=diagnostic)

        # 3. Timing dump never writes
        if self._request.dump_timing:
            return self._time_parse(input_path, source, total_ms)

        # 4. Output
        if not self._request.write_to_disk:
            return CompiledToStdout(input_path, text=code)

        output_path = resolve_output_path(
            input_path, self._request.explicit_output_file, self._target_dir
        )
        try:
            written = self._writer.write(output_path, code)
        except WriteError as e:
            self._logger.debug(str(e))
            return WriteFailed(input_path, output_path=output_path)

        self._logger.debug(f"{input_path} -> {output_path} ({written} bytes)")
        return Compiled(input_path, output_path=output_path, bytes_written=written)

    def _time_parse(self, input_path: str, source: str, total_ms: float) -> CompileOutcome:
        started = time.perf_counter()
        try:
            self._compiler.parse(source)
        except CompileError as e:
            return CompileFailed(input_path, diagnostic=e.diagnostic)
        parse_ms = (time.perf_counter() - started) * 1000

        return TimingReport(
            input_path,
            parse_ms=parse_ms,
            compile_ms=total_ms - parse_ms,
        )
