"""Batch orchestrator - coordinates pipeline, scheduler and aggregator."""

from typing import Optional

from moonc.domain.models import BatchRequest
from moonc.domain.protocols import (
    ICompiler, IConsole, ISourceReader, IOutputWriter, ILogger, IMetricsCollector
)
from moonc.application.aggregator import BatchResult, aggregate
from moonc.application.pipeline import CompilationPipeline
from moonc.application.scheduler import TaskScheduler


class BatchCompilationOrchestrator:
    """Main orchestrator - compiles every file of a request concurrently."""

    def __init__(
        self,
        compiler: ICompiler,
        console: IConsole,
        reader: ISourceReader,
        writer: IOutputWriter,
        logger: ILogger,
        metrics: IMetricsCollector,
        max_workers: Optional[int] = None
    ):
        self._compiler = compiler
        self._console = console
        self._reader = reader
        self._writer = writer
        self._logger = logger
        self._metrics = metrics
        self._scheduler = TaskScheduler(max_workers=max_workers, logger=logger)

    def run(self, request: BatchRequest) -> BatchResult:
        """Compile the batch and aggregate the outcomes."""
        mode = "timing" if request.dump_timing else ("write" if request.write_to_disk else "print")
        self._logger.info(f"Compiling {len(request.files)} file(s), mode={mode}")

        pipeline = CompilationPipeline(
            compiler=self._compiler,
            request=request,
            console=self._console,
            reader=self._reader,
            writer=self._writer,
            logger=self._logger,
            metrics=self._metrics,
        )
        outcomes = self._scheduler.run(request.files, pipeline.run)
        result = aggregate(outcomes)

        self._logger.info(f"Batch finished: exit={result.exit_code} counts={result.counts}")
        return result
