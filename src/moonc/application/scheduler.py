"""Concurrent execution of one compile task per input file."""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Sequence

from moonc.domain.models import CompileOutcome, CompileFailed
from moonc.domain.protocols import ILogger
from moonc.shared.logging import LoggerAdapter, get_logger


class TaskScheduler:
    """
    Runs a task for every file on a bounded thread pool.

    Tasks are independent: a failing task never cancels its siblings and the
    scheduler always waits for all of them. Outcomes come back in input order
    whatever order the tasks finish in.
    """

    def __init__(self, max_workers: Optional[int] = None, logger: Optional[ILogger] = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._max_workers = max_workers
        self._logger = logger or LoggerAdapter(get_logger(__name__))

    def worker_count(self, task_count: int) -> int:
        """Number of threads used for task_count tasks."""
        limit = self._max_workers or os.cpu_count() or 1
        return max(1, min(task_count, limit))

    def run(
        self,
        files: Sequence[str],
        task: Callable[[str], CompileOutcome]
    ) -> List[CompileOutcome]:
        """
        Run task once per file and collect every outcome.

        Args:
            files: Input paths, in command line order
            task: Callable compiling a single file

        Returns:
            Outcomes aligned with files
        """
        if not files:
            return []

        workers = self.worker_count(len(files))
        self._logger.debug(f"Scheduling {len(files)} task(s) on {workers} worker(s)")

        outcomes: List[Optional[CompileOutcome]] = [None] * len(files)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='moonc') as executor:
            futures = {executor.submit(task, path): index for index, path in enumerate(files)}
            for future in as_completed(futures):
                index = futures[future]
                try:
                    outcomes[index] = future.result()
                except Exception as e:
                    self._logger.exception(f"Task for {files[index]} raised: {e}")
                    outcomes[index] = CompileFailed(files[index], diagnostic=str(e))

        return outcomes
