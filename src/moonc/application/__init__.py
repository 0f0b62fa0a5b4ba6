"""Application layer package."""

from moonc.application.aggregator import BatchResult, aggregate, exit_code_for
from moonc.application.factories import CompilerFactory
from moonc.application.orchestrator import BatchCompilationOrchestrator
from moonc.application.path_resolver import normalize_target_dir, resolve_output_path
from moonc.application.pipeline import CompilationPipeline
from moonc.application.scheduler import TaskScheduler

__all__ = [
    "BatchResult",
    "aggregate",
    "exit_code_for",
    "CompilerFactory",
    "BatchCompilationOrchestrator",
    "normalize_target_dir",
    "resolve_output_path",
    "CompilationPipeline",
    "TaskScheduler",
]
