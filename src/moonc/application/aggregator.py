"""Folding of per-file outcomes into one process exit status."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from moonc.domain.models import CompileOutcome

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def exit_code_for(outcomes: Iterable[CompileOutcome]) -> int:
    """0 when every outcome succeeded, 1 as soon as any one failed."""
    failed = any(not outcome.success for outcome in outcomes)
    return EXIT_FAILURE if failed else EXIT_SUCCESS


@dataclass
class BatchResult:
    """Aggregated result of a whole batch."""

    outcomes: List[CompileOutcome] = field(default_factory=list)
    exit_code: int = EXIT_SUCCESS
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.exit_code == EXIT_SUCCESS

    @property
    def failures(self) -> List[CompileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]


def aggregate(outcomes: Iterable[CompileOutcome]) -> BatchResult:
    outcomes = list(outcomes)
    return BatchResult(
        outcomes=outcomes,
        exit_code=exit_code_for(outcomes),
        counts=dict(Counter(outcome.kind for outcome in outcomes)),
    )
