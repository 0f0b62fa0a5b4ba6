"""Metrics collection for batch runs."""

import threading
import time
from typing import Dict, Any
from collections import defaultdict


class MetricsCollector:
    """
    Collects timings and counters across compile tasks.
    Implements IMetricsCollector protocol. Safe to share between worker threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._start_time = time.perf_counter()
        self._metrics: Dict[str, Any] = defaultdict(list)
        self._counters: Dict[str, int] = defaultdict(int)

    def record_metric(self, name: str, value: Any) -> None:
        """Record a metric value."""
        with self._lock:
            self._metrics[name].append(value)

    def increment_counter(self, name: str, amount: int = 1) -> None:
        """Increment a counter."""
        with self._lock:
            self._counters[name] += amount

    def get_counter(self, name: str) -> int:
        """Get counter value."""
        with self._lock:
            return self._counters.get(name, 0)

    def get_metric(self, name: str) -> list:
        """Get all values for a metric."""
        with self._lock:
            return list(self._metrics.get(name, []))

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all metrics.

        Returns:
            Dictionary with metric summaries
        """
        with self._lock:
            counters = dict(self._counters)
            metrics = {name: list(values) for name, values in self._metrics.items()}

        summary = {
            "total_elapsed": self.elapsed_time(),
            "counters": counters,
            "metrics": {}
        }

        for name, values in metrics.items():
            if values:
                if all(isinstance(v, (int, float)) for v in values):
                    summary["metrics"][name] = {
                        "count": len(values),
                        "sum": sum(values),
                        "avg": sum(values) / len(values),
                        "min": min(values),
                        "max": max(values),
                    }
                else:
                    summary["metrics"][name] = {
                        "count": len(values),
                        "values": values
                    }

        return summary

    def elapsed_time(self) -> float:
        """Get total elapsed time since initialization."""
        return time.perf_counter() - self._start_time

    def format_summary(self) -> str:
        """Format a human readable summary of metrics."""
        summary = self.get_summary()
        lines = ["=" * 60, "METRICS SUMMARY", "=" * 60]
        lines.append(f"Total Elapsed: {summary['total_elapsed']:.3f}s")

        if summary['counters']:
            lines.append("Counters:")
            for name, value in sorted(summary['counters'].items()):
                lines.append(f"  {name}: {value}")

        if summary['metrics']:
            lines.append("Metrics:")
            for name, data in summary['metrics'].items():
                if 'avg' in data:
                    lines.append(
                        f"  {name}: count={data['count']} avg={data['avg']:.3f} "
                        f"min={data['min']:.3f} max={data['max']:.3f}"
                    )

        lines.append("=" * 60)
        return "\n".join(lines)
