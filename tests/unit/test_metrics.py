"""Test metrics collector."""

import threading

from moonc.shared.metrics import MetricsCollector


def test_metrics_counter():
    """Test counter functionality."""
    metrics = MetricsCollector()

    metrics.increment_counter('compiled')
    metrics.increment_counter('compiled')
    metrics.increment_counter('compiled', amount=3)

    assert metrics.get_counter('compiled') == 5


def test_counter_is_thread_safe():
    metrics = MetricsCollector()

    def bump():
        for _ in range(1000):
            metrics.increment_counter('n')

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert metrics.get_counter('n') == 8000


def test_metrics_summary():
    """Test summary generation."""
    metrics = MetricsCollector()

    metrics.record_metric('compile_duration', 0.5)
    metrics.record_metric('compile_duration', 1.0)
    metrics.record_metric('compile_duration', 1.5)

    summary = metrics.get_summary()

    assert summary['metrics']['compile_duration']['count'] == 3
    assert summary['metrics']['compile_duration']['avg'] == 1.0
    assert "compile_duration: count=3" in metrics.format_summary()
