"""
Prometheus metrics for the CRPT access client.
"""

from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry
from typing import Dict, Any, Optional
import time
import threading
from contextlib import contextmanager


class ClientMetrics:
    """Metrics collector owned by one client instance.

    Each collector registers into its own ``CollectorRegistry`` unless one is
    passed in, so several clients in one process never clash on metric names.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up client metrics."""

        # HTTP metrics
        self._metrics["crpt_requests_total"] = Counter(
            "crpt_requests_total",
            "Total requests sent to the CRPT API",
            ["endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["crpt_request_duration_seconds"] = Histogram(
            "crpt_request_duration_seconds",
            "CRPT API request duration in seconds",
            ["endpoint"],
            registry=self.registry
        )

        # Business metrics
        self._metrics["crpt_submissions_total"] = Counter(
            "crpt_submissions_total",
            "Document submissions by outcome",
            ["outcome"],
            registry=self.registry
        )

        self._metrics["crpt_rate_limit_rejections_total"] = Counter(
            "crpt_rate_limit_rejections_total",
            "Submissions rejected because no permit was available",
            registry=self.registry
        )

        self._metrics["crpt_authentications_total"] = Counter(
            "crpt_authentications_total",
            "Certificate authentication attempts",
            ["status"],
            registry=self.registry
        )

        self._metrics["crpt_permits_available"] = Gauge(
            "crpt_permits_available",
            "Permits left in the current window",
            registry=self.registry
        )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def get_sample_value(self, name: str, **labels) -> Optional[float]:
        """Read the current value of a sample from the owned registry."""
        return self.registry.get_sample_value(name, labels)

    def _child(self, metric_name: str, labels: Dict[str, Any]):
        metric = self._metrics[metric_name]
        if labels:
            return metric.labels(**{key: str(value) for key, value in labels.items()})
        return metric

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        if metric_name in self._metrics:
            with self._lock:
                self._child(metric_name, labels).inc()

    def observe_histogram(self, metric_name: str, value: float, **labels):
        """Observe a histogram metric."""
        if metric_name in self._metrics:
            with self._lock:
                self._child(metric_name, labels).observe(value)

    @contextmanager
    def time_operation(self, operation_name: str, **labels):
        """Context manager to time an operation."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.observe_histogram(operation_name, time.perf_counter() - start_time, **labels)
