"""
Shared metrics configuration for the club site service.

Every collector owns its own CollectorRegistry, so several app instances can
live in one process (as they do under test) without duplicate registration.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Optional, Sequence

from prometheus_client import CollectorRegistry, Counter, Histogram, Info

# Content API latency is dominated by the remote CMS
CONTENT_QUERY_BUCKETS = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

# name -> (kind, help, labels)
SITE_METRICS: Dict[str, Any] = {
    "cache_hits_total": ("counter", "Cache hits", ("cache_type",)),
    "cache_misses_total": ("counter", "Cache misses", ("cache_type",)),
    "content_queries_total": ("counter", "Content API queries by outcome", ("status",)),
    "content_query_duration_seconds": ("histogram", "Content API query duration in seconds", ()),
    "revalidations_total": ("counter", "On-demand revalidations by content tag", ("tag",)),
    "contact_submissions_total": ("counter", "Contact form submissions by outcome", ("outcome",)),
}


class MetricsCollector:
    """Prometheus metrics for one service instance."""

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up HTTP and site metrics."""
        info = Info("service", "Service information", registry=self.registry)
        info.info({"service": self.service_name, "version": "1.0.0"})
        self._metrics["service_info"] = info

        self._metrics["http_requests_total"] = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "route", "status_code"],
            registry=self.registry
        )
        self._metrics["http_request_duration_seconds"] = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "route"],
            registry=self.registry
        )
        self._metrics["health_check_total"] = Counter(
            "health_check_total",
            "Total health check requests",
            ["status"],
            registry=self.registry
        )
        self._metrics["errors_total"] = Counter(
            "errors_total",
            "Errors returned to callers by error code",
            ["code"],
            registry=self.registry
        )

        for name, (kind, description, labels) in SITE_METRICS.items():
            self._metrics[name] = self._build(kind, name, description, labels)

    def _build(self, kind: str, name: str, description: str, labels: Sequence[str]):
        if kind == "histogram":
            return Histogram(name, description, list(labels), buckets=CONTENT_QUERY_BUCKETS, registry=self.registry)
        return Counter(name, description, list(labels), registry=self.registry)

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def record_http_request(self, method: str, route: str, status_code: int, duration: float):
        """Record one served request; route is the matched path template."""
        self._metrics["http_requests_total"].labels(
            method=method,
            route=route,
            status_code=str(status_code)
        ).inc()
        self._metrics["http_request_duration_seconds"].labels(method=method, route=route).observe(duration)

    def record_health_check(self, status: str):
        self._metrics["health_check_total"].labels(status=status).inc()

    def record_error(self, code: str):
        self._metrics["errors_total"].labels(code=code).inc()

    @contextmanager
    def time_operation(self, metric_name: str, **labels):
        """Observe the duration of the wrapped block on a histogram."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            metric = self._metrics.get(metric_name)
            if metric is not None:
                if labels:
                    metric = metric.labels(**labels)
                metric.observe(time.perf_counter() - start_time)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a labelled counter; unknown names are ignored."""
        metric = self._metrics.get(metric_name)
        if metric is not None:
            metric.labels(**labels).inc()


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)
