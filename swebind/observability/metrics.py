"""Prometheus metric definitions for native Swiss Ephemeris calls."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "NATIVE_CALL_DURATION",
    "NATIVE_ERRORS",
    "ensure_metrics_registered",
]


NATIVE_CALL_DURATION = Histogram(
    "swebind_native_call_duration_seconds",
    "Duration of calls into the Swiss Ephemeris library.",
    ("function",),
    registry=None,
)


NATIVE_ERRORS = Counter(
    "swebind_native_errors_total",
    "Count of failures reported by the Swiss Ephemeris library.",
    ("function", "error"),
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield NATIVE_CALL_DURATION
    yield NATIVE_ERRORS


def ensure_metrics_registered(
    registry: CollectorRegistry | None = None,
) -> None:
    """Register binding metrics with ``registry`` if not already present."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # Prometheus raises when a metric name already exists in the registry.
            continue
