"""Observability hooks for the binding layer."""

from __future__ import annotations

from .metrics import NATIVE_CALL_DURATION, NATIVE_ERRORS, ensure_metrics_registered

__all__ = [
    "NATIVE_CALL_DURATION",
    "NATIVE_ERRORS",
    "ensure_metrics_registered",
]
