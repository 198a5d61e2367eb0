"""Lazy access to the Swiss Ephemeris native module and guarded invocation."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from time import perf_counter
from typing import Any

from .errors import SweNativeError, SweUnavailableError
from .observability.metrics import NATIVE_CALL_DURATION, NATIVE_ERRORS

__all__ = ["swe", "reset_swe", "has_swe", "invoke", "check_status", "native_function"]

LOG = logging.getLogger(__name__)

_swe_mod: Any | None = None


def _load_swe() -> Any:
    global _swe_mod
    if _swe_mod is None:
        try:
            _swe_mod = importlib.import_module("swisseph")
        except Exception as exc:  # pragma: no cover - import errors depend on env
            raise SweUnavailableError(
                "Swiss Ephemeris not available. Install pyswisseph (package: 'pyswisseph') "
                "and set SE_EPHE_PATH to your ephemeris data directory."
            ) from exc
    return _swe_mod


class _SweProxy:
    """Proxy object exposing Swiss Ephemeris attributes lazily."""

    def __call__(self) -> Any:
        return _load_swe()

    def __getattr__(self, item: str) -> Any:
        return getattr(_load_swe(), item)


swe = _SweProxy()


def reset_swe() -> None:
    """For tests: force reload of swisseph on next swe() call."""
    global _swe_mod
    _swe_mod = None


def has_swe() -> bool:
    """Return ``True`` if pyswisseph is importable."""

    if _swe_mod is not None:
        return True
    return importlib.util.find_spec("swisseph") is not None


def native_function(name: str) -> str:
    """Return the C-level name used in messages and metric labels."""

    return name if name.startswith("swe_") else f"swe_{name}"


def invoke(name: str, *args: Any) -> Any:
    """Call ``swisseph.<name>(*args)`` translating native failures.

    The native error string carried by the module's ``Error`` exception becomes
    the message of :class:`SweNativeError` unchanged.
    """

    module = swe()
    label = native_function(name)
    try:
        fn = getattr(module, name)
    except AttributeError as exc:
        raise SweUnavailableError(
            f"{label} is not provided by the installed Swiss Ephemeris build"
        ) from exc

    native_error = getattr(module, "Error", None)
    LOG.debug("native call %s%r", label, args)
    start = perf_counter()
    try:
        return fn(*args)
    except Exception as exc:
        if native_error is None or not isinstance(exc, native_error):
            raise
        message = str(exc)
        NATIVE_ERRORS.labels(function=label, error="native").inc()
        LOG.debug("native call %s failed: %s", label, message)
        raise SweNativeError(message, function=label) from exc
    finally:
        NATIVE_CALL_DURATION.labels(function=label).observe(perf_counter() - start)


def check_status(retflag: int, name: str, serr: str = "") -> int:
    """Raise :class:`SweNativeError` when ``retflag`` is a native error code."""

    code = int(retflag)
    if code < 0:
        label = native_function(name)
        message = serr or f"{label} returned error code {code}"
        NATIVE_ERRORS.labels(function=label, error="status").inc()
        raise SweNativeError(message, function=label, code=code)
    return code
