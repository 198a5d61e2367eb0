"""Exception taxonomy raised by the Swiss Ephemeris binding."""

from __future__ import annotations

__all__ = [
    "SweArgumentError",
    "SweError",
    "SweNativeError",
    "SweUnavailableError",
]


class SweError(RuntimeError):
    """Base class for every error raised by :mod:`swebind`."""


class SweArgumentError(SweError, ValueError):
    """Argument shape rejected before reaching the native library."""

    def __init__(self, message: str, *, function: str | None = None) -> None:
        super().__init__(message)
        self.function = function


class SweNativeError(SweError):
    """Failure reported by the Swiss Ephemeris library.

    ``str(exc)`` is the native error string, unmodified, so it can be matched
    against the upstream documentation.
    """

    def __init__(
        self,
        message: str,
        *,
        function: str,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.function = function
        self.code = code


class SweUnavailableError(SweError):
    """The native carrier module is missing or lacks a function."""
