"""Conversions between Python values and native argument/result shapes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .errors import SweArgumentError

__all__ = [
    "AS_MAXCH",
    "fixed_floats",
    "geopos",
    "house_code",
    "scalar",
    "split_status",
    "structured",
]

AS_MAXCH = 256
"""Capacity of the native error-string buffer."""


def fixed_floats(values: Sequence[Any] | None, size: int) -> tuple[float, ...]:
    """Return exactly ``size`` floats, zero-filling slots the native call left unset."""

    items = [float(v) for v in (values or ())[:size]]
    if len(items) < size:
        items.extend(0.0 for _ in range(size - len(items)))
    return tuple(items)


def scalar(value: Any) -> float:
    """Return the leading float of a native result that may be wrapped in a tuple."""

    if isinstance(value, (tuple, list)):
        return float(value[0])
    return float(value)


def split_status(result: Sequence[Any]) -> tuple[Sequence[Any], int]:
    """Separate ``(values, ..., retflag)`` results from bare value tuples.

    Returns the value group and the trailing native return flag (``0`` when the
    carrier returned the values alone).
    """

    if result and isinstance(result[0], (tuple, list)):
        tail = result[-1] if len(result) > 1 else 0
        retflag = tail if isinstance(tail, int) and not isinstance(tail, bool) else 0
        return result[0], retflag
    return result, 0


def geopos(geolon: float, geolat: float, geoalt: float) -> tuple[float, float, float]:
    return (float(geolon), float(geolat), float(geoalt))


def house_code(hsys: str | bytes, *, function: str) -> bytes:
    """Return the single-byte house system code the native library expects."""

    if isinstance(hsys, (bytes, bytearray)):
        raw = bytes(hsys[:1])
    elif isinstance(hsys, str):
        try:
            raw = hsys[:1].encode("ascii", errors="strict")
        except UnicodeEncodeError as exc:
            raise SweArgumentError(
                f"house system code must be ASCII, got {hsys[:1]!r}", function=function
            ) from exc
    else:
        raise SweArgumentError(
            f"house system must be a one-character str or bytes, got {type(hsys).__name__}",
            function=function,
        )
    if not raw:
        raise SweArgumentError("house system code must not be empty", function=function)
    return raw


def structured(
    values: Sequence[float],
    size: int,
    *,
    label: str,
    function: str,
) -> tuple[float, ...]:
    """Copy the first ``size`` elements of a structured-array argument.

    Raises :class:`SweArgumentError` when fewer than ``size`` values are given.
    """

    try:
        count = len(values)
    except TypeError as exc:
        raise SweArgumentError(
            f"{label} must be a sequence of {size} numbers", function=function
        ) from exc
    if count < size:
        raise SweArgumentError(
            f"{label} requires {size} values, got {count}", function=function
        )
    return tuple(float(values[i]) for i in range(size))
