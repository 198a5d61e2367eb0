"""Searches for the next time the Sun, Moon or a planet crosses a longitude."""

from __future__ import annotations

from ._marshal import scalar
from ._native import native_function
from .context import SweContext, using
from .errors import SweNativeError
from .observability.metrics import NATIVE_ERRORS
from .results import MoonNodeCrossing

__all__ = [
    "swe_helio_cross_ut",
    "swe_mooncross",
    "swe_mooncross_node_ut",
    "swe_mooncross_ut",
    "swe_solcross",
    "swe_solcross_ut",
]


def _in_band(name: str, crossing: float, tjd: float) -> float:
    """Reject a crossing time earlier than the search start.

    The native search reports failure by returning such a time instead of a
    negative status.
    """

    if crossing < tjd:
        label = native_function(name)
        NATIVE_ERRORS.labels(function=label, error="in_band").inc()
        raise SweNativeError(
            f"{label}: crossing time {crossing!r} precedes search start {tjd!r}",
            function=label,
        )
    return crossing


def _cross(name: str, x2cross: float, tjd: float, iflag: int, context: SweContext | None) -> float:
    start = float(tjd)
    crossing = scalar(using(context).call(name, float(x2cross), start, int(iflag)))
    return _in_band(name, crossing, start)


def swe_solcross_ut(
    x2cross: float, tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> float:
    """Next time after ``tjd_ut`` the Sun reaches ecliptic longitude ``x2cross``."""

    return _cross("solcross_ut", x2cross, tjd_ut, iflag, context)


def swe_solcross(
    x2cross: float, tjd_et: float, iflag: int, *, context: SweContext | None = None
) -> float:
    return _cross("solcross", x2cross, tjd_et, iflag, context)


def swe_mooncross_ut(
    x2cross: float, tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> float:
    """Next time after ``tjd_ut`` the Moon reaches ecliptic longitude ``x2cross``."""

    return _cross("mooncross_ut", x2cross, tjd_ut, iflag, context)


def swe_mooncross(
    x2cross: float, tjd_et: float, iflag: int, *, context: SweContext | None = None
) -> float:
    return _cross("mooncross", x2cross, tjd_et, iflag, context)


def swe_mooncross_node_ut(
    tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> MoonNodeCrossing:
    """Next passage of the Moon through one of its nodes."""

    start = float(tjd_ut)
    jd, lon, lat = using(context).call("mooncross_node_ut", start, int(iflag))[:3]
    return MoonNodeCrossing(_in_band("mooncross_node_ut", float(jd), start), float(lon), float(lat))


def swe_helio_cross_ut(
    body: int,
    x2cross: float,
    tjd_ut: float,
    iflag: int,
    direction: int,
    *,
    context: SweContext | None = None,
) -> float:
    """Next heliocentric crossing of ``x2cross`` by ``body``.

    A negative ``direction`` searches backwards in time.
    """

    return scalar(
        using(context).call(
            "helio_cross_ut",
            int(body),
            float(x2cross),
            float(tjd_ut),
            int(iflag),
            int(direction) < 0,
        )
    )
