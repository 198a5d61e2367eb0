"""Fixed-shape result types returned by the binding.

Each type mirrors a native output buffer. Grouped native outputs (cusps and
angles, eclipse times and attributes) stay grouped.
"""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "ASCMC_SIZE",
    "CUSPS_SIZE",
    "ECLIPSE_ATTR_SIZE",
    "ECLIPSE_GEOPOS_SIZE",
    "ECLIPSE_TIMES_SIZE",
    "GAUQUELIN_CUSPS_SIZE",
    "HELIACAL_PHENO_SIZE",
    "HELIACAL_SIZE",
    "ORBITAL_ELEMENTS_SIZE",
    "PHENO_SIZE",
    "POSITION_SIZE",
    "REFRAC_DRET_SIZE",
    "VIS_LIMIT_SIZE",
    "CalendarDate",
    "DeltaT",
    "EclipseEvent",
    "EclipseWhere",
    "HorizontalPosition",
    "HouseCusps",
    "HouseCuspsWithSpeed",
    "JulianDayPair",
    "MoonNodeCrossing",
    "NodesApsides",
    "RefractionResult",
    "SplitDegree",
    "UtcDateTime",
    "VisibilityLimit",
]

POSITION_SIZE = 6
CUSPS_SIZE = 13
GAUQUELIN_CUSPS_SIZE = 37
ASCMC_SIZE = 10
ECLIPSE_TIMES_SIZE = 10
ECLIPSE_ATTR_SIZE = 20
ECLIPSE_GEOPOS_SIZE = 10
PHENO_SIZE = 20
ORBITAL_ELEMENTS_SIZE = 50
HELIACAL_SIZE = 3
HELIACAL_PHENO_SIZE = 50
VIS_LIMIT_SIZE = 10
REFRAC_DRET_SIZE = 4


class CalendarDate(NamedTuple):
    year: int
    month: int
    day: int
    hour: float


class UtcDateTime(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


class JulianDayPair(NamedTuple):
    """Julian day in Ephemeris Time and in Universal Time for one instant."""

    et: float
    ut: float


class DeltaT(NamedTuple):
    """Delta-T in days plus the advisory text the native library produced."""

    value: float
    warning: str


class SplitDegree(NamedTuple):
    degrees: int
    minutes: int
    seconds: int
    fraction: float
    sign: int


class HouseCusps(NamedTuple):
    """House cusps (index 0 unused, as in the native buffer) and angles."""

    cusps: tuple[float, ...]
    ascmc: tuple[float, ...]


class HouseCuspsWithSpeed(NamedTuple):
    cusps: tuple[float, ...]
    ascmc: tuple[float, ...]
    cusp_speeds: tuple[float, ...]
    ascmc_speeds: tuple[float, ...]


class NodesApsides(NamedTuple):
    ascending: tuple[float, ...]
    descending: tuple[float, ...]
    perihelion: tuple[float, ...]
    aphelion: tuple[float, ...]


class HorizontalPosition(NamedTuple):
    azimuth: float
    true_altitude: float
    apparent_altitude: float


class RefractionResult(NamedTuple):
    altitude: float
    details: tuple[float, ...]


class EclipseEvent(NamedTuple):
    eclipse_type: int
    times: tuple[float, ...]
    attributes: tuple[float, ...]


class EclipseWhere(NamedTuple):
    eclipse_type: int
    geopos: tuple[float, ...]
    attributes: tuple[float, ...]


class VisibilityLimit(NamedTuple):
    """Native status (-2 when the object is below the horizon) and magnitudes."""

    status: int
    values: tuple[float, ...]


class MoonNodeCrossing(NamedTuple):
    julian_day: float
    longitude: float
    latitude: float
