"""Angle normalisation and coordinate transforms."""

from __future__ import annotations

from ._marshal import fixed_floats, geopos
from ._native import invoke
from .context import SweContext, using
from .results import REFRAC_DRET_SIZE, HorizontalPosition, RefractionResult, SplitDegree

__all__ = [
    "swe_azalt",
    "swe_azalt_rev",
    "swe_cotrans",
    "swe_cotrans_sp",
    "swe_deg_midp",
    "swe_degnorm",
    "swe_difdeg2n",
    "swe_difrad2n",
    "swe_rad_midp",
    "swe_radnorm",
    "swe_refrac",
    "swe_refrac_extended",
    "swe_split_deg",
]


def swe_degnorm(x: float) -> float:
    """Normalise ``x`` into ``[0, 360)``."""

    return float(invoke("degnorm", float(x)))


def swe_radnorm(x: float) -> float:
    return float(invoke("radnorm", float(x)))


def swe_deg_midp(x1: float, x0: float) -> float:
    return float(invoke("deg_midp", float(x1), float(x0)))


def swe_rad_midp(x1: float, x0: float) -> float:
    return float(invoke("rad_midp", float(x1), float(x0)))


def swe_difdeg2n(p1: float, p2: float) -> float:
    """Signed distance ``p1 - p2`` in degrees, normalised to ``[-180, 180)``."""

    return float(invoke("difdeg2n", float(p1), float(p2)))


def swe_difrad2n(p1: float, p2: float) -> float:
    return float(invoke("difrad2n", float(p1), float(p2)))


def swe_split_deg(ddeg: float, roundflag: int) -> SplitDegree:
    """Split decimal degrees into degrees, minutes, seconds, fraction and sign.

    ``roundflag`` combines the ``SE_SPLIT_DEG_*`` bits; with ``SE_SPLIT_DEG_ZODIACAL``
    the sign field holds the zodiac sign index instead of ``+1``/``-1``.
    """

    deg, minutes, seconds, fraction, sign = invoke("split_deg", float(ddeg), int(roundflag))
    return SplitDegree(int(deg), int(minutes), int(seconds), float(fraction), int(sign))


def swe_cotrans(eps: float, lon: float, lat: float, dist: float = 1.0) -> tuple[float, ...]:
    """Rotate an ecliptic/equatorial triple by ``eps`` degrees.

    A positive ``eps`` converts equatorial to ecliptic, a negative one the
    reverse. ``dist`` passes through unchanged.
    """

    result = invoke("cotrans", (float(lon), float(lat), float(dist)), float(eps))
    return fixed_floats(result, 3)


def swe_cotrans_sp(
    eps: float,
    lon: float,
    lat: float,
    dist: float,
    lon_speed: float,
    lat_speed: float,
    dist_speed: float,
) -> tuple[float, ...]:
    """:func:`swe_cotrans` for a position and its daily motion."""

    coord = (
        float(lon),
        float(lat),
        float(dist),
        float(lon_speed),
        float(lat_speed),
        float(dist_speed),
    )
    return fixed_floats(invoke("cotrans_sp", coord, float(eps)), 6)


def swe_azalt(
    tjd_ut: float,
    calc_flag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    atpress: float,
    attemp: float,
    x1: float,
    x2: float,
    x3: float,
    *,
    context: SweContext | None = None,
) -> HorizontalPosition:
    """Horizontal coordinates of an ecliptic (``SE_ECL2HOR``) or equatorial
    (``SE_EQU2HOR``) position ``(x1, x2, x3)``.

    ``atpress`` of 0 lets the native library estimate pressure from ``geoalt``.
    """

    result = using(context).call(
        "azalt",
        float(tjd_ut),
        int(calc_flag),
        geopos(geolon, geolat, geoalt),
        float(atpress),
        float(attemp),
        (float(x1), float(x2), float(x3)),
    )
    azimuth, true_alt, app_alt = fixed_floats(result, 3)
    return HorizontalPosition(azimuth, true_alt, app_alt)


def swe_azalt_rev(
    tjd_ut: float,
    calc_flag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    azimuth: float,
    altitude: float,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Inverse of :func:`swe_azalt` from azimuth and true altitude."""

    result = using(context).call(
        "azalt_rev",
        float(tjd_ut),
        int(calc_flag),
        geopos(geolon, geolat, geoalt),
        (float(azimuth), float(altitude)),
    )
    return fixed_floats(result, 2)


def swe_refrac(inalt: float, atpress: float, attemp: float, calc_flag: int) -> float:
    return float(invoke("refrac", float(inalt), float(atpress), float(attemp), int(calc_flag)))


def swe_refrac_extended(
    inalt: float,
    geoalt: float,
    atpress: float,
    attemp: float,
    lapse_rate: float,
    calc_flag: int,
) -> RefractionResult:
    """Refraction for an observer above sea level.

    ``details`` holds true altitude, apparent altitude, refraction and dip of
    the horizon.
    """

    altitude, dret = invoke(
        "refrac_extended",
        float(inalt),
        float(geoalt),
        float(atpress),
        float(attemp),
        float(lapse_rate),
        int(calc_flag),
    )
    return RefractionResult(float(altitude), fixed_floats(dret, REFRAC_DRET_SIZE))
