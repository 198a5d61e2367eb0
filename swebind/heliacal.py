"""Heliacal risings and settings and limiting visual magnitude.

``atmo`` is ``(pressure_hpa, temperature_c, relative_humidity, extinction)``;
zeros let the native library substitute defaults. ``observer`` is ``(age,
snellen_ratio, binocular, magnification, aperture_mm, transmission)``; the
last four only matter with ``SE_HELFLAG_OPTICAL_PARAMS``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ._marshal import fixed_floats, geopos, structured
from ._native import check_status, invoke
from .context import SweContext, using
from .results import HELIACAL_PHENO_SIZE, HELIACAL_SIZE, VIS_LIMIT_SIZE, VisibilityLimit
from .targets import Body, TargetLike, as_target

__all__ = [
    "ATMO_SIZE",
    "OBSERVER_SIZE",
    "swe_heliacal_pheno_ut",
    "swe_heliacal_ut",
    "swe_vis_limit_mag",
]

ATMO_SIZE = 4
OBSERVER_SIZE = 6


def _object_name(target: TargetLike, function: str) -> str:
    selected = as_target(target, function=function)
    if isinstance(selected, Body):
        return str(invoke("get_planet_name", int(selected.ipl)))
    return selected.name


def _conditions(
    atmo: Sequence[float], observer: Sequence[float], function: str
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    return (
        structured(atmo, ATMO_SIZE, label="atmo", function=function),
        structured(observer, OBSERVER_SIZE, label="observer", function=function),
    )


def swe_heliacal_ut(
    tjd_start: float,
    geolon: float,
    geolat: float,
    geoalt: float,
    atmo: Sequence[float],
    observer: Sequence[float],
    target: TargetLike,
    event_type: int,
    helflag: int,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Next heliacal event after ``tjd_start``.

    Returns start of visibility, optimum visibility and end of visibility.
    """

    atmo_values, observer_values = _conditions(atmo, observer, "swe_heliacal_ut")
    objname = _object_name(target, "swe_heliacal_ut")
    result = using(context).call(
        "heliacal_ut",
        float(tjd_start),
        geopos(geolon, geolat, geoalt),
        atmo_values,
        observer_values,
        objname,
        int(event_type),
        int(helflag),
    )
    return fixed_floats(result, HELIACAL_SIZE)


def swe_heliacal_pheno_ut(
    tjd_ut: float,
    geolon: float,
    geolat: float,
    geoalt: float,
    atmo: Sequence[float],
    observer: Sequence[float],
    target: TargetLike,
    event_type: int,
    helflag: int,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Detailed visibility circumstances of a heliacal event (50 slots)."""

    atmo_values, observer_values = _conditions(atmo, observer, "swe_heliacal_pheno_ut")
    objname = _object_name(target, "swe_heliacal_pheno_ut")
    result = using(context).call(
        "heliacal_pheno_ut",
        float(tjd_ut),
        geopos(geolon, geolat, geoalt),
        atmo_values,
        observer_values,
        objname,
        int(event_type),
        int(helflag),
    )
    return fixed_floats(result, HELIACAL_PHENO_SIZE)


def swe_vis_limit_mag(
    tjd_ut: float,
    geolon: float,
    geolat: float,
    geoalt: float,
    atmo: Sequence[float],
    observer: Sequence[float],
    target: TargetLike,
    helflag: int,
    *,
    context: SweContext | None = None,
) -> VisibilityLimit:
    """Limiting visual magnitude for seeing the target.

    ``values[0]`` is the limiting magnitude. A ``status`` of ``-2`` means the
    object is below the horizon; other negative codes raise.
    """

    atmo_values, observer_values = _conditions(atmo, observer, "swe_vis_limit_mag")
    objname = _object_name(target, "swe_vis_limit_mag")
    status, dret = using(context).call(
        "vis_limit_mag",
        float(tjd_ut),
        geopos(geolon, geolat, geoalt),
        atmo_values,
        observer_values,
        objname,
        int(helflag),
    )[:2]
    code = int(status)
    if code != -2:
        check_status(code, "vis_limit_mag")
    return VisibilityLimit(code, fixed_floats(dret, VIS_LIMIT_SIZE))
