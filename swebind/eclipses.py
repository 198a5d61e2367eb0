"""Solar and lunar eclipse and lunar occultation searches.

Searches return the native eclipse-type bitmask first. Global searches and
``*_how`` calls produce one output group, returned flat after the type;
calls with several groups return :class:`~swebind.results.EclipseEvent` or
:class:`~swebind.results.EclipseWhere`.
"""

from __future__ import annotations

from ._marshal import fixed_floats, geopos
from ._native import check_status
from .context import SweContext, using
from .results import (
    ECLIPSE_ATTR_SIZE,
    ECLIPSE_GEOPOS_SIZE,
    ECLIPSE_TIMES_SIZE,
    EclipseEvent,
    EclipseWhere,
)
from .targets import TargetLike, as_target, carrier_argument

__all__ = [
    "swe_lun_eclipse_how",
    "swe_lun_eclipse_when",
    "swe_lun_eclipse_when_loc",
    "swe_lun_occult_when_glob",
    "swe_lun_occult_when_loc",
    "swe_lun_occult_where",
    "swe_sol_eclipse_how",
    "swe_sol_eclipse_when_glob",
    "swe_sol_eclipse_when_loc",
    "swe_sol_eclipse_where",
]


def _flat(name: str, result, size: int) -> tuple[float, ...]:
    retflag, values = result[0], result[1]
    code = check_status(retflag, name)
    return (code, *fixed_floats(values, size))


def _event(name: str, result) -> EclipseEvent:
    retflag, tret, attr = result[0], result[1], result[2]
    code = check_status(retflag, name)
    return EclipseEvent(
        code,
        fixed_floats(tret, ECLIPSE_TIMES_SIZE),
        fixed_floats(attr, ECLIPSE_ATTR_SIZE),
    )


def _where(name: str, result) -> EclipseWhere:
    retflag, geo, attr = result[0], result[1], result[2]
    code = check_status(retflag, name)
    return EclipseWhere(
        code,
        fixed_floats(geo, ECLIPSE_GEOPOS_SIZE),
        fixed_floats(attr, ECLIPSE_ATTR_SIZE),
    )


def swe_sol_eclipse_when_glob(
    tjd_start: float,
    iflag: int,
    ifltype: int,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Next solar eclipse anywhere on Earth.

    Returns ``(eclipse_type, t_max, t_first_contact, ...)``: the type followed
    by the ten native time slots. ``ifltype`` of 0 matches any type.
    """

    result = using(context).call(
        "sol_eclipse_when_glob", float(tjd_start), int(iflag), int(ifltype), bool(backward)
    )
    return _flat("sol_eclipse_when_glob", result, ECLIPSE_TIMES_SIZE)


def swe_sol_eclipse_when_loc(
    tjd_start: float,
    iflag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> EclipseEvent:
    """Next solar eclipse visible from the given place."""

    result = using(context).call(
        "sol_eclipse_when_loc",
        float(tjd_start),
        geopos(geolon, geolat, geoalt),
        int(iflag),
        bool(backward),
    )
    return _event("sol_eclipse_when_loc", result)


def swe_sol_eclipse_how(
    tjd_ut: float,
    iflag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Eclipse type and the twenty attribute slots for a place and time."""

    result = using(context).call(
        "sol_eclipse_how", float(tjd_ut), geopos(geolon, geolat, geoalt), int(iflag)
    )
    return _flat("sol_eclipse_how", result, ECLIPSE_ATTR_SIZE)


def swe_sol_eclipse_where(
    tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> EclipseWhere:
    """Geographic position of the central line (or maximum) at ``tjd_ut``."""

    result = using(context).call("sol_eclipse_where", float(tjd_ut), int(iflag))
    return _where("sol_eclipse_where", result)


def swe_lun_eclipse_when(
    tjd_start: float,
    iflag: int,
    ifltype: int,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    result = using(context).call(
        "lun_eclipse_when", float(tjd_start), int(iflag), int(ifltype), bool(backward)
    )
    return _flat("lun_eclipse_when", result, ECLIPSE_TIMES_SIZE)


def swe_lun_eclipse_when_loc(
    tjd_start: float,
    iflag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> EclipseEvent:
    result = using(context).call(
        "lun_eclipse_when_loc",
        float(tjd_start),
        geopos(geolon, geolat, geoalt),
        int(iflag),
        bool(backward),
    )
    return _event("lun_eclipse_when_loc", result)


def swe_lun_eclipse_how(
    tjd_ut: float,
    iflag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    result = using(context).call(
        "lun_eclipse_how", float(tjd_ut), geopos(geolon, geolat, geoalt), int(iflag)
    )
    return _flat("lun_eclipse_how", result, ECLIPSE_ATTR_SIZE)


def swe_lun_occult_when_glob(
    tjd_start: float,
    target: TargetLike,
    iflag: int,
    ifltype: int,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Next occultation of a planet or star by the Moon anywhere on Earth."""

    selected = as_target(target, function="swe_lun_occult_when_glob")
    result = using(context).call(
        "lun_occult_when_glob",
        float(tjd_start),
        carrier_argument(selected),
        int(iflag),
        int(ifltype),
        bool(backward),
    )
    return _flat("lun_occult_when_glob", result, ECLIPSE_TIMES_SIZE)


def swe_lun_occult_when_loc(
    tjd_start: float,
    target: TargetLike,
    iflag: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    backward: bool,
    *,
    context: SweContext | None = None,
) -> EclipseEvent:
    selected = as_target(target, function="swe_lun_occult_when_loc")
    result = using(context).call(
        "lun_occult_when_loc",
        float(tjd_start),
        carrier_argument(selected),
        geopos(geolon, geolat, geoalt),
        int(iflag),
        bool(backward),
    )
    return _event("lun_occult_when_loc", result)


def swe_lun_occult_where(
    tjd_ut: float,
    target: TargetLike,
    iflag: int,
    *,
    context: SweContext | None = None,
) -> EclipseWhere:
    selected = as_target(target, function="swe_lun_occult_where")
    result = using(context).call(
        "lun_occult_where", float(tjd_ut), carrier_argument(selected), int(iflag)
    )
    return _where("lun_occult_where", result)
