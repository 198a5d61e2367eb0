"""House cusps, angles and house positions."""

from __future__ import annotations

from collections.abc import Sequence

from ._marshal import fixed_floats, house_code
from .context import SweContext, using
from .results import (
    ASCMC_SIZE,
    CUSPS_SIZE,
    GAUQUELIN_CUSPS_SIZE,
    HouseCusps,
    HouseCuspsWithSpeed,
)

__all__ = [
    "cusp_count",
    "swe_house_pos",
    "swe_houses",
    "swe_houses_armc",
    "swe_houses_ex",
    "swe_houses_ex2",
]

_GAUQUELIN = b"G"


def cusp_count(hsys: bytes) -> int:
    """Size of the native cusp buffer for ``hsys``, including the unused slot 0."""

    return GAUQUELIN_CUSPS_SIZE if hsys == _GAUQUELIN else CUSPS_SIZE


def _cusps(values: Sequence[float], hsys: bytes) -> tuple[float, ...]:
    size = cusp_count(hsys)
    items = list(values)
    # the carrier drops the unused slot 0
    if len(items) == size - 1:
        items.insert(0, 0.0)
    return fixed_floats(items, size)


def _house_cusps(result, hsys: bytes) -> HouseCusps:
    cusps, ascmc = result[0], result[1]
    return HouseCusps(_cusps(cusps, hsys), fixed_floats(ascmc, ASCMC_SIZE))


def swe_houses(
    tjd_ut: float,
    geolat: float,
    geolon: float,
    hsys: str | bytes,
    *,
    context: SweContext | None = None,
) -> HouseCusps:
    """House cusps and angles for a place and time.

    ``cusps[1:13]`` are the twelve cusps (36 sectors for ``'G'``); ``ascmc``
    holds ascendant, MC, ARMC, vertex, equatorial ascendant, co-ascendants
    and polar ascendant.
    """

    code = house_code(hsys, function="swe_houses")
    result = using(context).call("houses", float(tjd_ut), float(geolat), float(geolon), code)
    return _house_cusps(result, code)


def swe_houses_ex(
    tjd_ut: float,
    iflag: int,
    geolat: float,
    geolon: float,
    hsys: str | bytes,
    *,
    context: SweContext | None = None,
) -> HouseCusps:
    """:func:`swe_houses` honouring ``SEFLG_SIDEREAL`` and ``SEFLG_RADIANS``."""

    code = house_code(hsys, function="swe_houses_ex")
    result = using(context).call(
        "houses_ex", float(tjd_ut), float(geolat), float(geolon), code, int(iflag)
    )
    return _house_cusps(result, code)


def swe_houses_ex2(
    tjd_ut: float,
    iflag: int,
    geolat: float,
    geolon: float,
    hsys: str | bytes,
    *,
    context: SweContext | None = None,
) -> HouseCuspsWithSpeed:
    code = house_code(hsys, function="swe_houses_ex2")
    cusps, ascmc, cusp_speeds, ascmc_speeds = using(context).call(
        "houses_ex2", float(tjd_ut), float(geolat), float(geolon), code, int(iflag)
    )[:4]
    return HouseCuspsWithSpeed(
        _cusps(cusps, code),
        fixed_floats(ascmc, ASCMC_SIZE),
        _cusps(cusp_speeds, code),
        fixed_floats(ascmc_speeds, ASCMC_SIZE),
    )


def swe_houses_armc(
    armc: float,
    geolat: float,
    eps: float,
    hsys: str | bytes,
    *,
    context: SweContext | None = None,
) -> HouseCusps:
    """Houses from sidereal time in degrees (``armc``) and obliquity ``eps``."""

    code = house_code(hsys, function="swe_houses_armc")
    result = using(context).call("houses_armc", float(armc), float(geolat), float(eps), code)
    return _house_cusps(result, code)


def swe_house_pos(
    armc: float,
    geolat: float,
    eps: float,
    hsys: str | bytes,
    obj_lon: float,
    obj_lat: float,
    *,
    context: SweContext | None = None,
) -> float:
    """Position of a point as a fractional house number in ``[1, 13)``."""

    code = house_code(hsys, function="swe_house_pos")
    return float(
        using(context).call(
            "house_pos",
            float(armc),
            float(geolat),
            float(eps),
            (float(obj_lon), float(obj_lat)),
            code,
        )
    )
