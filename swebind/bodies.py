"""Planet, node and fixed-star positions."""

from __future__ import annotations

from ._marshal import fixed_floats, scalar, split_status
from ._native import check_status
from .context import SweContext, using
from .errors import SweArgumentError
from .results import (
    ORBITAL_ELEMENTS_SIZE,
    PHENO_SIZE,
    POSITION_SIZE,
    NodesApsides,
)
from .targets import Star

__all__ = [
    "swe_calc",
    "swe_calc_pctr",
    "swe_calc_ut",
    "swe_fixstar",
    "swe_fixstar2",
    "swe_fixstar2_mag",
    "swe_fixstar2_ut",
    "swe_fixstar_mag",
    "swe_fixstar_ut",
    "swe_get_orbital_elements",
    "swe_nod_aps",
    "swe_nod_aps_ut",
    "swe_orbit_max_min_true_distance",
    "swe_pheno",
    "swe_pheno_ut",
]


def _checked(name: str, result, size: int) -> tuple[float, ...]:
    values, retflag = split_status(result)
    check_status(retflag, name)
    return fixed_floats(values, size)


def _star_name(star: Star | str, function: str) -> str:
    name = star.name if isinstance(star, Star) else star
    if not isinstance(name, str) or not name:
        raise SweArgumentError("star name must be a non-empty string", function=function)
    return name


def swe_calc_ut(
    tjd_ut: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    """Position of ``body`` at ``tjd_ut``.

    Returns ``(lon, lat, dist, lon_speed, lat_speed, dist_speed)``; speeds are
    zero unless ``SEFLG_SPEED`` is set.
    """

    result = using(context).call("calc_ut", float(tjd_ut), int(body), int(iflag))
    return _checked("calc_ut", result, POSITION_SIZE)


def swe_calc(
    tjd_et: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    result = using(context).call("calc", float(tjd_et), int(body), int(iflag))
    return _checked("calc", result, POSITION_SIZE)


def swe_calc_pctr(
    tjd_et: float,
    body: int,
    center: int,
    iflag: int,
    *,
    context: SweContext | None = None,
) -> tuple[float, ...]:
    """Position of ``body`` as seen from the body ``center``."""

    result = using(context).call("calc_pctr", float(tjd_et), int(body), int(center), int(iflag))
    return _checked("calc_pctr", result, POSITION_SIZE)


def _nod_aps(
    name: str, tjd: float, body: int, iflag: int, method: int, context: SweContext | None
) -> NodesApsides:
    # the carrier takes the method before the flags
    result = using(context).call(name, float(tjd), int(body), int(method), int(iflag))
    groups = [fixed_floats(group, POSITION_SIZE) for group in result[:4]]
    return NodesApsides(*groups)


def swe_nod_aps_ut(
    tjd_ut: float,
    body: int,
    iflag: int,
    method: int,
    *,
    context: SweContext | None = None,
) -> NodesApsides:
    """Ascending/descending nodes, perihelion and aphelion of ``body``.

    ``method`` combines the ``SE_NODBIT_*`` bits.
    """

    return _nod_aps("nod_aps_ut", tjd_ut, body, iflag, method, context)


def swe_nod_aps(
    tjd_et: float,
    body: int,
    iflag: int,
    method: int,
    *,
    context: SweContext | None = None,
) -> NodesApsides:
    return _nod_aps("nod_aps", tjd_et, body, iflag, method, context)


def swe_get_orbital_elements(
    tjd_et: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    """Osculating Kepler elements; semi-axis, eccentricity and inclination first."""

    result = using(context).call("get_orbital_elements", float(tjd_et), int(body), int(iflag))
    return _checked("get_orbital_elements", result, ORBITAL_ELEMENTS_SIZE)


def swe_orbit_max_min_true_distance(
    tjd_et: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    """``(max_distance, min_distance, true_distance)`` in AU."""

    result = using(context).call(
        "orbit_max_min_true_distance", float(tjd_et), int(body), int(iflag)
    )
    return _checked("orbit_max_min_true_distance", result, 3)


def swe_pheno_ut(
    tjd_ut: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    """Phase angle, phase, elongation, apparent diameter and magnitude, padded to 20."""

    result = using(context).call("pheno_ut", float(tjd_ut), int(body), int(iflag))
    return _checked("pheno_ut", result, PHENO_SIZE)


def swe_pheno(
    tjd_et: float, body: int, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    result = using(context).call("pheno", float(tjd_et), int(body), int(iflag))
    return _checked("pheno", result, PHENO_SIZE)


def _fixstar(
    name: str, star: Star | str, tjd: float, iflag: int, context: SweContext | None
) -> tuple[float, ...]:
    starname = _star_name(star, f"swe_{name}")
    result = using(context).call(name, starname, float(tjd), int(iflag))
    return _checked(name, result, POSITION_SIZE)


def swe_fixstar(
    star: Star | str, tjd_et: float, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    """Position of a fixed star from ``sefstars.txt``.

    ``star`` is a traditional name (``"Aldebaran"``) or a Bayer designation
    prefixed with a comma (``",alTau"``).
    """

    return _fixstar("fixstar", star, tjd_et, iflag, context)


def swe_fixstar_ut(
    star: Star | str, tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    return _fixstar("fixstar_ut", star, tjd_ut, iflag, context)


def swe_fixstar2(
    star: Star | str, tjd_et: float, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    return _fixstar("fixstar2", star, tjd_et, iflag, context)


def swe_fixstar2_ut(
    star: Star | str, tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> tuple[float, ...]:
    return _fixstar("fixstar2_ut", star, tjd_ut, iflag, context)


def swe_fixstar_mag(star: Star | str, *, context: SweContext | None = None) -> float:
    """Visual magnitude of a fixed star."""

    starname = _star_name(star, "swe_fixstar_mag")
    return scalar(using(context).call("fixstar_mag", starname))


def swe_fixstar2_mag(star: Star | str, *, context: SweContext | None = None) -> float:
    starname = _star_name(star, "swe_fixstar2_mag")
    return scalar(using(context).call("fixstar2_mag", starname))
