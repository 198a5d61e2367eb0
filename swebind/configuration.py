"""Configuration setters and informational lookups."""

from __future__ import annotations

import os

from ._marshal import house_code
from ._native import check_status, invoke, swe
from .context import SweContext, default_context, using

__all__ = [
    "swe_close",
    "swe_get_ayanamsa",
    "swe_get_ayanamsa_ex",
    "swe_get_ayanamsa_ex_ut",
    "swe_get_ayanamsa_name",
    "swe_get_ayanamsa_ut",
    "swe_get_planet_name",
    "swe_house_name",
    "swe_set_ephe_path",
    "swe_set_jpl_file",
    "swe_set_sid_mode",
    "swe_set_topo",
    "swe_version",
]


def swe_set_ephe_path(path: str | os.PathLike[str]) -> None:
    """Set the directory searched for ephemeris files on the default context."""

    default_context().set_ephe_path(path)


def swe_set_jpl_file(fname: str | os.PathLike[str]) -> None:
    default_context().set_jpl_file(fname)


def swe_set_topo(geolon: float, geolat: float, altitude: float) -> None:
    """Set the observer used by ``SEFLG_TOPOCTR`` calculations."""

    default_context().set_topo(geolon, geolat, altitude)


def swe_set_sid_mode(sid_mode: int, t0: float, ayan_t0: float) -> None:
    """Select the ayanamsha; ``t0``/``ayan_t0`` only matter for ``SE_SIDM_USER``."""

    default_context().set_sid_mode(sid_mode, t0, ayan_t0)


def swe_close() -> None:
    """Close ephemeris files and reset native caches.

    The default context re-applies its configuration on the next call.
    """

    default_context().close()


def swe_version() -> str:
    version = swe().version
    if callable(version):
        version = version()
    return str(version)


def swe_get_planet_name(body: int) -> str:
    return str(invoke("get_planet_name", int(body)))


def swe_get_ayanamsa_name(sid_mode: int) -> str:
    return str(invoke("get_ayanamsa_name", int(sid_mode)))


def swe_house_name(hsys: str | bytes) -> str:
    """Return the display name of a house system code (``'P'`` -> ``'Placidus'``)."""

    return str(invoke("house_name", house_code(hsys, function="swe_house_name")))


def swe_get_ayanamsa_ut(tjd_ut: float, *, context: SweContext | None = None) -> float:
    return float(using(context).call("get_ayanamsa_ut", float(tjd_ut)))


def swe_get_ayanamsa(tjd_et: float, *, context: SweContext | None = None) -> float:
    return float(using(context).call("get_ayanamsa", float(tjd_et)))


def _ayanamsa_ex(name: str, tjd: float, iflag: int, context: SweContext | None) -> float:
    retflag, value = using(context).call(name, float(tjd), int(iflag))
    check_status(retflag, name)
    return float(value)


def swe_get_ayanamsa_ex_ut(
    tjd_ut: float, iflag: int, *, context: SweContext | None = None
) -> float:
    """Ayanamsha honouring the ephemeris and nutation bits of ``iflag``."""

    return _ayanamsa_ex("get_ayanamsa_ex_ut", tjd_ut, iflag, context)


def swe_get_ayanamsa_ex(
    tjd_et: float, iflag: int, *, context: SweContext | None = None
) -> float:
    return _ayanamsa_ex("get_ayanamsa_ex", tjd_et, iflag, context)
