"""Julian day, calendar and time-scale conversions."""

from __future__ import annotations

from ._marshal import scalar
from ._native import invoke
from .context import SweContext, using
from .results import CalendarDate, DeltaT, JulianDayPair, UtcDateTime

__all__ = [
    "GREG_CAL",
    "JUL_CAL",
    "swe_day_of_week",
    "swe_deltat",
    "swe_deltat_ex",
    "swe_jdet_to_utc",
    "swe_jdut1_to_utc",
    "swe_julday",
    "swe_lat_to_lmt",
    "swe_lmt_to_lat",
    "swe_revjul",
    "swe_sidtime",
    "swe_sidtime0",
    "swe_time_equ",
    "swe_utc_time_zone",
    "swe_utc_to_jd",
]

# Header values of SE_GREG_CAL / SE_JUL_CAL, needed as parameter defaults.
GREG_CAL = 1
JUL_CAL = 0


def _utc(values) -> UtcDateTime:
    year, month, day, hour, minute, second = values[:6]
    return UtcDateTime(int(year), int(month), int(day), int(hour), int(minute), float(second))


def swe_julday(
    year: int, month: int, day: int, hour: float, gregflag: int = GREG_CAL
) -> float:
    """Return the Julian day number for a calendar date and decimal hour."""

    return float(invoke("julday", int(year), int(month), int(day), float(hour), int(gregflag)))


def swe_revjul(tjd: float, gregflag: int = GREG_CAL) -> CalendarDate:
    year, month, day, hour = invoke("revjul", float(tjd), int(gregflag))
    return CalendarDate(int(year), int(month), int(day), float(hour))


def swe_utc_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
    gregflag: int = GREG_CAL,
) -> JulianDayPair:
    """Convert a UTC instant to ``(jd_et, jd_ut)``.

    Invalid dates raise :class:`~swebind.errors.SweNativeError` with the native
    message.
    """

    et, ut = invoke(
        "utc_to_jd",
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        float(second),
        int(gregflag),
    )
    return JulianDayPair(float(et), float(ut))


def swe_jdet_to_utc(tjd_et: float, gregflag: int = GREG_CAL) -> UtcDateTime:
    return _utc(invoke("jdet_to_utc", float(tjd_et), int(gregflag)))


def swe_jdut1_to_utc(tjd_ut: float, gregflag: int = GREG_CAL) -> UtcDateTime:
    return _utc(invoke("jdut1_to_utc", float(tjd_ut), int(gregflag)))


def swe_utc_time_zone(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
    timezone: float,
) -> UtcDateTime:
    """Shift a civil time by ``timezone`` hours (positive east of Greenwich)."""

    return _utc(
        invoke(
            "utc_time_zone",
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            float(second),
            float(timezone),
        )
    )


def swe_day_of_week(tjd: float) -> int:
    """Return the weekday of ``tjd``; 0 is Monday."""

    return int(invoke("day_of_week", float(tjd)))


def swe_deltat(tjd: float, *, context: SweContext | None = None) -> float:
    """Delta-T in days."""

    return float(using(context).call("deltat", float(tjd)))


def swe_deltat_ex(tjd: float, ephe: int, *, context: SweContext | None = None) -> DeltaT:
    """Delta-T for the ephemeris selected by ``ephe``.

    Advisory text (e.g. the requested ephemeris is unavailable and another was
    used) is returned in :attr:`DeltaT.warning` when the carrier reports it.
    pyswisseph 2.10 returns the value alone and drops that text, so with it
    ``warning`` is always ``""``.
    """

    result = using(context).call("deltat_ex", float(tjd), int(ephe))
    if isinstance(result, (tuple, list)):
        value, warning = result[0], result[1] if len(result) > 1 else ""
        return DeltaT(float(value), str(warning or ""))
    return DeltaT(float(result), "")


def swe_time_equ(tjd_ut: float, *, context: SweContext | None = None) -> float:
    """Equation of time in days."""

    return scalar(using(context).call("time_equ", float(tjd_ut)))


def swe_lmt_to_lat(tjd_lmt: float, geolon: float, *, context: SweContext | None = None) -> float:
    """Convert local mean time to local apparent time."""

    return scalar(using(context).call("lmt_to_lat", float(tjd_lmt), float(geolon)))


def swe_lat_to_lmt(tjd_lat: float, geolon: float, *, context: SweContext | None = None) -> float:
    return scalar(using(context).call("lat_to_lmt", float(tjd_lat), float(geolon)))


def swe_sidtime(tjd_ut: float, *, context: SweContext | None = None) -> float:
    """Greenwich apparent sidereal time in hours."""

    return float(using(context).call("sidtime", float(tjd_ut)))


def swe_sidtime0(tjd_ut: float, eps: float, nut: float) -> float:
    """Sidereal time for a given obliquity ``eps`` and nutation ``nut`` (degrees)."""

    return float(invoke("sidtime0", float(tjd_ut), float(eps), float(nut)))
