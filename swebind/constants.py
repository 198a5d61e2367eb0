"""Named Swiss Ephemeris constants, copied from the native module once per process.

Names are the C header names (``SE_SUN``, ``SEFLG_SPEED``, ...). The native
module publishes them without the ``SE_``/``SE`` prefix (``SUN``,
``FLG_SPEED``); :func:`native_attribute` maps one to the other.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Final

from ._native import swe

__all__ = [
    "ALL_CONSTANT_NAMES",
    "BODIES",
    "CALC_FLAGS",
    "CALENDARS",
    "COORDINATE_TRANSFORMS",
    "ECLIPSE_TYPES",
    "HELIACAL",
    "NODE_APSIS_BITS",
    "REFRACTION",
    "RISE_TRANSIT",
    "SIDEREAL_BITS",
    "SIDEREAL_MODES",
    "SPLIT_DEG",
    "constant",
    "constant_table",
    "native_attribute",
    "reset_constants",
]

LOG = logging.getLogger(__name__)

BODIES: Final[tuple[str, ...]] = (
    "SE_ECL_NUT",
    "SE_SUN",
    "SE_MOON",
    "SE_MERCURY",
    "SE_VENUS",
    "SE_MARS",
    "SE_JUPITER",
    "SE_SATURN",
    "SE_URANUS",
    "SE_NEPTUNE",
    "SE_PLUTO",
    "SE_MEAN_NODE",
    "SE_TRUE_NODE",
    "SE_MEAN_APOG",
    "SE_OSCU_APOG",
    "SE_EARTH",
    "SE_CHIRON",
    "SE_PHOLUS",
    "SE_CERES",
    "SE_PALLAS",
    "SE_JUNO",
    "SE_VESTA",
    "SE_INTP_APOG",
    "SE_INTP_PERG",
    "SE_NPLANETS",
    "SE_FICT_OFFSET",
    "SE_CUPIDO",
    "SE_HADES",
    "SE_ZEUS",
    "SE_KRONOS",
    "SE_APOLLON",
    "SE_ADMETOS",
    "SE_VULKANUS",
    "SE_POSEIDON",
    "SE_ISIS",
    "SE_NIBIRU",
    "SE_HARRINGTON",
    "SE_NEPTUNE_LEVERRIER",
    "SE_NEPTUNE_ADAMS",
    "SE_PLUTO_LOWELL",
    "SE_PLUTO_PICKERING",
    "SE_VULCAN",
    "SE_WHITE_MOON",
    "SE_PROSERPINA",
    "SE_WALDEMATH",
    "SE_AST_OFFSET",
)

CALC_FLAGS: Final[tuple[str, ...]] = (
    "SEFLG_JPLEPH",
    "SEFLG_SWIEPH",
    "SEFLG_MOSEPH",
    "SEFLG_HELCTR",
    "SEFLG_TRUEPOS",
    "SEFLG_J2000",
    "SEFLG_NONUT",
    "SEFLG_SPEED3",
    "SEFLG_SPEED",
    "SEFLG_NOGDEFL",
    "SEFLG_NOABERR",
    "SEFLG_ASTROMETRIC",
    "SEFLG_EQUATORIAL",
    "SEFLG_XYZ",
    "SEFLG_RADIANS",
    "SEFLG_BARYCTR",
    "SEFLG_TOPOCTR",
    "SEFLG_SIDEREAL",
    "SEFLG_ICRS",
    "SEFLG_JPLHOR",
    "SEFLG_JPLHOR_APPROX",
    "SEFLG_CENTER_BODY",
)

SIDEREAL_MODES: Final[tuple[str, ...]] = (
    "SE_SIDM_FAGAN_BRADLEY",
    "SE_SIDM_LAHIRI",
    "SE_SIDM_DELUCE",
    "SE_SIDM_RAMAN",
    "SE_SIDM_USHASHASHI",
    "SE_SIDM_KRISHNAMURTI",
    "SE_SIDM_DJWHAL_KHUL",
    "SE_SIDM_YUKTESHWAR",
    "SE_SIDM_JN_BHASIN",
    "SE_SIDM_BABYL_KUGLER1",
    "SE_SIDM_BABYL_KUGLER2",
    "SE_SIDM_BABYL_KUGLER3",
    "SE_SIDM_BABYL_HUBER",
    "SE_SIDM_BABYL_ETPSC",
    "SE_SIDM_ALDEBARAN_15TAU",
    "SE_SIDM_HIPPARCHOS",
    "SE_SIDM_SASSANIAN",
    "SE_SIDM_GALCENT_0SAG",
    "SE_SIDM_J2000",
    "SE_SIDM_J1900",
    "SE_SIDM_B1950",
    "SE_SIDM_SURYASIDDHANTA",
    "SE_SIDM_SURYASIDDHANTA_MSUN",
    "SE_SIDM_ARYABHATA",
    "SE_SIDM_ARYABHATA_MSUN",
    "SE_SIDM_SS_REVATI",
    "SE_SIDM_SS_CITRA",
    "SE_SIDM_TRUE_CITRA",
    "SE_SIDM_TRUE_REVATI",
    "SE_SIDM_TRUE_PUSHYA",
    "SE_SIDM_GALCENT_RGILBRAND",
    "SE_SIDM_GALEQU_IAU1958",
    "SE_SIDM_GALEQU_TRUE",
    "SE_SIDM_GALEQU_MULA",
    "SE_SIDM_GALALIGN_MARDYKS",
    "SE_SIDM_TRUE_MULA",
    "SE_SIDM_GALCENT_MULA_WILHELM",
    "SE_SIDM_ARYABHATA_522",
    "SE_SIDM_BABYL_BRITTON",
    "SE_SIDM_TRUE_SHEORAN",
    "SE_SIDM_GALCENT_COCHRANE",
    "SE_SIDM_GALEQU_FIORENZA",
    "SE_SIDM_VALENS_MOON",
    "SE_SIDM_LAHIRI_1940",
    "SE_SIDM_LAHIRI_VP285",
    "SE_SIDM_KRISHNAMURTI_VP291",
    "SE_SIDM_LAHIRI_ICRC",
    "SE_SIDM_USER",
)

SIDEREAL_BITS: Final[tuple[str, ...]] = (
    "SE_SIDBIT_ECL_T0",
    "SE_SIDBIT_SSY_PLANE",
    "SE_SIDBIT_USER_UT",
)

CALENDARS: Final[tuple[str, ...]] = (
    "SE_JUL_CAL",
    "SE_GREG_CAL",
)

COORDINATE_TRANSFORMS: Final[tuple[str, ...]] = (
    "SE_ECL2HOR",
    "SE_EQU2HOR",
    "SE_HOR2ECL",
    "SE_HOR2EQU",
)

NODE_APSIS_BITS: Final[tuple[str, ...]] = (
    "SE_NODBIT_MEAN",
    "SE_NODBIT_OSCU",
    "SE_NODBIT_OSCU_BAR",
    "SE_NODBIT_FOPOINT",
)

RISE_TRANSIT: Final[tuple[str, ...]] = (
    "SE_CALC_RISE",
    "SE_CALC_SET",
    "SE_CALC_MTRANSIT",
    "SE_CALC_ITRANSIT",
    "SE_BIT_DISC_CENTER",
    "SE_BIT_DISC_BOTTOM",
    "SE_BIT_GEOCTR_NO_ECL_LAT",
    "SE_BIT_NO_REFRACTION",
    "SE_BIT_CIVIL_TWILIGHT",
    "SE_BIT_NAUTIC_TWILIGHT",
    "SE_BIT_ASTRO_TWILIGHT",
    "SE_BIT_FIXED_DISC_SIZE",
    "SE_BIT_FORCE_SLOW_METHOD",
    "SE_BIT_HINDU_RISING",
)

REFRACTION: Final[tuple[str, ...]] = (
    "SE_TRUE_TO_APP",
    "SE_APP_TO_TRUE",
)

SPLIT_DEG: Final[tuple[str, ...]] = (
    "SE_SPLIT_DEG_ROUND_SEC",
    "SE_SPLIT_DEG_ROUND_MIN",
    "SE_SPLIT_DEG_ROUND_DEG",
    "SE_SPLIT_DEG_ZODIACAL",
    "SE_SPLIT_DEG_NAKSHATRA",
    "SE_SPLIT_DEG_KEEP_SIGN",
    "SE_SPLIT_DEG_KEEP_DEG",
)

ECLIPSE_TYPES: Final[tuple[str, ...]] = (
    "SE_ECL_CENTRAL",
    "SE_ECL_NONCENTRAL",
    "SE_ECL_TOTAL",
    "SE_ECL_ANNULAR",
    "SE_ECL_PARTIAL",
    "SE_ECL_ANNULAR_TOTAL",
    "SE_ECL_HYBRID",
    "SE_ECL_PENUMBRAL",
    "SE_ECL_ALLTYPES_SOLAR",
    "SE_ECL_ALLTYPES_LUNAR",
    "SE_ECL_VISIBLE",
    "SE_ECL_MAX_VISIBLE",
    "SE_ECL_1ST_VISIBLE",
    "SE_ECL_2ND_VISIBLE",
    "SE_ECL_3RD_VISIBLE",
    "SE_ECL_4TH_VISIBLE",
    "SE_ECL_PARTBEG_VISIBLE",
    "SE_ECL_PARTEND_VISIBLE",
    "SE_ECL_TOTBEG_VISIBLE",
    "SE_ECL_TOTEND_VISIBLE",
    "SE_ECL_PENUMBBEG_VISIBLE",
    "SE_ECL_PENUMBEND_VISIBLE",
    "SE_ECL_OCC_BEG_DAYLIGHT",
    "SE_ECL_OCC_END_DAYLIGHT",
    "SE_ECL_ONE_TRY",
)

HELIACAL: Final[tuple[str, ...]] = (
    "SE_HELIACAL_RISING",
    "SE_HELIACAL_SETTING",
    "SE_MORNING_FIRST",
    "SE_EVENING_LAST",
    "SE_EVENING_FIRST",
    "SE_MORNING_LAST",
    "SE_ACRONYCHAL_RISING",
    "SE_ACRONYCHAL_SETTING",
    "SE_COSMICAL_SETTING",
    "SE_HELFLAG_LONG_SEARCH",
    "SE_HELFLAG_HIGH_PRECISION",
    "SE_HELFLAG_OPTICAL_PARAMS",
    "SE_HELFLAG_NO_DETAILS",
    "SE_HELFLAG_SEARCH_1_PERIOD",
    "SE_HELFLAG_VISLIM_DARK",
    "SE_HELFLAG_VISLIM_NOMOON",
    "SE_HELFLAG_VISLIM_PHOTOPIC",
    "SE_HELFLAG_VISLIM_SCOTOPIC",
    "SE_HELFLAG_AV",
    "SE_HELFLAG_AVKIND_VR",
    "SE_HELFLAG_AVKIND_PTO",
    "SE_HELFLAG_AVKIND_MIN7",
    "SE_HELFLAG_AVKIND_MIN9",
    "SE_HELFLAG_AVKIND",
)

ALL_CONSTANT_NAMES: Final[tuple[str, ...]] = (
    BODIES
    + CALC_FLAGS
    + SIDEREAL_MODES
    + SIDEREAL_BITS
    + CALENDARS
    + COORDINATE_TRANSFORMS
    + NODE_APSIS_BITS
    + RISE_TRANSIT
    + REFRACTION
    + SPLIT_DEG
    + ECLIPSE_TYPES
    + HELIACAL
)


def native_attribute(name: str) -> str:
    """Return the attribute under which the native module publishes ``name``."""

    if name.startswith("SEFLG_"):
        return "FLG_" + name[len("SEFLG_"):]
    if name.startswith("SE_"):
        return name[len("SE_"):]
    raise KeyError(name)


@lru_cache(maxsize=1)
def constant_table() -> Mapping[str, int]:
    """Return the read-only header-name -> value table.

    Built on first use and cached for the life of the process.
    """

    module = swe()
    table: dict[str, int] = {}
    missing: list[str] = []
    for name in ALL_CONSTANT_NAMES:
        value = getattr(module, native_attribute(name), None)
        if value is None:
            missing.append(name)
            continue
        table[name] = int(value)
    if missing:
        LOG.debug("native module does not define %d constants: %s", len(missing), ", ".join(missing))
    return MappingProxyType(table)


def constant(name: str) -> int:
    """Return the value of header constant ``name``."""

    try:
        return constant_table()[name]
    except KeyError:
        raise AttributeError(f"Swiss Ephemeris constant {name!r} is not defined") from None


def reset_constants() -> None:
    """For tests: rebuild the table from the native module on next access."""

    constant_table.cache_clear()
