"""Python binding layer over the Swiss Ephemeris.

Operations keep the native ``swe_*`` names and argument order. Header constants
(``SE_SUN``, ``SEFLG_SPEED``, ``SE_SIDM_LAHIRI``, ...) resolve from the native
module on first access.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version
from typing import Any

from .bodies import (
    swe_calc,
    swe_calc_pctr,
    swe_calc_ut,
    swe_fixstar,
    swe_fixstar2,
    swe_fixstar2_mag,
    swe_fixstar2_ut,
    swe_fixstar_mag,
    swe_fixstar_ut,
    swe_get_orbital_elements,
    swe_nod_aps,
    swe_nod_aps_ut,
    swe_orbit_max_min_true_distance,
    swe_pheno,
    swe_pheno_ut,
)
from .configuration import (
    swe_close,
    swe_get_ayanamsa,
    swe_get_ayanamsa_ex,
    swe_get_ayanamsa_ex_ut,
    swe_get_ayanamsa_name,
    swe_get_ayanamsa_ut,
    swe_get_planet_name,
    swe_house_name,
    swe_set_ephe_path,
    swe_set_jpl_file,
    swe_set_sid_mode,
    swe_set_topo,
    swe_version,
)
from .constants import ALL_CONSTANT_NAMES, constant, constant_table
from .context import (
    EphemerisConfig,
    GeoPosition,
    SiderealMode,
    SweContext,
    default_context,
    reset_default_context,
)
from .coordinates import (
    swe_azalt,
    swe_azalt_rev,
    swe_cotrans,
    swe_cotrans_sp,
    swe_deg_midp,
    swe_degnorm,
    swe_difdeg2n,
    swe_difrad2n,
    swe_rad_midp,
    swe_radnorm,
    swe_refrac,
    swe_refrac_extended,
    swe_split_deg,
)
from .crossings import (
    swe_helio_cross_ut,
    swe_mooncross,
    swe_mooncross_node_ut,
    swe_mooncross_ut,
    swe_solcross,
    swe_solcross_ut,
)
from .eclipses import (
    swe_lun_eclipse_how,
    swe_lun_eclipse_when,
    swe_lun_eclipse_when_loc,
    swe_lun_occult_when_glob,
    swe_lun_occult_when_loc,
    swe_lun_occult_where,
    swe_sol_eclipse_how,
    swe_sol_eclipse_when_glob,
    swe_sol_eclipse_when_loc,
    swe_sol_eclipse_where,
)
from .errors import SweArgumentError, SweError, SweNativeError, SweUnavailableError
from .events import swe_gauquelin_sector, swe_rise_trans, swe_rise_trans_true_hor
from .heliacal import swe_heliacal_pheno_ut, swe_heliacal_ut, swe_vis_limit_mag
from .houses import (
    swe_house_pos,
    swe_houses,
    swe_houses_armc,
    swe_houses_ex,
    swe_houses_ex2,
)
from .results import (
    CalendarDate,
    DeltaT,
    EclipseEvent,
    EclipseWhere,
    HorizontalPosition,
    HouseCusps,
    HouseCuspsWithSpeed,
    JulianDayPair,
    MoonNodeCrossing,
    NodesApsides,
    RefractionResult,
    SplitDegree,
    UtcDateTime,
    VisibilityLimit,
)
from .targets import Body, Star
from .timescale import (
    swe_day_of_week,
    swe_deltat,
    swe_deltat_ex,
    swe_jdet_to_utc,
    swe_jdut1_to_utc,
    swe_julday,
    swe_lat_to_lmt,
    swe_lmt_to_lat,
    swe_revjul,
    swe_sidtime,
    swe_sidtime0,
    swe_time_equ,
    swe_utc_time_zone,
    swe_utc_to_jd,
)

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("swebind")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # context and types
    "Body",
    "CalendarDate",
    "DeltaT",
    "EclipseEvent",
    "EclipseWhere",
    "EphemerisConfig",
    "GeoPosition",
    "HorizontalPosition",
    "HouseCusps",
    "HouseCuspsWithSpeed",
    "JulianDayPair",
    "MoonNodeCrossing",
    "NodesApsides",
    "RefractionResult",
    "SiderealMode",
    "SplitDegree",
    "Star",
    "SweArgumentError",
    "SweContext",
    "SweError",
    "SweNativeError",
    "SweUnavailableError",
    "UtcDateTime",
    "VisibilityLimit",
    "constant",
    "constant_table",
    "default_context",
    "reset_default_context",
    # configuration
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
    # time
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
    # coordinates
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
    # bodies and stars
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
    # houses
    "swe_house_pos",
    "swe_houses",
    "swe_houses_armc",
    "swe_houses_ex",
    "swe_houses_ex2",
    # rise/transit
    "swe_gauquelin_sector",
    "swe_rise_trans",
    "swe_rise_trans_true_hor",
    # eclipses and occultations
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
    # crossings
    "swe_helio_cross_ut",
    "swe_mooncross",
    "swe_mooncross_node_ut",
    "swe_mooncross_ut",
    "swe_solcross",
    "swe_solcross_ut",
    # heliacal
    "swe_heliacal_pheno_ut",
    "swe_heliacal_ut",
    "swe_vis_limit_mag",
]

_CONSTANT_NAMES = frozenset(ALL_CONSTANT_NAMES)


def __getattr__(name: str) -> Any:
    if name in _CONSTANT_NAMES:
        return constant(name)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(set(__all__) | _CONSTANT_NAMES | set(globals().keys()))
