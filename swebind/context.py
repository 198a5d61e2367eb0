"""Explicit configuration context for the native library's process-wide state.

The Swiss Ephemeris keeps its ephemeris path, JPL file, topocentric observer
and sidereal mode in global variables. :class:`SweContext` owns a value copy of
that configuration and pushes it into the native library before dependent
calls, so the dependency is visible at every call site::

    ctx = SweContext()
    ctx.set_topo(-112.18, 45.45, 1524)
    swe_calc_ut(jd, SE_SUN, SEFLG_TOPOCTR, context=ctx)

No locking is performed. Calls that interleave contexts from several threads
must be serialised by the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from ._native import invoke
from .constants import constant
from .errors import SweArgumentError
from .paths import get_se_ephe_path, has_ephemeris_files
from .settings import BindingSettings, get_settings

__all__ = [
    "EphemerisConfig",
    "GeoPosition",
    "SiderealMode",
    "SweContext",
    "default_context",
    "forget_native_state",
    "normalize_ayanamsha_name",
    "reset_default_context",
    "using",
]

LOG = logging.getLogger(__name__)

# What has been pushed into the native library, keyed by config field.
_APPLIED: dict[str, Any] = {}


def normalize_ayanamsha_name(value: str) -> str:
    """Return a canonical key for the provided ayanamsha name."""

    return value.strip().lower().replace("-", "_").replace("/", "_").replace(" ", "_")


@dataclass(frozen=True, slots=True)
class GeoPosition:
    """Observer location; east longitude and north latitude are positive."""

    longitude: float
    latitude: float
    altitude: float = 0.0

    def as_native(self) -> tuple[float, float, float]:
        return (float(self.longitude), float(self.latitude), float(self.altitude))


@dataclass(frozen=True, slots=True)
class SiderealMode:
    """Arguments of ``swe_set_sid_mode``."""

    mode: int
    t0: float = 0.0
    ayan_t0: float = 0.0

    @classmethod
    def from_name(cls, name: str, t0: float = 0.0, ayan_t0: float = 0.0) -> SiderealMode:
        """Resolve ``"lahiri"``, ``"Fagan/Bradley"`` etc. to the ``SE_SIDM_*`` value."""

        key = normalize_ayanamsha_name(name).upper()
        try:
            mode = constant(f"SE_SIDM_{key}")
        except AttributeError as exc:
            raise SweArgumentError(
                f"Unknown ayanamsha '{name}'", function="swe_set_sid_mode"
            ) from exc
        return cls(mode, t0, ayan_t0)


@dataclass(frozen=True, slots=True)
class EphemerisConfig:
    """Value copy of the native library's global configuration."""

    ephe_path: str | None = None
    jpl_file: str | None = None
    topo: GeoPosition | None = None
    sidereal: SiderealMode | None = None


def forget_native_state() -> None:
    """Mark the native configuration as unknown so the next call re-applies it."""

    _APPLIED.clear()


class SweContext:
    """Owner of one :class:`EphemerisConfig` and its application to the library."""

    def __init__(self, config: EphemerisConfig | None = None) -> None:
        self._config = config or EphemerisConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"

    @property
    def config(self) -> EphemerisConfig:
        return self._config

    @classmethod
    def from_settings(cls, settings: BindingSettings | None = None) -> SweContext:
        """Build a context seeded from environment settings and path discovery.

        A configured path is used as given. A discovered directory is only
        adopted when it holds Swiss ``.se1``-``.se5`` files; otherwise the
        native default path (and its Moshier fallback) stays in effect.
        """

        settings = settings or get_settings()
        ephe_path: str | None
        if settings.se_ephe_path is not None:
            ephe_path = str(settings.se_ephe_path)
        else:
            ephe_path = get_se_ephe_path()
            if ephe_path is not None and not has_ephemeris_files(ephe_path):
                LOG.info("Ignoring ephemeris path %s - Swiss data missing", ephe_path)
                ephe_path = None
        return cls(EphemerisConfig(ephe_path=ephe_path, jpl_file=settings.jpl_file))

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------
    def set_ephe_path(self, path: str | os.PathLike[str]) -> None:
        self._config = replace(self._config, ephe_path=os.fspath(path))
        self.activate()

    def set_jpl_file(self, fname: str | os.PathLike[str]) -> None:
        self._config = replace(self._config, jpl_file=os.fspath(fname))
        self.activate()

    def set_topo(self, geolon: float, geolat: float, altitude: float) -> None:
        topo = GeoPosition(float(geolon), float(geolat), float(altitude))
        self._config = replace(self._config, topo=topo)
        self.activate()

    def set_sid_mode(self, sid_mode: int, t0: float, ayan_t0: float) -> None:
        sidereal = SiderealMode(int(sid_mode), float(t0), float(ayan_t0))
        self._config = replace(self._config, sidereal=sidereal)
        self.activate()

    # ------------------------------------------------------------------
    # Native interaction
    # ------------------------------------------------------------------
    def activate(self) -> None:
        """Push configured fields that differ from the library's current state."""

        config = self._config
        if config.ephe_path is not None and _APPLIED.get("ephe_path") != config.ephe_path:
            LOG.info("Setting Swiss ephemeris path: %s", config.ephe_path)
            invoke("set_ephe_path", config.ephe_path)
            _APPLIED["ephe_path"] = config.ephe_path
        if config.jpl_file is not None and _APPLIED.get("jpl_file") != config.jpl_file:
            LOG.info("Setting JPL ephemeris file: %s", config.jpl_file)
            invoke("set_jpl_file", config.jpl_file)
            _APPLIED["jpl_file"] = config.jpl_file
        if config.topo is not None and _APPLIED.get("topo") != config.topo:
            LOG.debug("Setting topocentric observer: %s", config.topo)
            invoke("set_topo", *config.topo.as_native())
            _APPLIED["topo"] = config.topo
        if config.sidereal is not None and _APPLIED.get("sidereal") != config.sidereal:
            LOG.debug("Setting sidereal mode: %s", config.sidereal)
            sid = config.sidereal
            invoke("set_sid_mode", sid.mode, sid.t0, sid.ayan_t0)
            _APPLIED["sidereal"] = sid

    def call(self, name: str, *args: Any) -> Any:
        """Apply this context, then call native function ``name``."""

        self.activate()
        return invoke(name, *args)

    def close(self) -> None:
        """Release native files and caches; configuration is re-applied on next use."""

        invoke("close")
        forget_native_state()


_DEFAULT_CONTEXT: SweContext | None = None


def default_context() -> SweContext:
    """Return the context used when an operation receives no ``context``."""

    global _DEFAULT_CONTEXT
    if _DEFAULT_CONTEXT is None:
        _DEFAULT_CONTEXT = SweContext.from_settings()
    return _DEFAULT_CONTEXT


def reset_default_context(context: SweContext | None = None) -> None:
    """For tests: replace (or drop) the default context and forget native state."""

    global _DEFAULT_CONTEXT
    _DEFAULT_CONTEXT = context
    forget_native_state()


def using(context: SweContext | None) -> SweContext:
    return context if context is not None else default_context()
