"""Rise, set and meridian transit searches and Gauquelin sectors.

Each operation takes a body identifier or a fixed-star name as its target; see
:mod:`swebind.targets`.
"""

from __future__ import annotations

import logging

from ._marshal import geopos
from ._native import check_status
from .context import SweContext, using
from .targets import TargetLike, as_target, carrier_argument

__all__ = ["CIRCUMPOLAR", "swe_gauquelin_sector", "swe_rise_trans", "swe_rise_trans_true_hor"]

LOG = logging.getLogger(__name__)

CIRCUMPOLAR = -2
"""Native status: the body stays above or below the horizon for the whole day."""


def _event_time(name: str, result) -> float | None:
    status, tret = result[0], result[1]
    if int(status) == CIRCUMPOLAR:
        LOG.debug("%s: no event, body is circumpolar", name)
        return None
    check_status(status, name)
    return float(tret[0])


def swe_rise_trans(
    tjd_ut: float,
    target: TargetLike,
    epheflag: int,
    rsmi: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    atpress: float,
    attemp: float,
    *,
    context: SweContext | None = None,
) -> float | None:
    """Next rising, setting or transit after ``tjd_ut``.

    ``rsmi`` combines one of ``SE_CALC_RISE``, ``SE_CALC_SET``,
    ``SE_CALC_MTRANSIT``, ``SE_CALC_ITRANSIT`` with optional ``SE_BIT_*`` bits.
    Returns ``None`` when the body does not rise or set at this latitude.
    """

    selected = as_target(target, function="swe_rise_trans")
    result = using(context).call(
        "rise_trans",
        float(tjd_ut),
        carrier_argument(selected),
        int(rsmi),
        geopos(geolon, geolat, geoalt),
        float(atpress),
        float(attemp),
        int(epheflag),
    )
    return _event_time("rise_trans", result)


def swe_rise_trans_true_hor(
    tjd_ut: float,
    target: TargetLike,
    epheflag: int,
    rsmi: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    atpress: float,
    attemp: float,
    horhgt: float,
    *,
    context: SweContext | None = None,
) -> float | None:
    """:func:`swe_rise_trans` against a local horizon ``horhgt`` degrees high."""

    selected = as_target(target, function="swe_rise_trans_true_hor")
    result = using(context).call(
        "rise_trans_true_hor",
        float(tjd_ut),
        carrier_argument(selected),
        int(rsmi),
        geopos(geolon, geolat, geoalt),
        float(atpress),
        float(attemp),
        float(horhgt),
        int(epheflag),
    )
    return _event_time("rise_trans_true_hor", result)


def swe_gauquelin_sector(
    tjd_ut: float,
    target: TargetLike,
    iflag: int,
    imeth: int,
    geolon: float,
    geolat: float,
    geoalt: float,
    atpress: float,
    attemp: float,
    *,
    context: SweContext | None = None,
) -> float:
    """Gauquelin sector position (``1.0`` to ``37.0``) of the target."""

    selected = as_target(target, function="swe_gauquelin_sector")
    return float(
        using(context).call(
            "gauquelin_sector",
            float(tjd_ut),
            carrier_argument(selected),
            int(imeth),
            geopos(geolon, geolat, geoalt),
            float(atpress),
            float(attemp),
            int(iflag),
        )
    )
