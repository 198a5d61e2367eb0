"""Logging helpers for applications embedding the binding."""

from __future__ import annotations

import logging
from typing import Any

from ..settings import get_settings

__all__ = ["configure_logging"]

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: str | int | None) -> int:
    """Return a logging level derived from ``value``.

    Accepts standard level names (case insensitive) or a numeric level.
    Anything else resolves to :data:`logging.INFO`.
    """

    if value is None:
        return logging.INFO

    if isinstance(value, int):
        return value

    candidate = value.strip()
    if not candidate:
        return logging.INFO

    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    if isinstance(resolved, int):
        return resolved

    return logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Optional log level override. When omitted the ``LOG_LEVEL`` setting is
        used. ``kwargs`` are forwarded to :func:`logging.basicConfig`.

    Returns
    -------
    int
        The effective logging level applied to the root logger.
    """

    effective_level = _coerce_level(level if level is not None else get_settings().log_level)

    logging.basicConfig(
        level=effective_level,
        format=kwargs.pop("format", _DEFAULT_FORMAT),
        datefmt=kwargs.pop("datefmt", _DEFAULT_DATEFMT),
        force=kwargs.pop("force", True),
        **kwargs,
    )

    return effective_level
