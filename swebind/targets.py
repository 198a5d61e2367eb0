"""Tagged body-or-star selector used by rise, sector, occultation and visibility calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import SweArgumentError

__all__ = [
    "Body",
    "Star",
    "Target",
    "TargetLike",
    "as_target",
    "carrier_argument",
    "native_selector",
]


@dataclass(frozen=True, slots=True)
class Body:
    """A celestial body addressed by its Swiss Ephemeris identifier."""

    ipl: int


@dataclass(frozen=True, slots=True)
class Star:
    """A fixed star addressed by catalogue name (``"Aldebaran"``, ``",alTau"``)."""

    name: str


Target = Union[Body, Star]
TargetLike = Union[Body, Star, int, str]


def as_target(value: TargetLike, *, function: str | None = None) -> Target:
    """Normalise ``value`` to :class:`Body` or :class:`Star`."""

    if isinstance(value, (Body, Star)):
        return value
    # bool is an int subclass but never a body identifier
    if isinstance(value, bool):
        raise SweArgumentError("target must be a body id or star name, got bool", function=function)
    if isinstance(value, int):
        return Body(value)
    if isinstance(value, str):
        if not value:
            raise SweArgumentError("star name must not be empty", function=function)
        return Star(value)
    raise SweArgumentError(
        f"target must be a body id or star name, got {type(value).__name__}",
        function=function,
    )


def native_selector(target: Target) -> tuple[int, str | None]:
    """Return the ``(ipl, starname)`` pair; exactly one side is populated."""

    if isinstance(target, Star):
        return 0, target.name
    return int(target.ipl), None


def carrier_argument(target: Target) -> int | str:
    """Return the single body-or-star argument the ``swisseph`` module accepts."""

    ipl, starname = native_selector(target)
    return starname if starname is not None else ipl
