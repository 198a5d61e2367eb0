"""Swiss ephemeris data directory discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

__all__ = [
    "DEFAULT_ENV_KEYS",
    "EPHE_SUFFIXES",
    "get_se_ephe_path",
    "has_ephemeris_files",
    "iter_candidate_paths",
]

DEFAULT_ENV_KEYS: tuple[str, ...] = (
    "SE_EPHE_PATH",
    "SWE_EPH_PATH",
)
"""Environment variables checked (in order) for Swiss ephemeris paths."""

EPHE_SUFFIXES: tuple[str, ...] = (".se1", ".se2", ".se3", ".se4", ".se5")

_DEFAULT_HINTS: tuple[Path, ...] = (
    Path.home() / ".sweph",
    Path("/usr/share/sweph"),
    Path("/usr/share/libswisseph"),
)


def _first_env(keys: Iterable[str]) -> str | None:
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return None


def _ensure_dir(path: os.PathLike[str] | str | None) -> str | None:
    """Expand ``path`` to an absolute directory string when it exists."""

    if not path:
        return None
    candidate = Path(path).expanduser()
    if candidate.is_dir():
        return str(candidate)
    return None


def iter_candidate_paths(
    default: str | os.PathLike[str] | None = None,
) -> Iterator[str]:
    """Yield Swiss ephemeris path candidates in priority order."""

    seen: set[str] = set()

    default_dir = _ensure_dir(default)
    if default_dir:
        seen.add(default_dir)
        yield default_dir

    for hint in _DEFAULT_HINTS:
        candidate = _ensure_dir(hint)
        if candidate and candidate not in seen:
            seen.add(candidate)
            yield candidate


def get_se_ephe_path(default: str | os.PathLike[str] | None = None) -> str | None:
    """Return the Swiss ephemeris path or ``None`` when unavailable."""

    env_path = _ensure_dir(_first_env(DEFAULT_ENV_KEYS))
    if env_path:
        return env_path

    for candidate in iter_candidate_paths(default):
        return candidate
    return None


def has_ephemeris_files(path: str | os.PathLike[str] | None) -> bool:
    """Return ``True`` when ``path`` holds Swiss ``.se1``-``.se5`` files."""

    root = _ensure_dir(path)
    if root is None:
        return False
    try:
        entries = list(Path(root).iterdir())
    except OSError:
        return False
    return any(entry.is_file() and entry.suffix.lower() in EPHE_SUFFIXES for entry in entries)
