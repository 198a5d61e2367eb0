from __future__ import annotations

import importlib.util
import os
import warnings
from collections.abc import Iterator
from pathlib import Path

import pytest

from swebind import _native
from swebind.constants import reset_constants
from swebind.context import SweContext, reset_default_context
from swebind.settings import reset_settings
from tests.fake_swe import FakeSwe

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; Swiss-marked tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )


# >>> AUTO-GEN BEGIN: swiss availability gating v1.0
def _have_pyswisseph() -> bool:
    return importlib.util.find_spec("swisseph") is not None


def _have_star_catalogue() -> bool:
    path = os.environ.get("SE_EPHE_PATH")
    if not path:
        return False
    return (Path(path).expanduser() / "sefstars.txt").is_file()


def pytest_collection_modifyitems(config, items):
    """Apply dynamic skips for the native library and its data files."""

    skip_swiss = None
    skip_data = None
    if not _have_pyswisseph():
        skip_swiss = pytest.mark.skip(reason="pyswisseph is not installed.")
    if not (_have_pyswisseph() and _have_star_catalogue()):
        skip_data = pytest.mark.skip(
            reason="Swiss Ephemeris data unavailable (SE_EPHE_PATH without sefstars.txt)."
        )

    for item in items:
        if skip_swiss and "swiss" in item.keywords:
            item.add_marker(skip_swiss)
        if skip_data and "swiss_data" in item.keywords:
            item.add_marker(skip_data)


# >>> AUTO-GEN END: swiss availability gating v1.0


@pytest.fixture(autouse=True)
def _isolated_native_state() -> Iterator[None]:
    """Every test starts with unknown native state and fresh caches."""

    reset_constants()
    reset_default_context()
    reset_settings()
    yield
    reset_constants()
    reset_default_context()
    reset_settings()


@pytest.fixture
def fake_swe(monkeypatch: pytest.MonkeyPatch) -> FakeSwe:
    module = FakeSwe()
    monkeypatch.setattr(_native, "_swe_mod", module)
    reset_constants()
    reset_default_context(SweContext())
    return module
