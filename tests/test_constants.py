from __future__ import annotations

import logging

import pytest

import swebind
from swebind.constants import (
    ALL_CONSTANT_NAMES,
    constant,
    constant_table,
    native_attribute,
    reset_constants,
)
from tests.fake_swe import FakeSwe


@pytest.mark.parametrize(
    ("name", "attribute"),
    [
        ("SE_SUN", "SUN"),
        ("SEFLG_SPEED", "FLG_SPEED"),
        ("SE_SIDM_LAHIRI", "SIDM_LAHIRI"),
        ("SE_ECL2HOR", "ECL2HOR"),
    ],
)
def test_native_attribute(name: str, attribute: str) -> None:
    assert native_attribute(name) == attribute


def test_header_names_are_unique_and_prefixed() -> None:
    assert len(ALL_CONSTANT_NAMES) == len(set(ALL_CONSTANT_NAMES))
    assert all(name.startswith(("SE_", "SEFLG_")) for name in ALL_CONSTANT_NAMES)


def test_constants_copy_native_values(fake_swe: FakeSwe) -> None:
    assert swebind.SE_SUN == fake_swe.SUN
    assert swebind.SEFLG_SPEED == fake_swe.FLG_SPEED
    assert constant("SE_SIDM_USER") == 255


def test_table_is_cached_and_read_only(fake_swe: FakeSwe) -> None:
    first = constant_table()
    assert constant_table() is first
    with pytest.raises(TypeError):
        first["SE_SUN"] = 99  # type: ignore[index]


def test_reinitialisation_keeps_values(fake_swe: FakeSwe) -> None:
    first = dict(constant_table())
    reset_constants()
    assert dict(constant_table()) == first


def test_missing_native_constants_are_skipped(
    fake_swe: FakeSwe, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="swebind.constants"):
        table = constant_table()
    assert "SE_PLUTO" not in table
    assert "SE_PLUTO" in caplog.text
    with pytest.raises(AttributeError):
        swebind.SE_PLUTO  # noqa: B018


def test_unknown_attribute() -> None:
    with pytest.raises(AttributeError):
        swebind.NOT_A_CONSTANT  # noqa: B018


def test_dir_lists_constants() -> None:
    names = dir(swebind)
    assert "SE_SUN" in names
    assert "swe_calc_ut" in names
