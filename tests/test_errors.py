"""Native failure translation, status codes and advisory results."""

from __future__ import annotations

import sys

import pytest
from prometheus_client import CollectorRegistry

import swebind
from swebind import _native
from swebind.observability import ensure_metrics_registered
from tests.fake_swe import FakeSwe

JD = 2444838.972916667


def _errors(registry: CollectorRegistry, function: str, error: str) -> float:
    value = registry.get_sample_value(
        "swebind_native_errors_total", {"function": function, "error": error}
    )
    return value or 0.0


def test_native_error_message_is_passed_through(fake_swe: FakeSwe) -> None:
    with pytest.raises(swebind.SweNativeError) as excinfo:
        swebind.swe_calc_ut(JD, 30, 0)
    assert str(excinfo.value) == "illegal planet number 30."
    assert excinfo.value.function == "swe_calc_ut"
    assert isinstance(excinfo.value.__cause__, fake_swe.Error)


def test_invalid_date_raises(fake_swe: FakeSwe) -> None:
    with pytest.raises(swebind.SweNativeError, match="invalid date"):
        swebind.swe_utc_to_jd(1981, 13, 22, 11, 21, 0.0)


def test_negative_status_raises_with_code(fake_swe: FakeSwe) -> None:
    fake_swe.rise_status = -1
    with pytest.raises(swebind.SweNativeError) as excinfo:
        swebind.swe_rise_trans(JD, 0, 4, 1, -112.18, 45.45, 0, 0, 0)
    assert excinfo.value.code == -1
    assert str(excinfo.value)


def test_circumpolar_rise_returns_none(fake_swe: FakeSwe) -> None:
    fake_swe.rise_status = -2
    assert swebind.swe_rise_trans(JD, 0, 4, 1, 15.0, 78.2, 0, 0, 0) is None
    assert swebind.swe_rise_trans_true_hor(JD, 0, 4, 1, 15.0, 78.2, 0, 0, 0, 1.0) is None


def test_rise_trans_returns_event_time(fake_swe: FakeSwe) -> None:
    assert swebind.swe_rise_trans(JD, 0, 4, 1, -112.18, 45.45, 0, 0, 0) == JD + 0.25
    assert swebind.swe_rise_trans_true_hor(JD, 0, 4, 1, -112.18, 45.45, 0, 0, 0, 1.0) == JD + 0.3
    assert fake_swe.args_of("rise_trans_true_hor")[6] == 1.0


def test_vis_limit_below_horizon_is_a_status(fake_swe: FakeSwe) -> None:
    fake_swe.vis_status = -2
    atmo = (1013.25, 15.0, 40.0, 0.25)
    observer = (36.0, 1.0, 1.0, 1.0, 0.0, 0.0)
    limit = swebind.swe_vis_limit_mag(JD, -112.18, 45.45, 0.0, atmo, observer, "Sirius", 0)
    assert limit.status == -2

    fake_swe.vis_status = -1
    with pytest.raises(swebind.SweNativeError):
        swebind.swe_vis_limit_mag(JD, -112.18, 45.45, 0.0, atmo, observer, "Sirius", 0)


@pytest.mark.parametrize(
    "name", ["swe_solcross_ut", "swe_solcross", "swe_mooncross_ut", "swe_mooncross"]
)
def test_crossing_time_before_start_is_an_error(fake_swe: FakeSwe, name: str) -> None:
    func = getattr(swebind, name)
    assert func(150.0, JD, 0) == JD + 10.0

    fake_swe.cross_offset = -1.0
    with pytest.raises(swebind.SweNativeError) as excinfo:
        func(150.0, JD, 0)
    assert "precedes search start" in str(excinfo.value)
    assert excinfo.value.function == name


def test_moon_node_crossing(fake_swe: FakeSwe) -> None:
    crossing = swebind.swe_mooncross_node_ut(JD, 0)
    assert crossing == swebind.MoonNodeCrossing(JD + 10.0, 120.0, 0.0)

    fake_swe.cross_offset = -0.5
    with pytest.raises(swebind.SweNativeError):
        swebind.swe_mooncross_node_ut(JD, 0)


def test_helio_cross_direction(fake_swe: FakeSwe) -> None:
    assert swebind.swe_helio_cross_ut(4, 0.0, JD, 0, 1) == JD + 100.0
    assert swebind.swe_helio_cross_ut(4, 0.0, JD, 0, -1) == JD - 100.0
    assert fake_swe.args_of("helio_cross_ut") == (4, 0.0, JD, 0, True)


def test_deltat_ex_returns_value_and_warning(fake_swe: FakeSwe, monkeypatch: pytest.MonkeyPatch) -> None:
    assert swebind.swe_deltat_ex(JD, 2) == swebind.DeltaT(0.0006, "")

    monkeypatch.setattr(
        fake_swe,
        "deltat_ex",
        lambda tjd, ephe: (0.00061, "SwissEph file not found, using Moshier"),
        raising=True,
    )
    result = swebind.swe_deltat_ex(JD, 2)
    assert result.value == 0.00061
    assert result.warning == "SwissEph file not found, using Moshier"


def test_ayanamsa_ex_returns_value(fake_swe: FakeSwe) -> None:
    assert swebind.swe_get_ayanamsa_ex_ut(JD, 4) == 23.6
    assert swebind.swe_get_ayanamsa_ex(JD, 4) == 23.6


def test_missing_native_function(fake_swe: FakeSwe, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(type(fake_swe), "sidtime")
    with pytest.raises(swebind.SweUnavailableError, match="swe_sidtime"):
        swebind.swe_sidtime(JD)


def test_missing_carrier(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(_native, "_swe_mod", None)
    monkeypatch.setitem(sys.modules, "swisseph", None)
    with pytest.raises(swebind.SweUnavailableError, match="pyswisseph"):
        swebind.swe_degnorm(10.0)


def test_error_hierarchy() -> None:
    assert issubclass(swebind.SweArgumentError, ValueError)
    assert issubclass(swebind.SweNativeError, RuntimeError)
    assert issubclass(swebind.SweUnavailableError, swebind.SweError)


def test_native_errors_are_counted(fake_swe: FakeSwe) -> None:
    registry = CollectorRegistry()
    ensure_metrics_registered(registry)
    ensure_metrics_registered(registry)

    before = _errors(registry, "swe_calc_ut", "native")
    with pytest.raises(swebind.SweNativeError):
        swebind.swe_calc_ut(JD, 31, 0)
    assert _errors(registry, "swe_calc_ut", "native") == before + 1

    before = _errors(registry, "swe_solcross_ut", "in_band")
    fake_swe.cross_offset = -1.0
    with pytest.raises(swebind.SweNativeError):
        swebind.swe_solcross_ut(0.0, JD, 0)
    assert _errors(registry, "swe_solcross_ut", "in_band") == before + 1


def test_native_calls_are_timed(fake_swe: FakeSwe) -> None:
    registry = CollectorRegistry()
    ensure_metrics_registered(registry)
    before = registry.get_sample_value(
        "swebind_native_call_duration_seconds_count", {"function": "swe_degnorm"}
    ) or 0.0
    swebind.swe_degnorm(400.0)
    after = registry.get_sample_value(
        "swebind_native_call_duration_seconds_count", {"function": "swe_degnorm"}
    )
    assert after == before + 1
