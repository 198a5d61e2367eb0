"""Optional trailing arguments, arity, target routing and structured arrays."""

from __future__ import annotations

import pytest

import swebind
from swebind.targets import Body, Star, as_target, carrier_argument, native_selector
from tests.fake_swe import FakeSwe

JD = 2444838.972916667
ATMO = (1013.25, 15.0, 40.0, 0.25)
OBSERVER = (36.0, 1.0, 1.0, 1.0, 0.0, 0.0)


# -- optional trailing arguments ---------------------------------------------


def test_julday_default_calendar_is_gregorian(fake_swe: FakeSwe) -> None:
    implicit = swebind.swe_julday(1981, 8, 22, 11.35)
    implicit_args = fake_swe.args_of("julday")
    explicit = swebind.swe_julday(1981, 8, 22, 11.35, swebind.SE_GREG_CAL)
    assert implicit == explicit
    assert implicit_args == fake_swe.args_of("julday") == (1981, 8, 22, 11.35, 1)


@pytest.mark.parametrize(
    ("name", "args"),
    [
        ("swe_revjul", (JD,)),
        ("swe_jdet_to_utc", (JD,)),
        ("swe_jdut1_to_utc", (JD,)),
        ("swe_utc_to_jd", (1981, 8, 22, 11, 21, 0.0)),
    ],
)
def test_calendar_flag_defaults_match_explicit(fake_swe: FakeSwe, name: str, args: tuple) -> None:
    func = getattr(swebind, name)
    assert func(*args) == func(*args, swebind.SE_GREG_CAL)
    native = name.removeprefix("swe_")
    assert fake_swe.args_of(native)[-1] == 1


def test_cotrans_default_distance(fake_swe: FakeSwe) -> None:
    assert swebind.swe_cotrans(90, 99, -8) == swebind.swe_cotrans(90, 99, -8, 1.0)
    assert fake_swe.args_of("cotrans") == ((99.0, -8.0, 1.0), 90.0)


def test_cotrans_takes_obliquity_first(fake_swe: FakeSwe) -> None:
    swebind.swe_cotrans(23.44, 120.0, 5.0, 2.5)
    swebind.swe_cotrans_sp(23.44, 120.0, 5.0, 2.5, 1.0, 0.0, 0.0)
    coord, eps = fake_swe.args_of("cotrans")
    coord_sp, eps_sp = fake_swe.args_of("cotrans_sp")
    assert eps == eps_sp == 23.44
    assert coord == coord_sp[:3] == (120.0, 5.0, 2.5)


# -- arity ---------------------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "args"),
    [
        ("swe_julday", (1981, 8, 22)),
        ("swe_julday", (1981, 8, 22, 11.35, 1, 0)),
        ("swe_revjul", ()),
        ("swe_revjul", (JD, 1, 0)),
        ("swe_utc_to_jd", (1981, 8, 22, 11, 21)),
        ("swe_utc_to_jd", (1981, 8, 22, 11, 21, 0.0, 1, 0)),
        ("swe_cotrans", (90, 99)),
        ("swe_cotrans", (90, 99, -8, 1, 0)),
        ("swe_calc_ut", (JD, 0)),
        ("swe_rise_trans", (JD, 0, 4, 1, -112.18, 45.45, 0, 0)),
    ],
)
def test_wrong_argument_count_fails_before_native_call(
    fake_swe: FakeSwe, name: str, args: tuple
) -> None:
    with pytest.raises(TypeError):
        getattr(swebind, name)(*args)
    assert fake_swe.calls == []


# -- body / star selection -------------------------------------------------------


def test_target_normalisation() -> None:
    assert as_target(4) == Body(4)
    assert as_target("Aldebaran") == Star("Aldebaran")
    assert as_target(Star(",alTau")) == Star(",alTau")


@pytest.mark.parametrize("bad", [True, "", 1.5, None])
def test_invalid_targets_rejected(bad) -> None:
    with pytest.raises(swebind.SweArgumentError):
        as_target(bad)


def test_selector_populates_exactly_one_side() -> None:
    assert native_selector(Body(0)) == (0, None)
    assert native_selector(Star("Sirius")) == (0, "Sirius")
    assert carrier_argument(Body(4)) == 4
    assert carrier_argument(Star("Sirius")) == "Sirius"


@pytest.mark.parametrize(
    ("target", "expected"),
    [(0, 0), (Body(4), 4), ("Aldebaran", "Aldebaran"), (Star(",alTau"), ",alTau")],
)
def test_rise_trans_routes_target(fake_swe: FakeSwe, target, expected) -> None:
    swebind.swe_rise_trans(JD, target, 4, 1, -112.183333, 45.45, 1524, 0, 0)
    args = fake_swe.args_of("rise_trans")
    assert args[1] == expected
    assert type(args[1]) is type(expected)
    assert args[3] == (-112.183333, 45.45, 1524.0)
    assert args[6] == 4


@pytest.mark.parametrize(
    ("target", "expected"), [(swebind.Body(1), 1), (swebind.Star("Spica"), "Spica")]
)
def test_gauquelin_sector_routes_target(fake_swe: FakeSwe, target, expected) -> None:
    assert swebind.swe_gauquelin_sector(JD, target, 0, 0, -112.18, 45.45, 0, 0, 0) == 12.5
    assert fake_swe.args_of("gauquelin_sector")[1] == expected


def test_heliacal_body_target_uses_native_planet_name(fake_swe: FakeSwe) -> None:
    swebind.swe_vis_limit_mag(JD, -112.18, 45.45, 0.0, ATMO, OBSERVER, swebind.Body(4), 0)
    assert fake_swe.args_of("get_planet_name") == (4,)
    assert fake_swe.args_of("vis_limit_mag")[4] == "Mars"

    swebind.swe_vis_limit_mag(JD, -112.18, 45.45, 0.0, ATMO, OBSERVER, "Sirius", 0)
    assert fake_swe.args_of("vis_limit_mag")[4] == "Sirius"


# -- structured arrays ---------------------------------------------------------


@pytest.mark.parametrize(
    ("atmo", "observer"),
    [
        (ATMO[:3], OBSERVER),
        (ATMO, OBSERVER[:5]),
        ((), ()),
    ],
)
@pytest.mark.parametrize("name", ["swe_heliacal_ut", "swe_heliacal_pheno_ut"])
def test_short_structured_arrays_fail_before_native_call(
    fake_swe: FakeSwe, name: str, atmo, observer
) -> None:
    with pytest.raises(swebind.SweArgumentError):
        getattr(swebind, name)(JD, -112.18, 45.45, 0.0, atmo, observer, 4, 1, 0)
    assert fake_swe.calls == []


def test_vis_limit_short_observer(fake_swe: FakeSwe) -> None:
    with pytest.raises(swebind.SweArgumentError) as excinfo:
        swebind.swe_vis_limit_mag(JD, -112.18, 45.45, 0.0, ATMO, [36.0], "Sirius", 0)
    assert "observer" in str(excinfo.value)
    assert excinfo.value.function == "swe_vis_limit_mag"
    assert fake_swe.calls == []


def test_structured_arrays_copy_leading_elements(fake_swe: FakeSwe) -> None:
    long_atmo = list(ATMO) + [99.0]
    long_observer = list(OBSERVER) + [99.0, 98.0]
    swebind.swe_heliacal_ut(JD, -112.18, 45.45, 0.0, long_atmo, long_observer, "Venus", 1, 0)
    args = fake_swe.args_of("heliacal_ut")
    assert args[2] == ATMO
    assert args[3] == OBSERVER


# -- house system codes --------------------------------------------------------


@pytest.mark.parametrize("hsys", ["é", "", 7])
def test_bad_house_codes_rejected(fake_swe: FakeSwe, hsys) -> None:
    with pytest.raises(swebind.SweArgumentError) as excinfo:
        swebind.swe_houses(JD, 45.45, -112.18, hsys)
    assert excinfo.value.function == "swe_houses"
    assert fake_swe.calls == []
