from __future__ import annotations

import pytest

import swebind
from swebind.timescale import GREG_CAL, JUL_CAL

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings
HealthCheck = hypothesis.HealthCheck

pytestmark = pytest.mark.swiss

JULIAN_DAYS = st.floats(
    min_value=1_721_425.5,  # 1 CE
    max_value=2_816_787.5,  # 3000 CE
    allow_nan=False,
    allow_infinity=False,
)
CALENDARS = st.sampled_from([GREG_CAL, JUL_CAL])


@pytest.mark.parametrize(
    ("date", "calendar"),
    [
        ((2000, 1, 1, 12.0), GREG_CAL),
        ((1066, 10, 14, 9.5), JUL_CAL),
    ],
)
def test_calendar_round_trip(date: tuple[int, int, int, float], calendar: int) -> None:
    jd = swebind.swe_julday(*date, calendar)
    back = swebind.swe_revjul(jd, calendar)
    assert back[:3] == date[:3]
    assert back.hour == pytest.approx(date[3], abs=1e-6)
    assert swebind.swe_julday(*back, calendar) == pytest.approx(jd, abs=1e-9)


def test_j2000() -> None:
    assert swebind.swe_julday(2000, 1, 1, 12.0) == 2451545.0


@settings(
    deadline=None,
    max_examples=200,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
@given(jd=JULIAN_DAYS, calendar=CALENDARS)
def test_revjul_then_julday_is_identity(jd: float, calendar: int) -> None:
    date = swebind.swe_revjul(jd, calendar)
    assert swebind.swe_julday(*date, calendar) == pytest.approx(jd, abs=1e-8)
