# tests/test_events.py

import math
import typing

import pytest
from unittest.mock import patch

from sunpath.core.types import SolarAngles
from sunpath.engines import events


@pytest.fixture
def still_sun():
    """
    Force declination 0 and EoT 0 so that event times follow from geometry alone.
    """
    with patch("sunpath.reference.solar.solar_declination_and_eot") as mock:
        mock.return_value = SolarAngles(declination_deg=0.0, equation_of_time_min=0.0)
        yield mock

def test_equator_equinox_utc():
    ev = events.sunrise_sunset(0.0, 0.0, "2024-03-20", 0)
    assert ev.status == "normal"
    assert ev.valid
    assert ev.sunrise_min == pytest.approx(360.0, abs=15.0)
    assert ev.sunset_min == pytest.approx(1080.0, abs=15.0)
    assert ev.daylight_min == pytest.approx(720.0, abs=10.0)
    assert ev.sunrise_min < ev.solar_noon_min < ev.sunset_min

def test_solver_geometry_with_fixed_angles(still_sun):
    ev = events.sunrise_sunset(0.0, 0.0, "2024-03-20", 0)
    H = 90.833  # acos(cos(90.833 deg)) at the equator with zero declination
    assert ev.solar_noon_min == pytest.approx(720.0)
    assert ev.sunrise_min == pytest.approx(720.0 - 4.0 * H, abs=1e-6)
    assert ev.sunset_min == pytest.approx(720.0 + 4.0 * H, abs=1e-6)
    assert ev.daylight_min == pytest.approx(8.0 * H, abs=1e-6)
    assert still_sun.call_count == 1

def test_longitude_and_offset_shift_noon(still_sun):
    ev = events.sunrise_sunset(0.0, 15.0, "2024-03-20", 60)
    # 15 deg east -> solar noon one hour earlier in UTC, one hour later in local time
    assert ev.solar_noon_min == pytest.approx(720.0)
    ev = events.sunrise_sunset(0.0, 15.0, "2024-03-20", 0)
    assert ev.solar_noon_min == pytest.approx(660.0)

def test_polar_night():
    ev = events.sunrise_sunset(80.0, 0.0, "2024-12-21", 0)
    assert ev.status == "polar-night"
    assert ev.daylight_min == 0
    assert ev.sunrise_min is None and ev.sunset_min is None
    assert ev.solar_noon_min is not None

def test_polar_day():
    ev = events.sunrise_sunset(80.0, 0.0, "2024-06-21", 0)
    assert ev.status == "polar-day"
    assert ev.daylight_min == 1440
    assert ev.sunrise_min is None and ev.sunset_min is None

def test_southern_hemisphere_is_mirrored():
    ev = events.sunrise_sunset(-80.0, 0.0, "2024-06-21", 0)
    assert ev.status == "polar-night"

def test_unparseable_date():
    for bad in ("", "not-a-date", "2024-03", "2024/03/20"):
        ev = events.sunrise_sunset(10.0, 10.0, bad, 0)
        assert ev.status == "normal"
        assert not ev.valid
        assert ev.sunrise_min is None
        assert ev.sunset_min is None
        assert ev.solar_noon_min is None
        assert ev.daylight_min is None
        tw = events.twilight_times(10.0, 10.0, bad, 0)
        assert not tw.civil.defined

def test_calendar_invalid_date_rolls_over():
    rolled = events.sunrise_sunset(40.0, -74.0, "2024-02-30", -300)
    assert rolled.valid
    assert rolled == events.sunrise_sunset(40.0, -74.0, "2024-03-01", -300)
    assert events.twilight_times(40.0, -74.0, "2024-13-01", -300) == events.twilight_times(
        40.0, -74.0, "2025-01-01", -300
    )

def test_event_times_are_not_wrapped():
    # Tokyo longitude reported in UTC: sunrise falls on the previous UTC day
    ev = events.sunrise_sunset(35.7, 139.7, "2024-06-21", 0)
    assert ev.sunrise_min < 0
    # and with a large positive offset, sunset rolls past midnight
    ev = events.sunrise_sunset(35.7, -139.7, "2024-06-21", 0)
    assert ev.sunset_min > 1440

def test_twilight_ordering_mid_latitude():
    ev = events.sunrise_sunset(40.7, -74.0, "2024-09-10", -240)
    tw = events.twilight_times(40.7, -74.0, "2024-09-10", -240)
    chain = [
        tw.astronomical.start_min,
        tw.nautical.start_min,
        tw.civil.start_min,
        ev.sunrise_min,
        ev.solar_noon_min,
        ev.sunset_min,
        tw.civil.end_min,
        tw.nautical.end_min,
        tw.astronomical.end_min,
    ]
    assert all(v is not None for v in chain)
    assert chain == sorted(chain)
    # New York sunrise in early September is around 06:30 EDT
    assert ev.sunrise_min == pytest.approx(6 * 60 + 30, abs=15)

def test_twilight_band_missing_in_white_nights():
    # 60N around midsummer: the Sun never gets 12 deg below the horizon
    tw = events.twilight_times(60.0, 25.0, "2024-06-21", 180)
    assert tw.civil.defined
    assert not tw.nautical.defined
    assert not tw.astronomical.defined

def test_twilight_band_uses_requested_altitude():
    band = events.twilight_band(40.0, 0.0, "2024-03-20", 0, -6.0)
    tw = events.twilight_times(40.0, 0.0, "2024-03-20", 0)
    assert band == tw.civil

def test_daylight_matches_sunset_minus_sunrise():
    ev = events.sunrise_sunset(52.5, 13.4, "2024-04-15", 120)
    assert ev.daylight_min == pytest.approx(ev.sunset_min - ev.sunrise_min)
    assert math.isfinite(ev.daylight_min)

def test_twilight_altitudes_annotation():
    hints = typing.get_type_hints(events.twilight_times)
    assert hints["altitudes"] == typing.Tuple[float, float, float]
