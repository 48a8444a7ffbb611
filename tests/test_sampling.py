# tests/test_sampling.py

import pytest

from sunpath import api
from sunpath.core.errors import UnknownProfileError
from sunpath.engines import sampling
from sunpath.engines.specs import ALL_SPECS, DEFAULT_SPEC, get_spec


def test_sun_path_covers_whole_day():
    path = sampling.sun_path(48.85, 2.35, "2024-06-21", 120, 5)
    assert len(path) == 289
    assert path[0].minute == 0
    assert path[-1].minute == 1440
    assert all(0.0 <= p.azimuth_deg < 360.0 for p in path)
    assert max(p.altitude_deg for p in path) == pytest.approx(90.0 - 48.85 + 23.44, abs=0.5)

def test_sun_path_invalid_date_is_empty():
    assert sampling.sun_path(0.0, 0.0, "bad", 0) == ()

def test_sun_path_rejects_non_positive_step():
    with pytest.raises(ValueError):
        sampling.sun_path(0.0, 0.0, "2024-01-01", 0, 0)

def test_altitude_series_mirrors_path():
    path = sampling.sun_path(10.0, 10.0, "2024-01-01", 60, 30)
    series = sampling.altitude_series(path)
    assert [s.minute for s in series] == [p.minute for p in path]
    assert [s.altitude_deg for s in series] == [p.altitude_deg for p in path]

def test_year_curves():
    curves = sampling.year_curves(35.0, 139.0, 2024, 540, emphasized_month=6)
    assert len(curves) == 12
    assert [c.month for c in curves] == list(range(1, 13))
    assert curves[0].reference_date == "2024-01-21"
    assert [c.emphasized for c in curves].count(True) == 1
    assert curves[5].emphasized
    assert all(len(c.points) == 145 for c in curves)
    # higher noon Sun in June than in December
    peak = lambda c: max(p.altitude_deg for p in c.points)
    assert peak(curves[5]) > peak(curves[11])

def test_year_curves_roll_short_months_forward():
    curves = sampling.year_curves(40.0, 0.0, 2024, 0, reference_day=30)
    feb = curves[1]
    assert feb.reference_date == "2024-02-30"
    assert len(feb.points) == 145
    assert feb.points == sampling.sun_path(40.0, 0.0, "2024-03-01", 0, 10)

def test_year_summary_northern_mid_latitude():
    s = sampling.year_summary(40.0, 0.0, 2024, 0)
    assert s.year == 2024
    assert "2024-06-14" <= s.longest_date <= "2024-06-28"
    assert s.shortest_date >= "2024-12-14" or s.shortest_date <= "2024-01-01"
    assert s.longest_daylight_min > 14 * 60
    assert s.shortest_daylight_min < 10 * 60
    assert "2024-06-14" <= s.max_noon_date <= "2024-06-28"
    assert s.max_noon_altitude_deg == pytest.approx(73.44, abs=0.3)
    assert s.min_noon_altitude_deg == pytest.approx(26.56, abs=0.3)

def test_year_summary_southern_hemisphere_swaps_seasons():
    s = sampling.year_summary(-33.9, 151.2, 2023, 600)
    assert s.longest_date.startswith("2023-12") or s.longest_date.startswith("2023-01")
    assert s.shortest_date.startswith("2023-06")

def test_year_summary_polar_extremes():
    s = sampling.year_summary(80.0, 0.0, 2024, 0)
    assert s.longest_daylight_min == 1440
    assert s.shortest_daylight_min == 0
    assert s.min_noon_altitude_deg < 0

def test_specs_registry():
    assert get_spec("default") is DEFAULT_SPEC
    assert set(ALL_SPECS) == {"default", "fine", "coarse"}
    assert get_spec("fine").path_step_min == 1
    with pytest.raises(UnknownProfileError):
        get_spec("nope")
    with pytest.raises(KeyError):
        get_spec("nope")

def test_spec_tweak_returns_copy():
    wide = DEFAULT_SPEC.tweak(golden_range=(-1.0, 10.0))
    assert wide.golden_range == (-1.0, 10.0)
    assert DEFAULT_SPEC.golden_range == (0.0, 6.0)

def test_day_report():
    r = api.day_report(51.5, -0.13, "2024-10-18", 14 * 60, 60)
    assert r is not None
    assert str(r.civil_date) == "2024-10-18"
    assert r.events.status == "normal"
    assert len(r.path) == 289
    assert len(r.photo_windows.golden) == 2
    assert r.position is not None and r.position.altitude_deg > 0
    assert r.position == api.position_at(51.5, -0.13, "2024-10-18", 14 * 60, 60)

def test_day_report_uses_profile_step():
    r = api.day_report(51.5, -0.13, "2024-10-18", 0, 60, spec=get_spec("coarse"))
    assert len(r.path) == 97

def test_day_report_invalid_date():
    assert api.day_report(0.0, 0.0, "not-a-date", 0, 0) is None
    assert api.position_at(0.0, 0.0, "not-a-date", 0, 0) is None

def test_year_overview():
    curves, summary = api.year_overview(40.0, -3.7, 2024, 60, emphasized_month=3)
    assert len(curves) == 12
    assert curves[2].emphasized
    assert summary.year == 2024
