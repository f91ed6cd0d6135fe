import pytest

from labor_hours.models import RoundingType
from labor_hours.rounding import round_hours


def test_nearest_quarter_hour():
    assert round_hours(7.9, 15, RoundingType.NEAREST) == pytest.approx(8.0)


def test_zero_interval_leaves_hours_untouched():
    assert round_hours(7.93, 0, RoundingType.UP) == 7.93


def test_up_and_down_snap_to_interval():
    assert round_hours(7.1, 15, RoundingType.UP) == pytest.approx(7.25)
    assert round_hours(7.2, 15, RoundingType.DOWN) == pytest.approx(7.0)


def test_nearest_rounds_half_up():
    # 7.125 is exactly halfway between 7.0 and 7.25
    assert round_hours(7.125, 15, "nearest") == pytest.approx(7.25)


def test_six_minute_interval():
    assert round_hours(7.94, 6, "nearest") == pytest.approx(7.9)


def test_value_on_six_minute_grid_is_kept_when_rounding_down():
    assert round_hours(0.7, 6, RoundingType.DOWN) == pytest.approx(0.7)
    assert round_hours(2.3, 6, RoundingType.DOWN) == pytest.approx(2.3)


def test_value_on_six_minute_grid_is_kept_when_rounding_up():
    assert round_hours(0.3, 6, RoundingType.UP) == pytest.approx(0.3)


def test_ten_minute_grid_values_survive_every_mode():
    for mode in RoundingType:
        assert round_hours(0.5, 10, mode) == pytest.approx(0.5)
