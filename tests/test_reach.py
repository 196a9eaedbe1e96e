import pytest

from influence_engine.reach import duration_to_minutes, reach_to_days


def test_reach_unit_conversion():
    assert reach_to_days(3, "days") == 3
    assert reach_to_days(2, "weeks") == 14
    assert reach_to_days(2, "months") == 60
    assert reach_to_days(1, "years") == 365


def test_reach_value_defaults_to_one():
    assert reach_to_days(None, "days") == 1
    assert reach_to_days(0, "months") == 30
    assert reach_to_days(-4, "days") == 1
    assert reach_to_days("abc", "weeks") == 7
    assert reach_to_days(float("nan"), "days") == 1
    assert reach_to_days("3", "days") == 3


def test_unknown_reach_unit_counts_as_days():
    assert reach_to_days(5, "fortnights") == 5
    assert reach_to_days(5, None) == 5


@pytest.mark.parametrize(
    "duration,expected",
    [
        ("02:30", 150),
        ("00:45", 45),
        ("01:00", 60),
        ("02:30:00", 150),
        ("2", 60),
        (None, 60),
        ("", 60),
        ("bad", 60),
        ("1:xx", 60),
    ],
)
def test_duration_to_minutes(duration, expected):
    assert duration_to_minutes(duration) == expected
