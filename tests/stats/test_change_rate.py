import pytest

from onlychurch.stats.change_rate import change_rate, share
from onlychurch.stats.presentation import format_change


def test_from_zero_to_zero_is_zero():
    assert change_rate(0, 0) == 0
    assert format_change(change_rate(0, 0)) == "+0%"


@pytest.mark.parametrize("current", [1, 7, 250])
def test_from_zero_to_something_is_a_hundred(current):
    assert change_rate(current, 0) == 100


@pytest.mark.parametrize(
    "current,previous,expected",
    [
        (12, 10, 20),
        (10, 12, -17),
        (5, 5, 0),
        (0, 4, -100),
        (3, 1, 200),
    ],
)
def test_rounded_percentage(current, previous, expected):
    assert change_rate(current, previous) == expected
    assert change_rate(current, previous) == round((current - previous) / previous * 100)


def test_twelve_vs_ten_renders_plus_twenty():
    assert format_change(change_rate(12, 10)) == "+20%"


def test_negative_change_keeps_its_sign():
    assert format_change(change_rate(9, 10)) == "-10%"


def test_negative_counts_are_rejected():
    with pytest.raises(ValueError):
        change_rate(-1, 3)


def test_share_handles_empty_whole():
    assert share(3, 0) == 0
    assert share(3, 4) == 75
