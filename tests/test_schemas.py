import pytest
from pydantic import ValidationError

from clock_adder.models.schemas import ClockTime


# ── Validation ───────────────────────────────────────────────────────────────

def test_valid_clock_time():
    clock = ClockTime(hour=12, minute=0, meridiem="AM")
    assert clock.hour == 12
    assert clock.minute == 0
    assert clock.meridiem == "AM"


def test_invalid_hour_zero():
    with pytest.raises(ValidationError, match="hour must be between"):
        ClockTime(hour=0, minute=0, meridiem="AM")


def test_invalid_hour_too_high():
    with pytest.raises(ValidationError, match="hour must be between"):
        ClockTime(hour=13, minute=0, meridiem="PM")


def test_invalid_minute_too_high():
    with pytest.raises(ValidationError, match="minute must be between"):
        ClockTime(hour=1, minute=60, meridiem="PM")


def test_invalid_meridiem():
    with pytest.raises(ValidationError, match="meridiem must be"):
        ClockTime(hour=1, minute=0, meridiem="pm")


def test_clock_time_is_frozen():
    clock = ClockTime(hour=1, minute=0, meridiem="PM")
    with pytest.raises(ValidationError):
        clock.hour = 2


def test_value_equality():
    assert ClockTime(hour=5, minute=15, meridiem="PM") == ClockTime(hour=5, minute=15, meridiem="PM")


# ── Arithmetic ───────────────────────────────────────────────────────────────

def test_from_minutes_boundaries():
    assert ClockTime.from_minutes(0) == ClockTime(hour=12, minute=0, meridiem="AM")
    assert ClockTime.from_minutes(60) == ClockTime(hour=1, minute=0, meridiem="AM")
    assert ClockTime.from_minutes(719) == ClockTime(hour=11, minute=59, meridiem="AM")
    assert ClockTime.from_minutes(720) == ClockTime(hour=12, minute=0, meridiem="PM")
    assert ClockTime.from_minutes(780) == ClockTime(hour=1, minute=0, meridiem="PM")


def test_every_minute_of_the_day_maps_back():
    for minutes in range(1440):
        assert ClockTime.from_minutes(minutes).to_minutes() == minutes


def test_plus_minutes_wraps_backwards():
    clock = ClockTime(hour=1, minute=30, meridiem="AM")
    assert clock.plus_minutes(-120) == ClockTime(hour=11, minute=30, meridiem="PM")


# ── Rendering ────────────────────────────────────────────────────────────────

def test_render_no_leading_zero_on_hour():
    assert ClockTime(hour=9, minute=5, meridiem="PM").render() == "9:05 PM"


def test_from_minutes_wraps_both_directions():
    assert ClockTime.from_minutes(1441).render() == "12:01 AM"
    assert ClockTime.from_minutes(-1).render() == "11:59 PM"
