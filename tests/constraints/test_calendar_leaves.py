"""
tests/constraints/test_calendar_leaves.py

Covers:
  - Day-of-week leaves (numbers, names, ranges wrapping past Sunday)
  - Hour and time-of-day leaves, including ranges crossing midnight
  - Day-of-month, month and date leaves
  - Public holidays from the holidays package, named by the holiday
  - Validation of malformed arguments
"""

from datetime import date, datetime, time, timezone

import pytest

from businesstime import InvalidConfiguration
from businesstime.constraints import (
    Except,
    any_time,
    between_dates,
    between_days_of_week,
    between_hours_of_day,
    between_months_of_year,
    between_times_of_day,
    dates,
    days_of_month,
    days_of_week,
    explain,
    months_of_year,
    public_holidays,
    weekdays,
    weekends,
)


# Week of 2026-10-12 (Monday) … 2026-10-18 (Sunday).
def day(weekday: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(2026, 10, 12 + weekday, hour, minute)


# ── Days of the week ──────────────────────────────────────────────────────────

class TestDaysOfWeek:

    def test_weekdays(self):
        leaf = weekdays()
        assert [leaf(day(d)) for d in range(7)] == [True] * 5 + [False] * 2

    def test_weekends(self):
        leaf = weekends()
        assert [leaf(day(d)) for d in range(7)] == [False] * 5 + [True] * 2

    def test_weekdays_narrate_the_weekend(self):
        assert explain(weekdays(), day(5)) == "the weekend"

    def test_names_and_prefixes(self):
        leaf = days_of_week("Monday", "wed", 4)
        assert [d for d in range(7) if leaf(day(d))] == [0, 2, 4]

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidConfiguration):
            days_of_week("funday")

    def test_out_of_range_raises(self):
        with pytest.raises(InvalidConfiguration):
            days_of_week(7)

    def test_between_days_inclusive(self):
        leaf = between_days_of_week("tue", "thu")
        assert [d for d in range(7) if leaf(day(d))] == [1, 2, 3]

    def test_between_days_wraps_past_sunday(self):
        leaf = between_days_of_week("fri", "mon")
        assert [d for d in range(7) if leaf(day(d))] == [0, 4, 5, 6]

    def test_between_days_single_day(self):
        leaf = between_days_of_week(6, 6)
        assert [d for d in range(7) if leaf(day(d))] == [6]


# ── Time of day ───────────────────────────────────────────────────────────────

class TestTimeOfDay:

    def test_hours_half_open(self):
        leaf = between_hours_of_day(9, 17)
        assert not leaf(day(0, 8, 59))
        assert leaf(day(0, 9))
        assert leaf(day(0, 16, 59))
        assert not leaf(day(0, 17))

    def test_hours_cross_midnight(self):
        leaf = between_hours_of_day(22, 6)
        assert leaf(day(0, 23))
        assert leaf(day(0, 5, 59))
        assert not leaf(day(0, 6))
        assert not leaf(day(0, 21))

    def test_hours_until_24(self):
        leaf = between_hours_of_day(18, 24)
        assert leaf(day(0, 23, 59))
        assert not leaf(day(0, 0))

    def test_whole_day(self):
        leaf = between_hours_of_day(0, 24)
        assert all(leaf(day(0, h)) for h in range(24))

    def test_empty_hour_range_raises(self):
        with pytest.raises(InvalidConfiguration):
            between_hours_of_day(9, 9)
        with pytest.raises(InvalidConfiguration):
            between_hours_of_day(9, 25)

    def test_times_of_day(self):
        leaf = between_times_of_day("09:30", time(17, 15))
        assert not leaf(day(0, 9, 29))
        assert leaf(day(0, 9, 30))
        assert leaf(day(0, 17, 14))
        assert not leaf(day(0, 17, 15))

    def test_malformed_time_raises(self):
        with pytest.raises(InvalidConfiguration):
            between_times_of_day("9", "17:00")

    def test_aware_instant(self):
        leaf = between_hours_of_day(9, 17)
        assert leaf(datetime(2026, 10, 16, 10, tzinfo=timezone.utc))
        assert not leaf(datetime(2026, 10, 16, 18, tzinfo=timezone.utc))

    def test_label_outside_business_hours(self):
        assert explain(between_hours_of_day(9, 17), day(0, 20)) == "outside business hours"


# ── Days, months, dates ───────────────────────────────────────────────────────

class TestCalendarDates:

    def test_days_of_month(self):
        leaf = days_of_month(1, 15)
        assert leaf(datetime(2026, 10, 15, 3))
        assert not leaf(datetime(2026, 10, 16, 3))

    def test_days_of_month_validation(self):
        with pytest.raises(InvalidConfiguration):
            days_of_month(32)

    def test_months_of_year(self):
        leaf = months_of_year(12)
        assert leaf(datetime(2026, 12, 1))
        assert not leaf(datetime(2026, 11, 30))

    def test_between_months_wraps(self):
        leaf = between_months_of_year(11, 2)
        assert leaf(datetime(2026, 1, 5))
        assert leaf(datetime(2026, 11, 5))
        assert not leaf(datetime(2026, 3, 5))

    def test_dates_accepts_strings_dates_and_datetimes(self):
        leaf = dates("2026-12-25", date(2026, 12, 26), datetime(2027, 1, 1, 15))
        assert leaf(datetime(2026, 12, 25, 10))
        assert leaf(datetime(2026, 12, 26, 23, 59))
        assert leaf(datetime(2027, 1, 1))
        assert not leaf(datetime(2026, 12, 24, 10))

    def test_dates_label(self):
        assert explain(Except(any_time(), dates("2026-12-25")), datetime(2026, 12, 25)) == "a holiday"

    def test_malformed_date_raises(self):
        with pytest.raises(InvalidConfiguration):
            dates("25/12/2026")

    def test_between_dates_inclusive(self):
        leaf = between_dates("2026-12-24", "2026-12-26")
        assert leaf(datetime(2026, 12, 24))
        assert leaf(datetime(2026, 12, 26, 23))
        assert not leaf(datetime(2026, 12, 27))

    def test_between_dates_reversed_raises(self):
        with pytest.raises(InvalidConfiguration):
            between_dates("2026-12-26", "2026-12-24")

    def test_any_time(self):
        assert any_time()(datetime(2026, 1, 1))


# ── Public holidays ───────────────────────────────────────────────────────────

class TestPublicHolidays:

    def test_christmas_is_a_holiday(self):
        leaf = public_holidays("US")
        assert leaf(datetime(2026, 12, 25, 10))
        assert not leaf(datetime(2026, 12, 23, 10))

    def test_label_is_holiday_name(self):
        tree = Except(weekdays(), public_holidays("US"))
        assert explain(tree, datetime(2026, 12, 25, 10)) == "Christmas Day"

    def test_explicit_label(self):
        tree = Except(weekdays(), public_holidays("US", label="closed"))
        assert explain(tree, datetime(2026, 12, 25, 10)) == "closed"

    def test_unknown_country_raises(self):
        with pytest.raises(InvalidConfiguration):
            public_holidays("XX")
