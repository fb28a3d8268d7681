from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterable

import holidays as _holidays

from .._exceptions import InvalidConfiguration
from .composite import Label, Leaf

OUTSIDE_HOURS = "outside business hours"
WEEKEND = "the weekend"
HOLIDAY = "a holiday"

_DAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _weekday(day: int | str) -> int:
    """0 = Monday … 6 = Sunday; names and three-letter prefixes accepted."""
    if isinstance(day, str):
        key = day.strip().lower()
        for i, name in enumerate(_DAY_NAMES):
            if key == name or (len(key) >= 3 and name.startswith(key)):
                return i
        raise InvalidConfiguration(f"Unknown day of week {day!r}.")
    if not 0 <= day <= 6:
        raise InvalidConfiguration(f"Day of week must be in 0..6; got {day}.")
    return int(day)


def _parse_time(value: time | str) -> time:
    if isinstance(value, time):
        return value
    try:
        hh, mm = value.split(":")
        return time(int(hh), int(mm))
    except ValueError as ex:
        raise InvalidConfiguration(f"Time of day must look like 'HH:MM'; got {value!r}.") from ex


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except ValueError as ex:
        raise InvalidConfiguration(f"Dates must be ISO formatted; got {value!r}.") from ex


def _in_range(value, lo, hi) -> bool:
    """Inclusive-exclusive range that wraps around when ``hi <= lo``."""
    if lo < hi:
        return lo <= value < hi
    return value >= lo or value < hi


# ── always / never ───────────────────────────────────────────────────────────

def any_time(label: Label = None) -> Leaf:
    def any_time(_: datetime) -> bool:
        return True

    return Leaf(any_time, label)


# ── days of the week ─────────────────────────────────────────────────────────

def days_of_week(*days: int | str, label: Label = None) -> Leaf:
    wanted = frozenset(_weekday(d) for d in days)

    def days_of_week(instant: datetime) -> bool:
        return instant.weekday() in wanted

    return Leaf(days_of_week, label)


def weekdays(label: Label = WEEKEND) -> Leaf:
    return days_of_week(0, 1, 2, 3, 4, label=label)


def weekends(label: Label = "a weekday") -> Leaf:
    return days_of_week(5, 6, label=label)


def between_days_of_week(first: int | str, last: int | str, label: Label = None) -> Leaf:
    """Inclusive on both ends, wrapping past Sunday (``"fri", "mon"``)."""
    lo, hi = _weekday(first), _weekday(last)

    def between_days_of_week(instant: datetime) -> bool:
        return _in_range(instant.weekday(), lo, hi + 1)

    return Leaf(between_days_of_week, label)


# ── time of day ──────────────────────────────────────────────────────────────

def between_hours_of_day(start: int, end: int, label: Label = OUTSIDE_HOURS) -> Leaf:
    """``start <= hour < end``; ``end`` may be 24, and wraps past midnight."""
    if not (0 <= start <= 23 and 0 <= end <= 24) or start == end:
        raise InvalidConfiguration(f"Invalid hour range {start}..{end}.")
    return between_times_of_day(time(start), time(0) if end == 24 else time(end), label)


def between_times_of_day(start: time | str, end: time | str, label: Label = OUTSIDE_HOURS) -> Leaf:
    """``start <= time < end``; a range ending at or before its start crosses midnight."""
    lo, hi = _parse_time(start), _parse_time(end)
    if lo == hi and lo != time(0):
        raise InvalidConfiguration(f"Empty time range {lo}..{hi}.")

    def between_times_of_day(instant: datetime) -> bool:
        return _in_range(instant.time(), lo, hi)

    return Leaf(between_times_of_day, label)


# ── days, months, dates ──────────────────────────────────────────────────────

def days_of_month(*days: int, label: Label = None) -> Leaf:
    for d in days:
        if not 1 <= d <= 31:
            raise InvalidConfiguration(f"Day of month must be in 1..31; got {d}.")
    wanted = frozenset(days)

    def days_of_month(instant: datetime) -> bool:
        return instant.day in wanted

    return Leaf(days_of_month, label)


def months_of_year(*months: int, label: Label = None) -> Leaf:
    for m in months:
        if not 1 <= m <= 12:
            raise InvalidConfiguration(f"Month must be in 1..12; got {m}.")
    wanted = frozenset(months)

    def months_of_year(instant: datetime) -> bool:
        return instant.month in wanted

    return Leaf(months_of_year, label)


def between_months_of_year(first: int, last: int, label: Label = None) -> Leaf:
    """Inclusive on both ends; ``(11, 2)`` is November through February."""
    if not (1 <= first <= 12 and 1 <= last <= 12):
        raise InvalidConfiguration(f"Invalid month range {first}..{last}.")

    def between_months_of_year(instant: datetime) -> bool:
        if first <= last:
            return first <= instant.month <= last
        return instant.month >= first or instant.month <= last

    return Leaf(between_months_of_year, label)


def dates(*days: date | datetime | str, label: Label = HOLIDAY) -> Leaf:
    """
    True on the given calendar dates.

    Usually wrapped in ``Except`` or ``Not`` so the listed dates become
    non-business time::

        Except(weekdays(), dates("2026-12-25", "2026-12-26"))
    """
    wanted = frozenset(_as_date(d) for d in days)

    def dates(instant: datetime) -> bool:
        return instant.date() in wanted

    return Leaf(dates, label)


def between_dates(first: date | datetime | str, last: date | datetime | str,
                  label: Label = None) -> Leaf:
    lo, hi = _as_date(first), _as_date(last)
    if hi < lo:
        raise InvalidConfiguration(f"Date range ends before it starts: {lo}..{hi}.")

    def between_dates(instant: datetime) -> bool:
        return lo <= instant.date() <= hi

    return Leaf(between_dates, label)


def public_holidays(country: str, subdiv: str | None = None,
                    years: Iterable[int] | None = None,
                    label: Label = None) -> Leaf:
    """
    True on the public holidays of ``country`` (``holidays`` package data).

    The default label is the holiday's own name, e.g. "Christmas Day".
    Combine with ``Except`` to exclude holidays from business time::

        Except(weekdays() & between_hours_of_day(9, 17), public_holidays("GB", "ENG"))
    """
    try:
        calendar = _holidays.country_holidays(country, subdiv=subdiv, years=years)
    except NotImplementedError as ex:
        raise InvalidConfiguration(f"No holiday data for {country!r}/{subdiv!r}.") from ex

    def public_holidays(instant: datetime) -> bool:
        return instant.date() in calendar

    def name(instant: datetime) -> str:
        return calendar.get(instant.date()) or HOLIDAY

    return Leaf(public_holidays, name if label is None else label)
