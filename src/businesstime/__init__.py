"""
businesstime
~~~~~~~~~~~~

Business-time arithmetic on top of ``datetime``: composable "is this business
time?" constraints, adding and diffing business hours and days, recurring
deadlines and period decomposition.

Basic usage::

    from datetime import datetime
    from businesstime import BusinessTime, Configuration, Except, dates, weekdays, between_hours_of_day

    config = Configuration([Except(weekdays(), dates("2026-12-25")), between_hours_of_day(9, 17)])
    bt = BusinessTime(config)
    bt.add_business_days(datetime(2026, 12, 24, 10), 1)   # → 2026-12-28 10:00

Public API
----------
BusinessTime            Add, subtract and diff business time.
Configuration           Constraints, precision, iteration limit, day length.
Deadline                Recurring-deadline solver.
Period                  Period decomposition.
BusinessTimeError       Base exception; IterationLimitExceeded,
                        InvalidConfiguration and DegenerateRange derive from it.
"""

from __future__ import annotations

from businesstime._exceptions import (
    BusinessTimeError,
    DegenerateRange,
    InvalidConfiguration,
    IterationLimitExceeded,
)
from businesstime.constraints import (
    And,
    Except,
    Leaf,
    Not,
    Or,
    any_time,
    between_dates,
    between_days_of_week,
    between_hours_of_day,
    between_months_of_year,
    between_times_of_day,
    dates,
    days_of_month,
    days_of_week,
    months_of_year,
    public_holidays,
    weekdays,
    weekends,
)
from businesstime.deadline import Deadline
from businesstime.engine import BusinessTime, Configuration
from businesstime.period import Period

__all__ = [
    "And",
    "BusinessTime",
    "BusinessTimeError",
    "Configuration",
    "Deadline",
    "DegenerateRange",
    "Except",
    "InvalidConfiguration",
    "IterationLimitExceeded",
    "Leaf",
    "Not",
    "Or",
    "Period",
    "any_time",
    "between_dates",
    "between_days_of_week",
    "between_hours_of_day",
    "between_months_of_year",
    "between_times_of_day",
    "dates",
    "days_of_month",
    "days_of_week",
    "months_of_year",
    "public_holidays",
    "weekdays",
    "weekends",
]
