"""
businesstime.constraints
~~~~~~~~~~~~~~~~~~~~~~~~

Composable business-time predicates.  A constraint answers one question,
"is this instant business time?", and constraints combine into a tree with
``And``, ``Or``, ``Not`` and ``Except`` (or the ``&``, ``|``, ``~``, ``-``
operators).

Basic usage::

    from businesstime.constraints import Except, dates, weekdays, between_hours_of_day

    office = Except(weekdays() & between_hours_of_day(9, 17), dates("2026-12-25"))
    office(datetime(2026, 12, 24, 10))   # → True
    office(datetime(2026, 12, 25, 10))   # → False

Public API
----------
Leaf, Not, And, Or   The constraint variants.
Except               ``And(base, Not(Or(*exceptions)))``.
is_business_time     Evaluate a constraint tree.
explain              Label of the constraint that rejects an instant.
any_time … public_holidays   Calendar leaf factories.
"""

from __future__ import annotations

from businesstime.constraints.calendar import (
    HOLIDAY,
    OUTSIDE_HOURS,
    WEEKEND,
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
from businesstime.constraints.composite import (
    NON_BUSINESS_LABEL,
    And,
    Constraint,
    Except,
    Leaf,
    Not,
    Or,
    explain,
    is_business_time,
)

__all__ = [
    "And",
    "Constraint",
    "Except",
    "HOLIDAY",
    "Leaf",
    "NON_BUSINESS_LABEL",
    "Not",
    "OUTSIDE_HOURS",
    "Or",
    "WEEKEND",
    "any_time",
    "between_dates",
    "between_days_of_week",
    "between_hours_of_day",
    "between_months_of_year",
    "between_times_of_day",
    "dates",
    "days_of_month",
    "days_of_week",
    "explain",
    "is_business_time",
    "months_of_year",
    "public_holidays",
    "weekdays",
    "weekends",
]
