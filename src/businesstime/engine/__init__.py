"""
businesstime.engine
~~~~~~~~~~~~~~~~~~~

Business-time arithmetic.  A Configuration holds the constraints (AND-ed),
the sampling precision, the iteration limit and the business day length;
BusinessTime walks time in precision steps against it.

Basic usage::

    from datetime import datetime
    from businesstime.engine import BusinessTime

    bt = BusinessTime()                                      # Mon–Fri, 09:00–17:00
    bt.add_business_day(datetime(2026, 10, 16, 10))          # → Mon 2026-10-19 10:00
    bt.diff_in_partial_business_days(
        datetime(2026, 10, 16, 10), datetime(2026, 10, 17, 10)
    )                                                        # → 0.875

Public API
----------
BusinessTime         Add, subtract and diff business time.
Configuration        Constraints, precision, iteration limit, day length.
default_constraints  Weekdays 09:00–17:00.
start_of_day         Midnight of an instant's calendar day.
"""

from __future__ import annotations

from businesstime.engine.business_time import BusinessTime, start_of_day
from businesstime.engine.config import Configuration, default_constraints

__all__ = [
    "BusinessTime",
    "Configuration",
    "default_constraints",
    "start_of_day",
]
