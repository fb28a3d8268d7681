"""
businesstime.period
~~~~~~~~~~~~~~~~~~~

Decompose a time range into business and non-business time.

Basic usage::

    from businesstime.period import Period

    week = Period(datetime(2026, 10, 16, 10), datetime(2026, 10, 19, 10))
    [p.label for p in week.non_business_periods()]
    # → ['outside business hours']   (Fri 17:00 to Mon 09:00, one run)
    len(week.business_days())

Public API
----------
Period   A half-open ``[start, end)`` range with its decomposition.
"""

from __future__ import annotations

from businesstime.period.period import Period

__all__ = ["Period"]
