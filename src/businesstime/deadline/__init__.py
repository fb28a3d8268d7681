"""
businesstime.deadline
~~~~~~~~~~~~~~~~~~~~~

Recurring deadlines.  Any constraint set doubles as a recurring event; a
Deadline walks forward or backward in precision steps to find when it next
(or last) held.

Basic usage::

    from businesstime.constraints import days_of_week, between_hours_of_day
    from businesstime.deadline import Deadline

    cut_off = Deadline(days_of_week("wed"), between_hours_of_day(17, 18))
    cut_off.next_occurrence_from(datetime(2026, 10, 19, 12))   # → Wed 17:00
    cut_off.has_passed_today()

Public API
----------
Deadline   The recurring-deadline solver.
"""

from __future__ import annotations

from businesstime.deadline.deadline import Deadline

__all__ = ["Deadline"]
