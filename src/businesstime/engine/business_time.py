from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Iterable, Iterator

import numpy as np

from .._exceptions import InvalidConfiguration, IterationLimitExceeded
from .config import Configuration

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)
_HOUR = timedelta(hours=1)
_MICROSECOND = timedelta(microseconds=1)


def start_of_day(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


class BusinessTime:
    """
    Business-time arithmetic over a Configuration.

    Time is sampled in ``precision`` steps.  A step covers
    ``[t, t + precision)`` and takes the classification of ``t``, its earlier
    end, whichever direction the walk goes.  Every walk counts its steps and
    gives up with IterationLimitExceeded once ``iteration_limit`` is passed.
    """

    def __init__(self, config: Configuration | None = None) -> None:
        self._config = config if config is not None else Configuration()

    # ── stepping (shared by every operation) ─────────────────────────────

    def _guard(self, iterations: int) -> None:
        limit = self._config.iteration_limit
        if iterations > limit:
            logger.warning("Business-time walk stopped after %d iterations.", limit)
            raise IterationLimitExceeded(limit)

    def steps(self, start: datetime, end: datetime | None = None) -> Iterator[tuple[datetime, datetime]]:
        """
        Yield ``(lo, hi)`` sample intervals from ``start`` towards ``end``.

        The last interval is clipped to ``end``.  Without ``end`` the walk
        only stops at the iteration limit.
        """
        precision = self._config.precision
        cursor = start
        iterations = 0
        while end is None or cursor < end:
            iterations += 1
            self._guard(iterations)
            nxt = cursor + precision if end is None else min(cursor + precision, end)
            yield cursor, nxt
            cursor = nxt

    def sample(self, start: datetime, end: datetime) -> tuple[list[datetime], np.ndarray, np.ndarray]:
        """
        Sample ``[start, end)``.

        Returns the sample instants, the length of each step in microseconds
        and the business-time flag of each step.
        """
        starts: list[datetime] = []
        lengths: list[int] = []
        for lo, hi in self.steps(start, end):
            starts.append(lo)
            lengths.append((hi - lo) // _MICROSECOND)
        return starts, np.asarray(lengths, dtype=np.int64), self.classify(starts)

    # ── classification ───────────────────────────────────────────────────

    def is_business_time(self, instant: datetime) -> bool:
        return self._config.is_business_time(instant)

    def classify(self, instants: Iterable[datetime]) -> np.ndarray:
        """Business-time flags for many instants at once."""
        items = list(instants)
        return np.fromiter(
            (self._config.is_business_time(i) for i in items), dtype=bool, count=len(items)
        )

    def describe(self, instant: datetime) -> str:
        """``business_name`` for business time, otherwise why it is not."""
        reason = self._config.explain(instant)
        return self._config.business_name if reason is None else reason

    # ── add / sub ────────────────────────────────────────────────────────

    def _move(self, instant: datetime, amount: timedelta, forward: bool) -> datetime:
        precision = self._config.precision
        remaining = amount
        cursor = instant
        iterations = 0
        while remaining > _ZERO:
            iterations += 1
            self._guard(iterations)
            sample = cursor if forward else cursor - precision
            if self._config.is_business_time(sample):
                step = min(precision, remaining)
                remaining -= step
            else:
                step = precision
            cursor = cursor + step if forward else cursor - step
        logger.debug("Moved %s by %s business time to %s in %d steps.", instant, amount, cursor, iterations)
        return cursor

    def add_business_duration(self, instant: datetime, amount: timedelta) -> datetime:
        if amount == _ZERO:
            return instant
        if amount < _ZERO:
            return self._move(instant, -amount, forward=False)
        return self._move(instant, amount, forward=True)

    def sub_business_duration(self, instant: datetime, amount: timedelta) -> datetime:
        return self.add_business_duration(instant, -amount)

    def add_business_hours(self, instant: datetime, hours: float = 1) -> datetime:
        return self.add_business_duration(instant, _HOUR * hours)

    def add_business_hour(self, instant: datetime) -> datetime:
        return self.add_business_hours(instant, 1)

    def sub_business_hours(self, instant: datetime, hours: float = 1) -> datetime:
        return self.sub_business_duration(instant, _HOUR * hours)

    def sub_business_hour(self, instant: datetime) -> datetime:
        return self.sub_business_hours(instant, 1)

    def add_business_days(self, instant: datetime, days: float = 1) -> datetime:
        return self.add_business_duration(instant, self._config.business_day_length * days)

    def add_business_day(self, instant: datetime) -> datetime:
        return self.add_business_days(instant, 1)

    def sub_business_days(self, instant: datetime, days: float = 1) -> datetime:
        return self.sub_business_duration(instant, self._config.business_day_length * days)

    def sub_business_day(self, instant: datetime) -> datetime:
        return self.sub_business_days(instant, 1)

    # ── diff ─────────────────────────────────────────────────────────────

    def diff_business_time(self, a: datetime, b: datetime) -> timedelta:
        """Business time between ``a`` and ``b``, in either order."""
        lo, hi = (a, b) if a <= b else (b, a)
        if lo == hi:
            return _ZERO
        _, lengths, flags = self.sample(lo, hi)
        return timedelta(microseconds=int(lengths[flags].sum()))

    def diff_in_business_units(self, a: datetime, b: datetime, unit: timedelta,
                               partial: bool = False) -> float | int:
        ratio = self.diff_business_time(a, b) / unit
        # Truncate: a unit only counts once it has fully elapsed.
        return ratio if partial else math.floor(ratio)

    def diff_in_business_hours(self, a: datetime, b: datetime) -> int:
        return self.diff_in_business_units(a, b, _HOUR)

    def diff_in_partial_business_hours(self, a: datetime, b: datetime) -> float:
        return self.diff_in_business_units(a, b, _HOUR, partial=True)

    def diff_in_business_days(self, a: datetime, b: datetime) -> int:
        return self.diff_in_business_units(a, b, self._config.business_day_length)

    def diff_in_partial_business_days(self, a: datetime, b: datetime) -> float:
        return self.diff_in_business_units(a, b, self._config.business_day_length, partial=True)

    # ── business day boundaries ──────────────────────────────────────────

    def start_of_business_day(self, instant: datetime) -> datetime:
        """
        First business sample on or after the midnight of ``instant``'s day.
        A day without business time resolves to the next day that has some.
        """
        return next(
            lo for lo, _ in self.steps(start_of_day(instant)) if self._config.is_business_time(lo)
        )

    def end_of_business_day(self, instant: datetime) -> datetime:
        """End of the last business step on the day ``start_of_business_day`` lands on."""
        opening = self.start_of_business_day(instant)
        # Continue on the grid that found the opening; its first step is business time.
        starts, lengths, flags = self.sample(opening, start_of_day(opening) + timedelta(days=1))
        last = int(np.flatnonzero(flags)[-1])
        return starts[last] + timedelta(microseconds=int(lengths[last]))

    def derive_business_day_length(self, reference: datetime) -> timedelta:
        """
        Measure the business time in ``reference``'s calendar day and store it
        as the configured business day length.
        """
        day = start_of_day(reference)
        length = self.diff_business_time(day, day + timedelta(days=1))
        if length <= _ZERO:
            raise InvalidConfiguration(f"{day.date()} contains no business time.")
        self._config.set_business_day_length(length)
        logger.debug("Derived business day length %s from %s.", length, day.date())
        return length

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def config(self) -> Configuration:
        return self._config

    def __repr__(self) -> str:
        return f"BusinessTime(config={self._config!r})"
