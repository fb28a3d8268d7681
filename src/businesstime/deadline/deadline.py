from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterator

from .._exceptions import DegenerateRange, InvalidConfiguration, IterationLimitExceeded
from ..constraints import Constraint
from ..engine import Configuration, start_of_day

logger = logging.getLogger(__name__)


class Deadline:
    """
    A constraint set read as a recurring event: "Wednesdays at 17:00",
    "the last day of the month", ...

    The predicate is opaque, so occurrences are found by sampling in
    ``precision`` steps, never by solving for them.  A predicate that holds
    for longer than one step yields one occurrence per step.

    As everywhere else, an empty constraint set never holds: such a deadline
    never occurs and every search ends at the iteration limit.
    """

    def __init__(
        self,
        *constraints: Constraint,
        precision: timedelta | None = None,
        iteration_limit: int | None = None,
        clock: Callable[[], datetime] | None = None,
        config: Configuration | None = None,
    ) -> None:
        if config is None:
            config = Configuration(
                constraints, precision=precision, iteration_limit=iteration_limit, clock=clock
            )
        elif constraints or precision is not None or iteration_limit is not None or clock is not None:
            raise InvalidConfiguration("Pass either a configuration or its settings, not both.")
        self._config = config

    @classmethod
    def from_config(cls, config: Configuration) -> Deadline:
        return cls(config=config)

    # ── scanning ─────────────────────────────────────────────────────────

    def _scan(self, start: datetime, step: timedelta) -> Iterator[datetime]:
        limit = self._config.iteration_limit
        cursor = start
        for _ in range(limit):
            yield cursor
            cursor += step
        logger.warning("Deadline search from %s gave up after %d iterations.", start, limit)
        raise IterationLimitExceeded(limit)

    def occurs_at(self, instant: datetime) -> bool:
        return self._config.is_business_time(instant)

    def next_occurrence_from(self, reference: datetime) -> datetime:
        """First sample strictly after ``reference`` at which the deadline holds."""
        step = self._config.precision
        return next(t for t in self._scan(reference + step, step) if self.occurs_at(t))

    def previous_occurrence_from(self, reference: datetime) -> datetime:
        """First sample strictly before ``reference`` at which the deadline holds."""
        step = self._config.precision
        return next(t for t in self._scan(reference - step, -step) if self.occurs_at(t))

    def has_passed_between(self, start: datetime, end: datetime) -> bool:
        """Whether the deadline holds anywhere in ``[start, end]``; ``end`` is always sampled."""
        if end < start:
            raise DegenerateRange(f"Range ends before it starts: {start} > {end}.")
        step = self._config.precision
        for t in self._scan(start, step):
            if self.occurs_at(min(t, end)):
                return True
            if t >= end:
                return False
        return False

    def has_passed_today(self) -> bool:
        """Whether the previous occurrence before now fell on today's date."""
        now = self._config.now()
        return start_of_day(now) <= self.previous_occurrence_from(now) <= now

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def config(self) -> Configuration:
        return self._config

    def __repr__(self) -> str:
        return f"Deadline(config={self._config!r})"
