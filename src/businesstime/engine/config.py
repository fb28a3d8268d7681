from __future__ import annotations

import copy
from datetime import datetime, timedelta
from typing import Callable, Iterable

from .._exceptions import InvalidConfiguration
from ..constraints import Constraint, between_hours_of_day, explain, is_business_time, weekdays
from ..constraints.composite import _check


def default_constraints() -> tuple[Constraint, ...]:
    """Weekdays, 09:00 to 17:00."""
    return (weekdays(), between_hours_of_day(9, 17))


class Configuration:
    """
    Settings shared by the business-time engine, the deadline search and the period
    decomposer: an ordered set of constraints (AND-ed), the sampling
    precision, the iteration limit and the length of a business day.

    Every setter replaces its field wholesale and validates immediately.
    One configuration must not be mutated while an operation that reads it
    is running on another thread.
    """

    DEFAULT_PRECISION: timedelta = timedelta(hours=1)
    DEFAULT_ITERATION_LIMIT: int = 10_000
    DEFAULT_BUSINESS_DAY_LENGTH: timedelta = timedelta(hours=8)
    DEFAULT_BUSINESS_NAME: str = "business hours"

    def __init__(
        self,
        constraints: Iterable[Constraint] | None = None,
        precision: timedelta | None = None,
        iteration_limit: int | None = None,
        business_day_length: timedelta | None = None,
        business_name: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.set_constraints(*(default_constraints() if constraints is None else constraints))
        self.set_precision(self.DEFAULT_PRECISION if precision is None else precision)
        self.set_iteration_limit(
            self.DEFAULT_ITERATION_LIMIT if iteration_limit is None else iteration_limit
        )
        self.set_business_day_length(
            self.DEFAULT_BUSINESS_DAY_LENGTH if business_day_length is None else business_day_length
        )
        self._business_name: str = business_name or self.DEFAULT_BUSINESS_NAME
        self._clock: Callable[[], datetime] = clock or datetime.now

    # ── setters ──────────────────────────────────────────────────────────

    def set_constraints(self, *constraints: Constraint) -> Configuration:
        for c in constraints:
            _check(c)
        self._constraints: tuple[Constraint, ...] = tuple(constraints)
        return self

    def set_precision(self, precision: timedelta) -> Configuration:
        if not isinstance(precision, timedelta) or precision <= timedelta(0):
            raise InvalidConfiguration(f"Precision must be a positive timedelta; got {precision!r}.")
        self._precision: timedelta = precision
        return self

    def set_iteration_limit(self, limit: int) -> Configuration:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise InvalidConfiguration(f"Iteration limit must be a positive integer; got {limit!r}.")
        self._iteration_limit: int = limit
        return self

    def set_business_day_length(self, length: timedelta) -> Configuration:
        if not isinstance(length, timedelta) or length <= timedelta(0):
            raise InvalidConfiguration(
                f"Business day length must be a positive timedelta; got {length!r}."
            )
        self._business_day_length: timedelta = length
        return self

    def set_business_name(self, name: str) -> Configuration:
        if not name:
            raise InvalidConfiguration("Business name must not be empty.")
        self._business_name = name
        return self

    def set_clock(self, clock: Callable[[], datetime]) -> Configuration:
        self._clock = clock
        return self

    # ── classification ───────────────────────────────────────────────────

    def is_business_time(self, instant: datetime) -> bool:
        # An empty constraint set classifies nothing as business time.
        if not self._constraints:
            return False
        return all(is_business_time(c, instant) for c in self._constraints)

    def explain(self, instant: datetime) -> str | None:
        """Label of the first constraint, in configured order, that rejects ``instant``."""
        if not self._constraints:
            return "no business time configured"
        for c in self._constraints:
            reason = explain(c, instant)
            if reason is not None:
                return reason
        return None

    # ── copies ───────────────────────────────────────────────────────────

    def copy(self) -> Configuration:
        return copy.copy(self)

    def replace(self, **changes) -> Configuration:
        """Validated copy with some fields swapped, e.g. ``replace(precision=...)``."""
        clone = self.copy()
        for key, value in changes.items():
            setter = getattr(clone, f"set_{key}", None)
            if setter is None:
                raise InvalidConfiguration(f"Unknown configuration field {key!r}.")
            if key == "constraints":
                setter(*value)
            else:
                setter(value)
        return clone

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    @property
    def precision(self) -> timedelta:
        return self._precision

    @property
    def iteration_limit(self) -> int:
        return self._iteration_limit

    @property
    def business_day_length(self) -> timedelta:
        return self._business_day_length

    @property
    def business_name(self) -> str:
        return self._business_name

    def now(self) -> datetime:
        return self._clock()

    def __repr__(self) -> str:
        return (
            f"Configuration(constraints={len(self._constraints)}, "
            f"precision={self._precision}, "
            f"iteration_limit={self._iteration_limit}, "
            f"business_day_length={self._business_day_length})"
        )
