from __future__ import annotations

import logging
from datetime import datetime, timedelta

import numpy as np

from .._exceptions import DegenerateRange
from ..engine import BusinessTime, Configuration, start_of_day

logger = logging.getLogger(__name__)

PARTIAL_DAY = "a partial business day"

_MICROSECOND = timedelta(microseconds=1)


class Period:
    """
    Half-open range ``[start, end)`` split into business and non-business
    time by a Configuration.

    Sub-periods returned by ``periods()`` and ``days()`` carry their own
    classification and label; a Period built directly derives both from
    its contents on demand.
    """

    def __init__(self, start: datetime, end: datetime, config: Configuration | None = None) -> None:
        if end < start:
            raise DegenerateRange(f"Period ends before it starts: {start} > {end}.")
        self._start = start
        self._end = end
        self._config = config if config is not None else Configuration()
        self._business: bool | None = None
        self._label: str | None = None

    @classmethod
    def _classified(cls, start: datetime, end: datetime, config: Configuration,
                    business: bool, label: str) -> Period:
        period = cls(start, end, config)
        period._business = business
        period._label = label
        return period

    def _sample(self) -> tuple[list[datetime], np.ndarray, np.ndarray]:
        if self._start == self._end:
            return [], np.zeros(0, dtype=np.int64), np.zeros(0, dtype=bool)
        return BusinessTime(self._config).sample(self._start, self._end)

    # ── decomposition ────────────────────────────────────────────────────

    def periods(self) -> list[Period]:
        """Maximal runs of constant classification, covering the range exactly."""
        starts, _, flags = self._sample()
        if not starts:
            return []
        # Index of the first step of every run.
        firsts = [0, *(np.flatnonzero(np.diff(flags)) + 1).tolist()]
        runs: list[Period] = []
        for i, j in zip(firsts, firsts[1:] + [len(starts)]):
            lo = starts[i]
            hi = starts[j] if j < len(starts) else self._end
            business = bool(flags[i])
            label = self._config.business_name if business else self._config.explain(lo)
            runs.append(Period._classified(lo, hi, self._config, business, label))
        logger.debug("Split %s..%s into %d periods.", self._start, self._end, len(runs))
        return runs

    def business_periods(self) -> list[Period]:
        return [p for p in self.periods() if p.is_business_time]

    def non_business_periods(self) -> list[Period]:
        return [p for p in self.periods() if not p.is_business_time]

    def days(self) -> list[Period]:
        """
        The range cut at midnights, one entry per calendar day it touches.  A
        day is a business day once its business time inside the range reaches
        the configured business day length.  A step is credited to the day its
        sample falls on.
        """
        starts, lengths, flags = self._sample()
        offsets = np.asarray([(s - self._start) // _MICROSECOND for s in starts], dtype=np.int64)
        full_day = self._config.business_day_length
        result: list[Period] = []
        lo = self._start
        while lo < self._end:
            hi = min(start_of_day(lo) + timedelta(days=1), self._end)
            first, stop = np.searchsorted(
                offsets, [(lo - self._start) // _MICROSECOND, (hi - self._start) // _MICROSECOND]
            )
            idx = np.arange(first, stop)
            business = timedelta(microseconds=int(lengths[idx][flags[idx]].sum()))
            if business >= full_day:
                label = self._config.business_name
            else:
                off = idx[~flags[idx]]
                sample_at = starts[int(off[0])] if off.size else lo
                label = self._config.explain(sample_at) or PARTIAL_DAY
            result.append(Period._classified(lo, hi, self._config, business >= full_day, label))
            lo = hi
        return result

    def business_days(self) -> list[Period]:
        return [d for d in self.days() if d.is_business_time]

    def non_business_days(self) -> list[Period]:
        return [d for d in self.days() if not d.is_business_time]

    # ── totals ───────────────────────────────────────────────────────────

    def business_time(self) -> timedelta:
        _, lengths, flags = self._sample()
        return timedelta(microseconds=int(lengths[flags].sum()))

    def non_business_time(self) -> timedelta:
        return self.length - self.business_time()

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def length(self) -> timedelta:
        return self._end - self._start

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def is_business_time(self) -> bool:
        if self._business is None:
            _, _, flags = self._sample()
            return bool(flags.size) and bool(flags.all())
        return self._business

    @property
    def label(self) -> str | None:
        """Business name, or the reason the period is not business time."""
        if self._label is not None:
            return self._label
        starts, _, flags = self._sample()
        off = np.flatnonzero(~flags)
        if off.size:
            return self._config.explain(starts[int(off[0])])
        return self._config.business_name if starts else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self._start, self._end) == (other._start, other._end)

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        kind = "business" if self.is_business_time else "non-business"
        return f"Period({self._start.isoformat()}, {self._end.isoformat()}, {kind}, label={self.label!r})"
