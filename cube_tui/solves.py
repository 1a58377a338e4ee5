"""
Solve history and derived statistics.

Every record carries the ao5/ao12 that held when it was inserted.
Session-level aggregates (personal bests, ao100, ao1k, mean, worst) are
kept consistent with the history after every insert, delete and load.
"""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from numbers import Real
from typing import Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class InvalidSolveError(ValueError):
    """Raised when a solve time is negative or not finite"""


class HistoryLoadError(Exception):
    """Raised when persisted history cannot be used"""


@dataclass(frozen=True)
class SolveRecord:
    elapsed_seconds: float
    average_of_5: Optional[float] = None
    average_of_12: Optional[float] = None
    date: str = ""
    hour: str = ""


@dataclass(frozen=True)
class Aggregates:
    count: int = 0
    pb_single: Optional[float] = None
    pb_ao5: Optional[float] = None
    pb_ao12: Optional[float] = None
    ao100: Optional[float] = None
    ao1k: Optional[float] = None
    rolling_average: Optional[float] = None
    worst: Optional[float] = None


def trimmed_mean(times: Sequence[float]) -> float:
    """Mean of the times with the single best and worst removed"""
    ordered = sorted(times)
    kept = ordered[1:-1]
    return sum(kept) / len(kept)


def trailing_average(times: Sequence[float], n: int, end: Optional[int] = None) -> Optional[float]:
    """Average of n (ao-n) over the window ending just before `end`"""
    if end is None:
        end = len(times)
    if end < n:
        return None
    return trimmed_mean(times[end - n:end])


def _min(current: Optional[float], value: Optional[float]) -> Optional[float]:
    if value is None:
        return current
    if current is None:
        return value
    return min(current, value)


def compute_aggregates(records: Sequence[SolveRecord]) -> Aggregates:
    """Recompute every aggregate from scratch"""
    if not records:
        return Aggregates()

    times = [r.elapsed_seconds for r in records]
    pb_ao5 = None
    pb_ao12 = None
    for r in records:
        pb_ao5 = _min(pb_ao5, r.average_of_5)
        pb_ao12 = _min(pb_ao12, r.average_of_12)

    return Aggregates(
        count=len(times),
        pb_single=min(times),
        pb_ao5=pb_ao5,
        pb_ao12=pb_ao12,
        ao100=trailing_average(times, 100),
        ao1k=trailing_average(times, 1000),
        rolling_average=sum(times) / len(times),
        worst=max(times),
    )


def _check_elapsed(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSolveError(f"solve time must be a number, got {value!r}")
    try:
        value = float(value)
    except OverflowError as exc:
        raise InvalidSolveError("solve time is too large") from exc
    if not math.isfinite(value) or value < 0:
        raise InvalidSolveError(f"solve time must be finite and non-negative, got {value!r}")
    return value


def _parse_entry(entry) -> SolveRecord:
    """Build an unannotated record from a persisted entry"""
    if isinstance(entry, dict):
        if "time" not in entry:
            raise InvalidSolveError("entry has no 'time'")
        return SolveRecord(
            elapsed_seconds=_check_elapsed(entry["time"]),
            date=str(entry.get("date", "")),
            hour=str(entry.get("hour", "")),
        )
    return SolveRecord(elapsed_seconds=_check_elapsed(entry))


class SolveHistory:
    """Ordered solve history (oldest first) with its aggregates"""

    def __init__(self):
        self._records: List[SolveRecord] = []
        self._times: List[float] = []
        self._total = 0.0
        self.aggregates = Aggregates()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @property
    def records(self) -> tuple:
        return tuple(self._records)

    @property
    def times(self) -> List[float]:
        return list(self._times)

    def _annotate(self, index: int) -> SolveRecord:
        record = self._records[index]
        return replace(
            record,
            average_of_5=trailing_average(self._times, 5, end=index + 1),
            average_of_12=trailing_average(self._times, 12, end=index + 1),
        )

    def _recompute(self):
        self._total = sum(self._times)
        self.aggregates = compute_aggregates(self._records)

    def insert(self, elapsed: float, solved_at: Optional[datetime] = None) -> SolveRecord:
        """Append a solve and return the stored, annotated record"""
        elapsed = _check_elapsed(elapsed)
        if solved_at is None:
            solved_at = datetime.now()

        self._times.append(elapsed)
        self._records.append(SolveRecord(
            elapsed_seconds=elapsed,
            date=solved_at.strftime("%Y-%m-%d"),
            hour=solved_at.strftime("%H:%M:%S"),
        ))
        record = self._annotate(len(self._records) - 1)
        self._records[-1] = record

        # Incremental update; compute_aggregates() must agree with this
        prev = self.aggregates
        self._total += elapsed
        count = len(self._times)
        self.aggregates = Aggregates(
            count=count,
            pb_single=_min(prev.pb_single, elapsed),
            pb_ao5=_min(prev.pb_ao5, record.average_of_5),
            pb_ao12=_min(prev.pb_ao12, record.average_of_12),
            ao100=trailing_average(self._times, 100),
            ao1k=trailing_average(self._times, 1000),
            rolling_average=self._total / count,
            worst=elapsed if prev.worst is None else max(prev.worst, elapsed),
        )
        logger.debug("Inserted solve #%d: %.3f s", count, elapsed)
        return record

    def delete(self, display_index: int) -> SolveRecord:
        """Delete the solve shown at `display_index` (newest first)"""
        count = len(self._records)
        if not 0 <= display_index < count:
            raise IndexError(f"no solve at row {display_index} (have {count})")

        index = count - 1 - display_index
        removed = self._records.pop(index)
        del self._times[index]

        # Later records whose ao12 (and so ao5) window covered the removed solve
        for i in range(index, min(index + 11, len(self._records))):
            self._records[i] = self._annotate(i)

        self._recompute()
        logger.info("Deleted solve %.3f s at position %d", removed.elapsed_seconds, index + 1)
        return removed

    def load(self, entries: Iterable):
        """Replace the history wholesale; nothing is kept if any entry is bad"""
        try:
            parsed = [_parse_entry(entry) for entry in entries]
        except (InvalidSolveError, TypeError) as exc:
            self.clear()
            raise HistoryLoadError(f"invalid solve record: {exc}") from exc

        self._records = parsed
        self._times = [r.elapsed_seconds for r in parsed]
        for i in range(len(self._records)):
            self._records[i] = self._annotate(i)
        self._recompute()
        logger.info("Loaded %d solves", len(self._records))

    def clear(self):
        self._records = []
        self._times = []
        self._recompute()

    def serialize(self) -> list:
        """Persistable entries; averages are recomputed on load"""
        return [
            {"time": r.elapsed_seconds, "date": r.date, "hour": r.hour}
            for r in self._records
        ]
