"""
Clock -- injectable source of "today".

Responsibility:
    ``PayrollCalculator`` refuses periods that end after today.  It asks a
    ``Clock`` for the date instead of calling ``date.today()`` so that the
    rule is reproducible in tests.

Architecture position:
    Kernel > Domain.  ``SystemClock`` is the only implementation that reads
    the real time.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timezone


class Clock(ABC):
    """
    Source of the current time.

    Contract:
        ``now()`` returns a timezone-aware ``datetime``; ``today()`` is its
        calendar date unless an implementation says otherwise.
    """

    @abstractmethod
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """
    Wall-clock time.

    ``today()`` is the local calendar date, which is what a payroll clerk
    means by "today" when closing a period.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return date.today()


class DeterministicClock(Clock):
    """Clock frozen at a given instant until ``set_time`` moves it."""

    DEFAULT_TIME = datetime(2024, 7, 15, 12, 0, 0, tzinfo=timezone.utc)

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or self.DEFAULT_TIME

    @classmethod
    def on_date(cls, on_date: date) -> "DeterministicClock":
        """Clock pinned to noon UTC on ``on_date``."""
        return cls(datetime.combine(on_date, time(12), tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, moment: datetime) -> None:
        self._fixed_time = moment
