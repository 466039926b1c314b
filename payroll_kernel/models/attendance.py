"""
Attendance Entity (``payroll_kernel.models.attendance``).

One clock-in / clock-out record of one employee on one calendar day.
Many attendance records reference one employee by id; there is no
ownership between the two.
"""

from datetime import date, datetime, time
from decimal import Decimal

from payroll_kernel.logging_config import get_logger
from payroll_kernel.models._fields import (
    ZERO,
    optional_time,
    positive_int,
    required_date,
)

logger = get_logger("models.attendance")

_ENTITY = "Attendance"
_SECONDS_PER_HOUR = Decimal("3600")


class Attendance:
    """
    A daily attendance record.

    ``employee_id`` and ``work_date`` are required once set; ``log_in`` and
    ``log_out`` stay ``None`` until the employee clocks in or out.
    """

    def __init__(
        self,
        employee_id: int | None = None,
        work_date: date | None = None,
        log_in: time | None = None,
        log_out: time | None = None,
    ):
        self._employee_id: int | None = None
        self._work_date: date | None = None
        self._log_in: time | None = None
        self._log_out: time | None = None

        if employee_id is not None:
            self.employee_id = employee_id
        if work_date is not None:
            self.work_date = work_date
        self.log_in = log_in
        self.log_out = log_out

    @property
    def employee_id(self) -> int | None:
        return self._employee_id

    @employee_id.setter
    def employee_id(self, value: int) -> None:
        self._employee_id = positive_int(_ENTITY, "employee_id", value)

    @property
    def work_date(self) -> date | None:
        return self._work_date

    @work_date.setter
    def work_date(self, value: date) -> None:
        self._work_date = required_date(_ENTITY, "work_date", value)

    @property
    def log_in(self) -> time | None:
        return self._log_in

    @log_in.setter
    def log_in(self, value: time | None) -> None:
        self._log_in = optional_time(_ENTITY, "log_in", value)

    @property
    def log_out(self) -> time | None:
        return self._log_out

    @log_out.setter
    def log_out(self, value: time | None) -> None:
        self._log_out = optional_time(_ENTITY, "log_out", value)

    @property
    def worked_hours(self) -> Decimal:
        """
        Hours between log-in and log-out.

        Zero when either time is missing, or when the log-out is earlier
        than the log-in (the record cannot be trusted).
        """
        if self._log_in is None or self._log_out is None:
            return ZERO
        anchor = date.min
        span = datetime.combine(anchor, self._log_out) - datetime.combine(
            anchor, self._log_in
        )
        seconds = Decimal(int(span.total_seconds()))
        if seconds < ZERO:
            logger.warning(
                "attendance_negative_span",
                extra={
                    "employee_id": self._employee_id,
                    "work_date": self._work_date,
                    "log_in": self._log_in,
                    "log_out": self._log_out,
                },
            )
            return ZERO
        return seconds / _SECONDS_PER_HOUR

    def in_period(self, period_start: date, period_end: date) -> bool:
        """True if the record's date lies within [start, end] inclusive."""
        return (
            self._work_date is not None
            and period_start <= self._work_date <= period_end
        )

    def _key(self) -> tuple:
        return (self._employee_id, self._work_date, self._log_in, self._log_out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attendance):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Attendance(employee_id={self._employee_id!r}, "
            f"work_date={self._work_date!r}, log_in={self._log_in!r}, "
            f"log_out={self._log_out!r})"
        )
