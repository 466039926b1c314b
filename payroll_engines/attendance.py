"""
payroll_engines.attendance -- Reduce attendance records to worked time.

Responsibility:
    Given one employee's attendance records and a pay period, count worked
    days, total hours and overtime hours.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Only records dated within [period_start, period_end] (inclusive) count.
    - Each qualifying record is one worked day, whatever its hours.
    - Hours beyond the standard day count toward overtime; a short day
      never produces negative overtime (undertime is not modeled).
    - Input order does not affect the result.

Failure modes:
    None.  An empty or fully out-of-range record set yields an all-zero
    summary (a new hire's first period is valid).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from payroll_config.schema import WorkSchedule
from payroll_engines.tracer import traced_engine
from payroll_kernel.logging_config import get_logger
from payroll_kernel.models.attendance import Attendance

logger = get_logger("engines.attendance")

_ZERO = Decimal("0")
_DEFAULT_SCHEDULE = WorkSchedule()


@dataclass(frozen=True)
class AttendanceSummary:
    """Worked time of one employee over one pay period."""

    days_worked: int = 0
    total_hours: Decimal = _ZERO
    overtime_hours: Decimal = _ZERO

    @property
    def regular_hours(self) -> Decimal:
        return self.total_hours - self.overtime_hours


def daily_overtime(worked_hours: Decimal, schedule: WorkSchedule | None = None) -> Decimal:
    """Hours worked beyond the standard day, floored at zero."""
    schedule = schedule or _DEFAULT_SCHEDULE
    return max(_ZERO, worked_hours - schedule.hours_per_day)


@traced_engine(
    "attendance_aggregator", "1.0",
    fingerprint_fields=("period_start", "period_end"),
)
def aggregate_attendance(
    records: Iterable[Attendance],
    period_start: date,
    period_end: date,
    schedule: WorkSchedule | None = None,
) -> AttendanceSummary:
    """
    Aggregate attendance records over a pay period.

    Preconditions:
        - ``period_start <= period_end`` (validated by the caller).
    Postconditions:
        - ``days_worked`` equals the number of in-period records.
        - ``0 <= overtime_hours <= total_hours``.
    """
    schedule = schedule or _DEFAULT_SCHEDULE

    days_worked = 0
    total_hours = _ZERO
    overtime_hours = _ZERO
    skipped = 0

    for record in records:
        if not record.in_period(period_start, period_end):
            skipped += 1
            continue
        hours = record.worked_hours
        days_worked += 1
        total_hours += hours
        overtime_hours += daily_overtime(hours, schedule)

    summary = AttendanceSummary(
        days_worked=days_worked,
        total_hours=total_hours,
        overtime_hours=overtime_hours,
    )
    logger.debug(
        "attendance_aggregated",
        extra={
            "period_start": period_start,
            "period_end": period_end,
            "days_worked": days_worked,
            "total_hours": str(total_hours),
            "overtime_hours": str(overtime_hours),
            "records_outside_period": skipped,
        },
    )
    return summary
