"""
payroll_engines.rates -- Daily, hourly and overtime rate derivation.

Responsibility:
    Turn a monthly rate into the daily and hourly rates used for attendance
    based pay, and price overtime hours at the premium multiplier.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - daily_rate(m)  == m / working_days_per_month
    - hourly_rate(m) == daily_rate(m) / hours_per_day
    - overtime_pay(h, r) == h * r * overtime_multiplier  (flat premium,
      independent of hour count or time of day)
    - Divisors come from a validated ``WorkSchedule`` (always > 0), so no
      divide-by-zero path exists.

Failure modes:
    None for Decimal inputs.  Rates are NOT rounded here; callers quantize
    the final monetary amounts.
"""

from __future__ import annotations

from decimal import Decimal

from payroll_config.schema import WorkSchedule

_DEFAULT_SCHEDULE = WorkSchedule()


def daily_rate(monthly_rate: Decimal, schedule: WorkSchedule | None = None) -> Decimal:
    """Monthly rate spread over the standard working days of a month."""
    schedule = schedule or _DEFAULT_SCHEDULE
    return monthly_rate / schedule.working_days_per_month


def hourly_rate(monthly_rate: Decimal, schedule: WorkSchedule | None = None) -> Decimal:
    """Daily rate spread over the standard hours of a working day."""
    schedule = schedule or _DEFAULT_SCHEDULE
    return daily_rate(monthly_rate, schedule) / schedule.hours_per_day


def overtime_pay(
    hours: Decimal,
    hourly: Decimal,
    schedule: WorkSchedule | None = None,
) -> Decimal:
    """Overtime hours priced at the hourly rate times the premium multiplier."""
    schedule = schedule or _DEFAULT_SCHEDULE
    return hours * hourly * schedule.overtime_multiplier
