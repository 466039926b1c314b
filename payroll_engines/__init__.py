"""
Module: payroll_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    payroll calculation engines.  This is the canonical import surface for
    ``payroll_services``.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May import payroll_kernel models/logging and payroll_config.schema.
    MUST NOT import payroll_services.

Invariants enforced:
    - Purity: engines NEVER call ``datetime.now()`` or ``date.today()``.
      Dates are passed in as explicit parameters.
    - Decimal-only arithmetic: all monetary amounts and hours use ``Decimal``.
    - Determinism: identical inputs always produce identical outputs.

Usage:
    from payroll_engines.rates import daily_rate, hourly_rate, overtime_pay
    from payroll_engines.attendance import aggregate_attendance
    from payroll_engines.statutory import calculate_statutory_deductions
"""

from payroll_engines.attendance import (
    AttendanceSummary,
    aggregate_attendance,
    daily_overtime,
)
from payroll_engines.rates import daily_rate, hourly_rate, overtime_pay
from payroll_engines.statutory import (
    calculate_statutory_deductions,
    health_insurance_contribution,
    housing_fund_contribution,
    social_insurance_contribution,
    total_statutory_deduction,
)

__all__ = [
    "AttendanceSummary",
    "aggregate_attendance",
    "calculate_statutory_deductions",
    "daily_overtime",
    "daily_rate",
    "health_insurance_contribution",
    "hourly_rate",
    "housing_fund_contribution",
    "overtime_pay",
    "social_insurance_contribution",
    "total_statutory_deduction",
]
