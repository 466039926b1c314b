"""
Payroll Calculator Service (``payroll_services.payroll_calculator``).

Responsibility
--------------
Turns (employee id, pay period) into a ``PayrollResult``: validates the
request, reads the employee and the period's attendance through the
injected ``PayrollDataAccess``, and delegates every computation to the
pure engines in ``payroll_engines``.

Architecture position
---------------------
**Services layer** -- the single public entry point for payroll
calculation.  Holds only immutable configuration, the data-access
collaborator and a clock; no state survives between calls.

Invariants enforced
-------------------
* Validation order: employee id, missing dates, inverted period, future
  period end, employee existence.  The first failure raises.
* ``net_pay == gross_pay - total_deductions`` exactly (both operands are
  quantized before the subtraction).
* Undertime is not deducted; income tax is not withheld.
* Idempotent: identical inputs over unchanged data give equal results.

Failure modes
-------------
* ``InvalidEmployeeIdError`` -- id is None, not an int, zero or negative.
* ``InvalidPeriodError`` -- a bound is None or not a date, start > end,
  or end > today.  ``datetime`` bounds are truncated to their date.
* ``EmployeeNotFoundError`` -- no employee for a well-formed id.
* Errors from the data-access collaborator propagate unchanged; nothing
  is retried or swallowed.

Usage::

    calculator = PayrollCalculator(SqlPayrollDataAccess(session), clock=clock)
    result = calculator.calculate_payroll(
        10001, date(2024, 6, 1), date(2024, 6, 30),
    )
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from payroll_config.schema import PayrollConfig
from payroll_engines.attendance import aggregate_attendance
from payroll_engines.rates import daily_rate, hourly_rate, overtime_pay
from payroll_engines.statutory import calculate_statutory_deductions
from payroll_kernel.domain.clock import Clock, SystemClock
from payroll_kernel.exceptions import (
    EmployeeNotFoundError,
    InvalidEmployeeIdError,
    InvalidPeriodError,
    PayrollCalculationError,
)
from payroll_kernel.logging_config import LogContext, get_logger
from payroll_kernel.models.employee import Employee
from payroll_kernel.models.payroll import PayrollResult
from payroll_services.data_access import PayrollDataAccess

logger = get_logger("services.payroll_calculator")


class PayrollCalculator:
    """
    Stateless payroll calculation service.

    Safe to share between threads when the data-access collaborator allows
    concurrent reads.
    """

    def __init__(
        self,
        data_access: PayrollDataAccess,
        clock: Clock | None = None,
        config: PayrollConfig | None = None,
    ):
        self._data_access = data_access
        self._clock = clock or SystemClock()
        self._config = config or PayrollConfig()

    @property
    def config(self) -> PayrollConfig:
        return self._config

    # =========================================================================
    # Validation
    # =========================================================================

    @staticmethod
    def _validate_employee_id(employee_id: object) -> int:
        if (
            employee_id is None
            or isinstance(employee_id, bool)
            or not isinstance(employee_id, int)
            or employee_id <= 0
        ):
            raise InvalidEmployeeIdError(employee_id)
        return employee_id

    @staticmethod
    def _as_date(period_start: object, period_end: object, value: object) -> date:
        # datetime is a date subclass; keep only the calendar part
        if isinstance(value, datetime):
            return value.date()
        if not isinstance(value, date):
            raise InvalidPeriodError(
                period_start, period_end,
                f"period bounds must be dates, got {type(value).__name__}",
            )
        return value

    def _validate_period(
        self,
        period_start: date | None,
        period_end: date | None,
    ) -> tuple[date, date]:
        """Return the period as plain dates, or raise ``InvalidPeriodError``."""
        if period_start is None or period_end is None:
            raise InvalidPeriodError(
                period_start, period_end, "both period dates are required"
            )
        raw_start, raw_end = period_start, period_end
        period_start = self._as_date(raw_start, raw_end, raw_start)
        period_end = self._as_date(raw_start, raw_end, raw_end)
        if period_start > period_end:
            raise InvalidPeriodError(
                period_start, period_end, "period start is after period end"
            )
        today = self._clock.today()
        if period_end > today:
            raise InvalidPeriodError(
                period_start, period_end,
                f"period has not elapsed yet (today is {today.isoformat()})",
            )
        return period_start, period_end

    def _load_employee(self, employee_id: int) -> Employee:
        employee = self._data_access.find_employee_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    # =========================================================================
    # Calculation
    # =========================================================================

    def calculate_payroll(
        self,
        employee_id: int,
        period_start: date | None,
        period_end: date | None,
    ) -> PayrollResult:
        """
        Calculate one employee's pay for one elapsed period.

        Preconditions:
            - ``period_start`` and ``period_end`` are ``date`` (or ``datetime``)
              instances; anything else is rejected as an invalid period.
        Postconditions:
            - Returns a new ``PayrollResult``; nothing is persisted.

        Raises:
            InvalidEmployeeIdError, InvalidPeriodError, EmployeeNotFoundError.
        """
        with LogContext.bind(
            employee_id=str(employee_id), config_id=self._config.config_id
        ):
            logger.info(
                "payroll_calculation_started",
                extra={"period_start": period_start, "period_end": period_end},
            )
            try:
                valid_id = self._validate_employee_id(employee_id)
                period_start, period_end = self._validate_period(
                    period_start, period_end
                )
                employee = self._load_employee(valid_id)
            except PayrollCalculationError as exc:
                logger.warning(
                    "payroll_validation_failed",
                    extra={"error_code": exc.code, "reason": str(exc)},
                )
                raise

            result = self._compute(employee, period_start, period_end)

            logger.info(
                "payroll_calculation_completed",
                extra={
                    "days_worked": result.days_worked,
                    "overtime_hours": str(result.overtime_hours),
                    "gross_pay": str(result.gross_pay),
                    "total_deductions": str(result.total_deductions),
                    "net_pay": str(result.net_pay),
                },
            )
            return result

    def _compute(
        self,
        employee: Employee,
        period_start: date,
        period_end: date,
    ) -> PayrollResult:
        config = self._config
        schedule = config.work_schedule
        employee_id = employee.employee_id

        records = self._data_access.find_attendance_by_employee_and_period(
            employee_id, period_start, period_end
        )
        summary = aggregate_attendance(records, period_start, period_end, schedule)

        monthly_rate = employee.basic_salary
        daily = daily_rate(monthly_rate, schedule)
        hourly = hourly_rate(monthly_rate, schedule)

        base_pay = daily * summary.days_worked
        overtime = overtime_pay(summary.overtime_hours, hourly, schedule)
        gross_pay = self._round(base_pay + overtime + employee.total_allowances)

        deductions = calculate_statutory_deductions(monthly_rate, config)
        total_deductions = self._round(deductions.total)
        net_pay = gross_pay - total_deductions

        return PayrollResult(
            employee_id=employee_id,
            monthly_rate=monthly_rate,
            days_worked=summary.days_worked,
            overtime_hours=summary.overtime_hours,
            gross_pay=gross_pay,
            total_deductions=total_deductions,
            net_pay=net_pay,
            period_start=period_start,
            period_end=period_end,
            deductions=deductions,
        )

    def _round(self, amount: Decimal) -> Decimal:
        return amount.quantize(self._config.rounding_quantum, rounding=ROUND_HALF_UP)
