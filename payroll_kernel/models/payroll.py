"""
Payroll Result Entities (``payroll_kernel.models.payroll``).

Responsibility
--------------
Value objects produced by ``PayrollCalculator`` for one (employee, period):
the per-fund statutory deduction breakdown and the payroll result itself.

Invariants enforced
-------------------
* ``employee_id`` is a positive integer.
* ``monthly_rate`` >= 0, ``days_worked`` >= 0, ``overtime_hours`` >= 0.
* ``net_pay == gross_pay - total_deductions`` is enforced by the calculator
  that assembles the result, NOT by this entity.

Failure modes
-------------
* Rejected setter values raise ``InvalidFieldError``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from payroll_kernel.models._fields import (
    ZERO,
    non_negative_decimal,
    non_negative_int,
    optional_date,
    positive_int,
    to_decimal,
)

_ENTITY = "PayrollResult"


@dataclass(frozen=True)
class StatutoryDeductions:
    """Per-fund government contributions withheld for one month."""
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal

    @property
    def total(self) -> Decimal:
        return self.social_insurance + self.health_insurance + self.housing_fund


class PayrollResult:
    """Computed pay of one employee for one pay period."""

    def __init__(
        self,
        employee_id: int | None = None,
        *,
        monthly_rate: Decimal | float | int | str = ZERO,
        days_worked: int = 0,
        overtime_hours: Decimal | float | int | str = ZERO,
        gross_pay: Decimal | float | int | str = ZERO,
        total_deductions: Decimal | float | int | str = ZERO,
        net_pay: Decimal | float | int | str = ZERO,
        period_start: date | None = None,
        period_end: date | None = None,
        deductions: StatutoryDeductions | None = None,
    ):
        self._employee_id: int | None = None
        if employee_id is not None:
            self.employee_id = employee_id
        self.monthly_rate = monthly_rate
        self.days_worked = days_worked
        self.overtime_hours = overtime_hours
        self.gross_pay = gross_pay
        self.total_deductions = total_deductions
        self.net_pay = net_pay
        self.period_start = period_start
        self.period_end = period_end
        self.deductions = deductions

    @property
    def employee_id(self) -> int | None:
        return self._employee_id

    @employee_id.setter
    def employee_id(self, value: int) -> None:
        self._employee_id = positive_int(_ENTITY, "employee_id", value)

    @property
    def monthly_rate(self) -> Decimal:
        return self._monthly_rate

    @monthly_rate.setter
    def monthly_rate(self, value: Decimal | float | int | str) -> None:
        self._monthly_rate = non_negative_decimal(_ENTITY, "monthly_rate", value)

    @property
    def days_worked(self) -> int:
        return self._days_worked

    @days_worked.setter
    def days_worked(self, value: int) -> None:
        self._days_worked = non_negative_int(_ENTITY, "days_worked", value)

    @property
    def overtime_hours(self) -> Decimal:
        return self._overtime_hours

    @overtime_hours.setter
    def overtime_hours(self, value: Decimal | float | int | str) -> None:
        self._overtime_hours = non_negative_decimal(_ENTITY, "overtime_hours", value)

    @property
    def gross_pay(self) -> Decimal:
        return self._gross_pay

    @gross_pay.setter
    def gross_pay(self, value: Decimal | float | int | str) -> None:
        self._gross_pay = to_decimal(_ENTITY, "gross_pay", value)

    @property
    def total_deductions(self) -> Decimal:
        return self._total_deductions

    @total_deductions.setter
    def total_deductions(self, value: Decimal | float | int | str) -> None:
        self._total_deductions = to_decimal(_ENTITY, "total_deductions", value)

    @property
    def net_pay(self) -> Decimal:
        return self._net_pay

    @net_pay.setter
    def net_pay(self, value: Decimal | float | int | str) -> None:
        self._net_pay = to_decimal(_ENTITY, "net_pay", value)

    @property
    def period_start(self) -> date | None:
        return self._period_start

    @period_start.setter
    def period_start(self, value: date | None) -> None:
        self._period_start = optional_date(_ENTITY, "period_start", value)

    @property
    def period_end(self) -> date | None:
        return self._period_end

    @period_end.setter
    def period_end(self, value: date | None) -> None:
        self._period_end = optional_date(_ENTITY, "period_end", value)

    def _key(self) -> tuple:
        return (
            self._employee_id,
            self._monthly_rate,
            self._days_worked,
            self._overtime_hours,
            self._gross_pay,
            self._total_deductions,
            self._net_pay,
            self._period_start,
            self._period_end,
            self.deductions,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PayrollResult):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"PayrollResult(employee_id={self._employee_id!r}, "
            f"days_worked={self._days_worked!r}, gross_pay={self._gross_pay!r}, "
            f"total_deductions={self._total_deductions!r}, net_pay={self._net_pay!r})"
        )
