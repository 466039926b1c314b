"""
Employee Entity (``payroll_kernel.models.employee``).

Responsibility
--------------
Validated compensation and identity profile of one employee: id, names,
birthday, basic monthly salary, employment status, position and the three
fixed monthly allowances.

Architecture position
---------------------
**Kernel > Models** -- pure data with ZERO I/O.  Loaded by a data-access
adapter and read by ``PayrollCalculator``.

Invariants enforced
-------------------
* ``employee_id`` is a positive integer.
* ``first_name`` / ``last_name`` contain at least one non-whitespace char.
* ``basic_salary`` and every allowance are non-negative ``Decimal``.
* Every setter re-validates; an employee is never left half-invalid by a
  rejected assignment.

Failure modes
-------------
* Any rejected value raises ``InvalidFieldError``.
"""

from datetime import date
from decimal import Decimal

from payroll_kernel.domain.clock import Clock, SystemClock
from payroll_kernel.logging_config import get_logger
from payroll_kernel.models._fields import (
    ZERO,
    non_blank_str,
    non_negative_decimal,
    optional_date,
    positive_int,
)

logger = get_logger("models.employee")

_ENTITY = "Employee"


class Employee:
    """
    An employee for payroll purposes.

    May be constructed blank and filled through the validated properties,
    or constructed with keyword arguments that go through the same setters.
    """

    def __init__(
        self,
        employee_id: int | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        *,
        birthday: date | None = None,
        basic_salary: Decimal | float | int | str = ZERO,
        status: str | None = None,
        position: str | None = None,
        rice_subsidy: Decimal | float | int | str = ZERO,
        phone_allowance: Decimal | float | int | str = ZERO,
        clothing_allowance: Decimal | float | int | str = ZERO,
    ):
        self._employee_id: int | None = None
        self._first_name: str | None = None
        self._last_name: str | None = None
        self._birthday: date | None = None
        self._basic_salary: Decimal = ZERO
        self.status = status
        self.position = position
        self._rice_subsidy: Decimal = ZERO
        self._phone_allowance: Decimal = ZERO
        self._clothing_allowance: Decimal = ZERO

        if employee_id is not None:
            self.employee_id = employee_id
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self.birthday = birthday
        self.basic_salary = basic_salary
        self.rice_subsidy = rice_subsidy
        self.phone_allowance = phone_allowance
        self.clothing_allowance = clothing_allowance

        logger.debug(
            "employee_initialized",
            extra={
                "employee_id": self._employee_id,
                "basic_salary": str(self._basic_salary),
                "status": self.status,
            },
        )

    # -- identity ----------------------------------------------------------

    @property
    def employee_id(self) -> int | None:
        return self._employee_id

    @employee_id.setter
    def employee_id(self, value: int) -> None:
        self._employee_id = positive_int(_ENTITY, "employee_id", value)

    @property
    def first_name(self) -> str | None:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = non_blank_str(_ENTITY, "first_name", value)

    @property
    def last_name(self) -> str | None:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = non_blank_str(_ENTITY, "last_name", value)

    @property
    def birthday(self) -> date | None:
        return self._birthday

    @birthday.setter
    def birthday(self, value: date | None) -> None:
        self._birthday = optional_date(_ENTITY, "birthday", value)

    # -- compensation ------------------------------------------------------

    @property
    def basic_salary(self) -> Decimal:
        """Basic monthly salary."""
        return self._basic_salary

    @basic_salary.setter
    def basic_salary(self, value: Decimal | float | int | str) -> None:
        self._basic_salary = non_negative_decimal(_ENTITY, "basic_salary", value)

    @property
    def rice_subsidy(self) -> Decimal:
        return self._rice_subsidy

    @rice_subsidy.setter
    def rice_subsidy(self, value: Decimal | float | int | str) -> None:
        self._rice_subsidy = non_negative_decimal(_ENTITY, "rice_subsidy", value)

    @property
    def phone_allowance(self) -> Decimal:
        return self._phone_allowance

    @phone_allowance.setter
    def phone_allowance(self, value: Decimal | float | int | str) -> None:
        self._phone_allowance = non_negative_decimal(_ENTITY, "phone_allowance", value)

    @property
    def clothing_allowance(self) -> Decimal:
        return self._clothing_allowance

    @clothing_allowance.setter
    def clothing_allowance(self, value: Decimal | float | int | str) -> None:
        self._clothing_allowance = non_negative_decimal(
            _ENTITY, "clothing_allowance", value
        )

    # -- derived -----------------------------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def total_allowances(self) -> Decimal:
        """Rice subsidy + phone allowance + clothing allowance."""
        return self._rice_subsidy + self._phone_allowance + self._clothing_allowance

    @property
    def age(self) -> int:
        """Whole years since birthday as of today, or 0 without a birthday."""
        return self.age_as_of(SystemClock().today())

    def age_on(self, clock: Clock) -> int:
        """Whole years since birthday as of ``clock.today()``."""
        return self.age_as_of(clock.today())

    def age_as_of(self, on_date: date) -> int:
        if self._birthday is None:
            return 0
        years = on_date.year - self._birthday.year
        if (on_date.month, on_date.day) < (self._birthday.month, self._birthday.day):
            years -= 1
        return max(years, 0)

    def is_valid(self) -> bool:
        """True once the id and both names have been set; salary defaults to 0."""
        return (
            self._employee_id is not None
            and self._first_name is not None
            and self._last_name is not None
        )

    # -- value semantics ---------------------------------------------------

    def _key(self) -> tuple:
        return (
            self._employee_id,
            self._first_name,
            self._last_name,
            self._birthday,
            self._basic_salary,
            self.status,
            self.position,
            self._rice_subsidy,
            self._phone_allowance,
            self._clothing_allowance,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Employee(employee_id={self._employee_id!r}, "
            f"full_name={self.full_name!r}, basic_salary={self._basic_salary!r})"
        )
