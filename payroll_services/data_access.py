"""
Payroll Data Access (``payroll_services.data_access``).

Responsibility
--------------
The read-only collaborator contract the payroll calculator depends on, and
two adapters for it:

* ``InMemoryPayrollDataAccess`` -- dict-backed, for tests and for callers
  that already hold the records in memory.
* ``SqlPayrollDataAccess`` -- backed by a SQLAlchemy ``Session`` through
  the kernel selectors.

Architecture position
---------------------
**Services layer** -- the seam between the calculator and storage.  The
calculator receives one of these by constructor injection and never
reaches for a global connection.

Concurrency
-----------
``InMemoryPayrollDataAccess`` guards its maps with a lock and returns
copies, so concurrent reads are safe.  ``SqlPayrollDataAccess`` inherits
the thread affinity of its ``Session``: give each thread its own.
Neither adapter offers snapshot isolation across the two reads.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from copy import copy
from datetime import date

from sqlalchemy.orm import Session

from payroll_kernel.models.attendance import Attendance
from payroll_kernel.models.employee import Employee
from payroll_kernel.selectors.attendance_selector import AttendanceSelector
from payroll_kernel.selectors.employee_selector import EmployeeSelector


class PayrollDataAccess(ABC):
    """
    Read-only data source for payroll calculation.

    Contract:
        Both methods are pure reads.  Errors raised by an implementation
        propagate to the calculator's caller unchanged.
    """

    @abstractmethod
    def find_employee_by_id(self, employee_id: int) -> Employee | None:
        """The employee with ``employee_id``, or None when absent."""
        ...

    @abstractmethod
    def find_attendance_by_employee_and_period(
        self,
        employee_id: int,
        period_start: date,
        period_end: date,
    ) -> Sequence[Attendance]:
        """Attendance of ``employee_id`` overlapping the period (any order)."""
        ...


class InMemoryPayrollDataAccess(PayrollDataAccess):
    """Dict-backed data access."""

    def __init__(
        self,
        employees: Iterable[Employee] = (),
        attendance: Iterable[Attendance] = (),
    ):
        self._lock = threading.Lock()
        self._employees: dict[int, Employee] = {}
        self._attendance: dict[int, list[Attendance]] = {}
        for employee in employees:
            self.add_employee(employee)
        for record in attendance:
            self.add_attendance(record)

    def add_employee(self, employee: Employee) -> None:
        """Store or replace an employee.  The employee must have an id."""
        if employee.employee_id is None:
            raise ValueError("Employee must have an employee_id to be stored")
        with self._lock:
            self._employees[employee.employee_id] = copy(employee)

    def add_attendance(self, record: Attendance) -> None:
        """Append an attendance record.  The record must have an employee id."""
        if record.employee_id is None:
            raise ValueError("Attendance must have an employee_id to be stored")
        with self._lock:
            self._attendance.setdefault(record.employee_id, []).append(copy(record))

    def clear_attendance(self, employee_id: int) -> None:
        with self._lock:
            self._attendance.pop(employee_id, None)

    def find_employee_by_id(self, employee_id: int) -> Employee | None:
        with self._lock:
            employee = self._employees.get(employee_id)
            return copy(employee) if employee is not None else None

    def find_attendance_by_employee_and_period(
        self,
        employee_id: int,
        period_start: date,
        period_end: date,
    ) -> list[Attendance]:
        with self._lock:
            return [
                copy(record)
                for record in self._attendance.get(employee_id, ())
                if record.in_period(period_start, period_end)
            ]


class SqlPayrollDataAccess(PayrollDataAccess):
    """
    Data access over a SQLAlchemy session.

    The caller owns the session; this adapter only reads through it.
    """

    def __init__(self, session: Session):
        self._employees = EmployeeSelector(session)
        self._attendance = AttendanceSelector(session)

    def find_employee_by_id(self, employee_id: int) -> Employee | None:
        return self._employees.get(employee_id)

    def find_attendance_by_employee_and_period(
        self,
        employee_id: int,
        period_start: date,
        period_end: date,
    ) -> list[Attendance]:
        return self._attendance.for_employee_in_period(
            employee_id, period_start, period_end
        )
