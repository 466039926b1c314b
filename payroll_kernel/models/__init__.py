"""Payroll entities: employee profile, attendance record, payroll result."""

from payroll_kernel.models.attendance import Attendance
from payroll_kernel.models.employee import Employee
from payroll_kernel.models.payroll import PayrollResult, StatutoryDeductions

__all__ = [
    "Attendance",
    "Employee",
    "PayrollResult",
    "StatutoryDeductions",
]
