"""Read-only selectors over the payroll tables."""

from payroll_kernel.selectors.attendance_selector import AttendanceSelector
from payroll_kernel.selectors.base import BaseSelector
from payroll_kernel.selectors.employee_selector import EmployeeSelector
from payroll_kernel.selectors.payroll_record_selector import PayrollRecordSelector

__all__ = [
    "AttendanceSelector",
    "BaseSelector",
    "EmployeeSelector",
    "PayrollRecordSelector",
]
