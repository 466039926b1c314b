"""
payroll_services -- orchestration over the payroll engines.

``PayrollCalculator`` is the public entry point; it depends on a
``PayrollDataAccess`` collaborator supplied by the caller.
"""

from payroll_services.data_access import (
    InMemoryPayrollDataAccess,
    PayrollDataAccess,
    SqlPayrollDataAccess,
)
from payroll_services.payroll_calculator import PayrollCalculator

__all__ = [
    "InMemoryPayrollDataAccess",
    "PayrollCalculator",
    "PayrollDataAccess",
    "SqlPayrollDataAccess",
]
