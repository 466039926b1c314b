"""Tests for the typed exception hierarchy."""

from datetime import date

import pytest

from payroll_kernel.exceptions import (
    ConfigurationError,
    EmployeeNotFoundError,
    EntityError,
    InvalidConfigurationError,
    InvalidEmployeeIdError,
    InvalidFieldError,
    InvalidPeriodError,
    PayrollCalculationError,
    PayrollKernelError,
)


class TestExceptionHierarchy:

    @pytest.mark.parametrize(
        "exc, parent, code",
        [
            (InvalidFieldError("Employee", "basic_salary", -1, "cannot be negative"),
             EntityError, "INVALID_FIELD"),
            (InvalidEmployeeIdError(0), PayrollCalculationError, "INVALID_EMPLOYEE_ID"),
            (InvalidPeriodError(date(2024, 6, 30), date(2024, 6, 1), "inverted"),
             PayrollCalculationError, "INVALID_PERIOD"),
            (EmployeeNotFoundError(99999), PayrollCalculationError, "EMPLOYEE_NOT_FOUND"),
            (InvalidConfigurationError("rate", "negative"),
             ConfigurationError, "INVALID_CONFIGURATION"),
        ],
    )
    def test_codes_and_parents(self, exc, parent, code):
        assert isinstance(exc, parent)
        assert isinstance(exc, PayrollKernelError)
        assert exc.code == code

    def test_invalid_field_message(self):
        exc = InvalidFieldError("Employee", "first_name", "", "cannot be blank")
        assert str(exc) == "Invalid Employee.first_name='': cannot be blank"

    def test_period_attributes(self):
        exc = InvalidPeriodError(None, date(2024, 6, 30), "both period dates are required")
        assert exc.period_start is None
        assert exc.period_end == date(2024, 6, 30)
        assert "2024-06-30" in str(exc)

    def test_not_found_message(self):
        assert str(EmployeeNotFoundError(99999)) == "Employee not found: 99999"
