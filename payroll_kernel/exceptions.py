"""
Typed Exception Hierarchy for the Payroll Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Payroll miscalculation is never silently tolerated, and a caller must be able
to tell *why* a calculation was refused without parsing message text:

    try:
        result = calculator.calculate_payroll(employee_id, start, end)
    except InvalidPeriodError as e:
        show_error(f"Choose another period: {e.reason}")
    except EmployeeNotFoundError as e:
        show_error(f"No employee #{e.employee_id}")

Every exception:
  1. Has its own class (catch by type, not message)
  2. Has a ``code`` class attribute (machine-readable, API-safe)
  3. Carries its context as attributes (not just a message string)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    PayrollKernelError (base)
    |
    +-- EntityError
    |   +-- InvalidFieldError
    |
    +-- PayrollCalculationError
    |   +-- InvalidEmployeeIdError
    |   +-- InvalidPeriodError
    |   +-- EmployeeNotFoundError
    |
    +-- ConfigurationError
        +-- InvalidConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                   | When Raised
----------------|------------------------|------------------------------------------
Entity          | INVALID_FIELD          | Setter rejected a value (blank name,
                |                        | negative salary/rate/days/hours, None date)
----------------|------------------------|------------------------------------------
Calculation     | INVALID_EMPLOYEE_ID    | Id is None, not an int, zero or negative
                | INVALID_PERIOD         | Date missing, start after end, end in future
                | EMPLOYEE_NOT_FOUND     | Id well-formed but no matching record
----------------|------------------------|------------------------------------------
Configuration   | INVALID_CONFIGURATION  | Constant out of range in a config set

===============================================================================
"""


class PayrollKernelError(Exception):
    """
    Base exception for all payroll kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "PAYROLL_KERNEL_ERROR"


# Entity-related exceptions


class EntityError(PayrollKernelError):
    """Base exception for entity validation errors."""

    code: str = "ENTITY_ERROR"


class InvalidFieldError(EntityError):
    """A validated setter rejected a value."""

    code: str = "INVALID_FIELD"

    def __init__(self, entity: str, field_name: str, value: object, reason: str):
        self.entity = entity
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {entity}.{field_name}={value!r}: {reason}")


# Calculation-related exceptions


class PayrollCalculationError(PayrollKernelError):
    """Base exception for payroll calculation failures."""

    code: str = "PAYROLL_CALCULATION_ERROR"


class InvalidEmployeeIdError(PayrollCalculationError):
    """Employee id is missing, not an integer, zero, or negative."""

    code: str = "INVALID_EMPLOYEE_ID"

    def __init__(self, employee_id: object):
        self.employee_id = employee_id
        super().__init__(f"Employee id must be a positive integer, got {employee_id!r}")


class InvalidPeriodError(PayrollCalculationError):
    """Pay period is incomplete, inverted, or not yet elapsed."""

    code: str = "INVALID_PERIOD"

    def __init__(self, period_start: object, period_end: object, reason: str):
        self.period_start = period_start
        self.period_end = period_end
        self.reason = reason
        super().__init__(
            f"Invalid pay period {period_start} to {period_end}: {reason}"
        )


class EmployeeNotFoundError(PayrollCalculationError):
    """No employee record exists for a well-formed id."""

    code: str = "EMPLOYEE_NOT_FOUND"

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


# Configuration-related exceptions


class ConfigurationError(PayrollKernelError):
    """Base exception for payroll configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """A configuration value is out of its allowed range."""

    code: str = "INVALID_CONFIGURATION"

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid configuration {field_name}: {reason}")
