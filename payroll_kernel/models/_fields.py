"""
Field coercion helpers shared by the payroll entities.

Every helper either returns the normalized value or raises
``InvalidFieldError`` naming the entity and field that rejected it.
"""

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from payroll_kernel.exceptions import InvalidFieldError

ZERO = Decimal("0")


def to_decimal(entity: str, field_name: str, value: object) -> Decimal:
    """Convert int/float/str/Decimal to a finite Decimal."""
    if value is None or isinstance(value, bool):
        raise InvalidFieldError(entity, field_name, value, "a number is required")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise InvalidFieldError(
                entity, field_name, value, "not a number"
            ) from None
    if not result.is_finite():
        raise InvalidFieldError(entity, field_name, value, "must be finite")
    return result


def non_negative_decimal(entity: str, field_name: str, value: object) -> Decimal:
    result = to_decimal(entity, field_name, value)
    if result < ZERO:
        raise InvalidFieldError(entity, field_name, value, "cannot be negative")
    return result


def positive_int(entity: str, field_name: str, value: object) -> int:
    # bool is an int subclass; True must not pass as id 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(entity, field_name, value, "must be an integer")
    if value <= 0:
        raise InvalidFieldError(entity, field_name, value, "must be positive")
    return value


def non_negative_int(entity: str, field_name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError(entity, field_name, value, "must be an integer")
    if value < 0:
        raise InvalidFieldError(entity, field_name, value, "cannot be negative")
    return value


def non_blank_str(entity: str, field_name: str, value: object) -> str:
    if value is None:
        raise InvalidFieldError(entity, field_name, value, "is required")
    if not isinstance(value, str):
        raise InvalidFieldError(entity, field_name, value, "must be a string")
    if not value.strip():
        raise InvalidFieldError(entity, field_name, value, "cannot be blank")
    return value


def required_date(entity: str, field_name: str, value: object) -> date:
    if value is None:
        raise InvalidFieldError(entity, field_name, value, "is required")
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidFieldError(entity, field_name, value, "must be a date")
    return value


def optional_date(entity: str, field_name: str, value: object) -> date | None:
    if value is None:
        return None
    return required_date(entity, field_name, value)


def optional_time(entity: str, field_name: str, value: object) -> time | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.time()
    if not isinstance(value, time):
        raise InvalidFieldError(entity, field_name, value, "must be a time of day")
    return value
