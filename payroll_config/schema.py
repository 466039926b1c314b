"""
Payroll configuration schema.

Named constants for the payroll calculation: the standard work schedule and
the three statutory contribution bracket tables.  Field defaults are the
values of the single jurisdiction this system serves; a configuration set
in ``payroll_config/sets/`` may override any of them.

All types are frozen; ``__post_init__`` rejects out-of-range values with
``InvalidConfigurationError`` so a bad YAML fragment fails at load time and
never at calculation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from payroll_kernel.exceptions import InvalidConfigurationError
from payroll_kernel.logging_config import get_logger

logger = get_logger("config.schema")

STANDARD_WORKING_DAYS_PER_MONTH = Decimal("22")
STANDARD_HOURS_PER_DAY = Decimal("8")
OVERTIME_MULTIPLIER = Decimal("1.25")
DEFAULT_ROUNDING_QUANTUM = Decimal("0.01")


def _require_positive(field_name: str, value: Decimal) -> None:
    if value <= 0:
        raise InvalidConfigurationError(field_name, f"must be positive, got {value}")


def _require_non_negative(field_name: str, value: Decimal) -> None:
    if value < 0:
        raise InvalidConfigurationError(field_name, f"cannot be negative, got {value}")


# ---------------------------------------------------------------------------
# Work schedule
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkSchedule:
    """Standard working month and day used to derive daily and hourly rates."""

    working_days_per_month: Decimal = STANDARD_WORKING_DAYS_PER_MONTH
    hours_per_day: Decimal = STANDARD_HOURS_PER_DAY
    overtime_multiplier: Decimal = OVERTIME_MULTIPLIER

    def __post_init__(self):
        _require_positive("working_days_per_month", self.working_days_per_month)
        _require_positive("hours_per_day", self.hours_per_day)
        _require_positive("overtime_multiplier", self.overtime_multiplier)


# ---------------------------------------------------------------------------
# Statutory contribution rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SocialInsuranceRule:
    """
    Social-insurance bracket table.

    salary <= floor_salary                 -> floor_contribution
    floor_salary < salary <= cap_salary    -> min(salary * rate, max_contribution)
    salary > cap_salary                    -> max_contribution
    """

    floor_salary: Decimal = Decimal("4000")
    floor_contribution: Decimal = Decimal("180.00")
    cap_salary: Decimal = Decimal("25000")
    rate: Decimal = Decimal("0.045")
    max_contribution: Decimal = Decimal("1125.00")

    def __post_init__(self):
        _require_non_negative("social_insurance.floor_salary", self.floor_salary)
        _require_non_negative("social_insurance.floor_contribution", self.floor_contribution)
        _require_non_negative("social_insurance.rate", self.rate)
        if self.cap_salary < self.floor_salary:
            raise InvalidConfigurationError(
                "social_insurance.cap_salary", "must not be below floor_salary"
            )
        if self.max_contribution < self.floor_contribution:
            raise InvalidConfigurationError(
                "social_insurance.max_contribution",
                "must not be below floor_contribution",
            )


@dataclass(frozen=True)
class HealthInsuranceRule:
    """Health-insurance premium: salary * rate, clamped to [minimum, maximum]."""

    rate: Decimal = Decimal("0.025")
    minimum_contribution: Decimal = Decimal("500.00")
    maximum_contribution: Decimal = Decimal("5000.00")

    def __post_init__(self):
        _require_non_negative("health_insurance.rate", self.rate)
        _require_non_negative(
            "health_insurance.minimum_contribution", self.minimum_contribution
        )
        if self.maximum_contribution < self.minimum_contribution:
            raise InvalidConfigurationError(
                "health_insurance.maximum_contribution",
                "must not be below minimum_contribution",
            )


@dataclass(frozen=True)
class HousingFundRule:
    """
    Housing-fund contribution.

    salary <= threshold_salary -> salary * low_rate
    salary >  threshold_salary -> min(salary * high_rate, max_contribution)
    """

    threshold_salary: Decimal = Decimal("1500")
    low_rate: Decimal = Decimal("0.01")
    high_rate: Decimal = Decimal("0.02")
    max_contribution: Decimal = Decimal("200.00")

    def __post_init__(self):
        _require_non_negative("housing_fund.threshold_salary", self.threshold_salary)
        _require_non_negative("housing_fund.low_rate", self.low_rate)
        _require_non_negative("housing_fund.high_rate", self.high_rate)
        _require_non_negative("housing_fund.max_contribution", self.max_contribution)


# ---------------------------------------------------------------------------
# Top-level configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PayrollConfig:
    """
    Complete payroll configuration set.

    Defaults reproduce the built-in constants, so ``PayrollConfig()`` is a
    usable configuration on its own.
    """

    config_id: str = "default"
    version: int = 1
    jurisdiction: str = "default"
    work_schedule: WorkSchedule = field(default_factory=WorkSchedule)
    social_insurance: SocialInsuranceRule = field(default_factory=SocialInsuranceRule)
    health_insurance: HealthInsuranceRule = field(default_factory=HealthInsuranceRule)
    housing_fund: HousingFundRule = field(default_factory=HousingFundRule)
    rounding_quantum: Decimal = DEFAULT_ROUNDING_QUANTUM

    def __post_init__(self):
        if not self.config_id:
            raise InvalidConfigurationError("config_id", "cannot be empty")
        if self.version < 1:
            raise InvalidConfigurationError("version", "must be >= 1")
        _require_positive("rounding_quantum", self.rounding_quantum)
        logger.debug(
            "payroll_config_initialized",
            extra={
                "config_id": self.config_id,
                "version": self.version,
                "jurisdiction": self.jurisdiction,
            },
        )


DEFAULT_CONFIG = PayrollConfig()
