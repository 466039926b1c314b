"""
payroll_engines.statutory -- Government contribution bracket calculations.

Responsibility:
    Compute the three monthly statutory contributions withheld from an
    employee's pay, from the basic monthly salary:

    ============================  ==============================================
    Fund                          Rule (default configuration)
    ============================  ==============================================
    Social insurance              <= 4000 -> 180.00;
                                  4000 < s <= 25000 -> min(s * 0.045, 1125.00);
                                  > 25000 -> 1125.00
    Health insurance              s * 0.025 clamped to [500.00, 5000.00]
    Housing fund                  <= 1500 -> s * 0.01;
                                  > 1500 -> min(s * 0.02, 200.00)
    ============================  ==============================================

Architecture position:
    Engines -- pure calculation layer, zero I/O.  Bracket values come from
    ``payroll_config.schema``; no thresholds are hard-coded here.

Invariants enforced:
    - Each contribution is monotonic non-decreasing in salary up to its cap.
    - Results are quantized to the configured rounding quantum (0.01)
      with ROUND_HALF_UP.

Failure modes:
    - Negative salary is outside the contract.  Employee validation keeps
      it from ever reaching these functions.

Income tax withholding is deliberately not computed: no bracket table is
defined for it.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from payroll_config.schema import (
    DEFAULT_ROUNDING_QUANTUM,
    HealthInsuranceRule,
    HousingFundRule,
    PayrollConfig,
    SocialInsuranceRule,
)
from payroll_engines.tracer import traced_engine
from payroll_kernel.models.payroll import StatutoryDeductions

_DEFAULT_CONFIG = PayrollConfig()


def _quantize(amount: Decimal, quantum: Decimal = DEFAULT_ROUNDING_QUANTUM) -> Decimal:
    return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def social_insurance_contribution(
    monthly_salary: Decimal,
    rule: SocialInsuranceRule | None = None,
) -> Decimal:
    """Social-insurance contribution for one month."""
    rule = rule or _DEFAULT_CONFIG.social_insurance
    if monthly_salary <= rule.floor_salary:
        return _quantize(rule.floor_contribution)
    if monthly_salary <= rule.cap_salary:
        return _quantize(min(monthly_salary * rule.rate, rule.max_contribution))
    return _quantize(rule.max_contribution)


def health_insurance_contribution(
    monthly_salary: Decimal,
    rule: HealthInsuranceRule | None = None,
) -> Decimal:
    """Health-insurance premium for one month."""
    rule = rule or _DEFAULT_CONFIG.health_insurance
    contribution = monthly_salary * rule.rate
    clamped = max(rule.minimum_contribution, min(contribution, rule.maximum_contribution))
    return _quantize(clamped)


def housing_fund_contribution(
    monthly_salary: Decimal,
    rule: HousingFundRule | None = None,
) -> Decimal:
    """Housing-fund contribution for one month."""
    rule = rule or _DEFAULT_CONFIG.housing_fund
    if monthly_salary <= rule.threshold_salary:
        return _quantize(monthly_salary * rule.low_rate)
    return _quantize(min(monthly_salary * rule.high_rate, rule.max_contribution))


@traced_engine("statutory", "1.0", fingerprint_fields=("monthly_salary",))
def calculate_statutory_deductions(
    monthly_salary: Decimal,
    config: PayrollConfig | None = None,
) -> StatutoryDeductions:
    """Per-fund breakdown of the statutory contributions for one month."""
    config = config or _DEFAULT_CONFIG
    quantum = config.rounding_quantum
    return StatutoryDeductions(
        social_insurance=_quantize(
            social_insurance_contribution(monthly_salary, config.social_insurance),
            quantum,
        ),
        health_insurance=_quantize(
            health_insurance_contribution(monthly_salary, config.health_insurance),
            quantum,
        ),
        housing_fund=_quantize(
            housing_fund_contribution(monthly_salary, config.housing_fund),
            quantum,
        ),
    )


def total_statutory_deduction(
    monthly_salary: Decimal,
    config: PayrollConfig | None = None,
) -> Decimal:
    """Sum of the three statutory contributions."""
    return calculate_statutory_deductions(monthly_salary, config).total
