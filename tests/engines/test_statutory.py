"""
Tests for the statutory deduction calculator (payroll_engines.statutory).

Covers:
- Social insurance floor, linear band and cap
- Health insurance clamping to [min, max]
- Housing fund low/high rate and cap
- Breakdown totals and rounding
- Monotonicity (property-based)
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from payroll_config.schema import (
    HealthInsuranceRule,
    HousingFundRule,
    PayrollConfig,
    SocialInsuranceRule,
)
from payroll_engines.statutory import (
    calculate_statutory_deductions,
    health_insurance_contribution,
    housing_fund_contribution,
    social_insurance_contribution,
    total_statutory_deduction,
)
from payroll_kernel.models.payroll import StatutoryDeductions

salaries = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("1000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)


class TestSocialInsurance:

    @pytest.mark.parametrize(
        "salary, expected",
        [
            ("0", "180.00"),
            ("1000", "180.00"),
            ("4000", "180.00"),
            ("4000.01", "180.00"),
            ("10000", "450.00"),
            ("20000", "900.00"),
            ("25000", "1125.00"),
            ("30000", "1125.00"),
            ("50000", "1125.00"),
        ],
    )
    def test_brackets(self, salary, expected):
        assert social_insurance_contribution(Decimal(salary)) == Decimal(expected)

    def test_rounds_half_up(self):
        # 4011.11 * 0.045 = 180.49995
        assert social_insurance_contribution(Decimal("4011.11")) == Decimal("180.50")

    def test_custom_rule(self):
        rule = SocialInsuranceRule(
            floor_salary=Decimal("1000"),
            floor_contribution=Decimal("50"),
            cap_salary=Decimal("10000"),
            rate=Decimal("0.05"),
            max_contribution=Decimal("500"),
        )
        assert social_insurance_contribution(Decimal("500"), rule) == Decimal("50.00")
        assert social_insurance_contribution(Decimal("2000"), rule) == Decimal("100.00")
        assert social_insurance_contribution(Decimal("20000"), rule) == Decimal("500.00")


class TestHealthInsurance:

    @pytest.mark.parametrize(
        "salary, expected",
        [
            ("0", "500.00"),
            ("10000", "500.00"),
            ("20000", "500.00"),
            ("50000", "1250.00"),
            ("200000", "5000.00"),
            ("1000000", "5000.00"),
        ],
    )
    def test_clamped(self, salary, expected):
        assert health_insurance_contribution(Decimal(salary)) == Decimal(expected)

    def test_within_bounds_at_standard_salary(self):
        contribution = health_insurance_contribution(Decimal("50000"))
        assert Decimal("500.00") <= contribution <= Decimal("5000.00")

    def test_custom_rule(self):
        rule = HealthInsuranceRule(
            rate=Decimal("0.03"),
            minimum_contribution=Decimal("100"),
            maximum_contribution=Decimal("900"),
        )
        assert health_insurance_contribution(Decimal("10000"), rule) == Decimal("300.00")


class TestHousingFund:

    @pytest.mark.parametrize(
        "salary, expected",
        [
            ("0", "0.00"),
            ("1000", "10.00"),
            ("1500", "15.00"),
            ("1500.01", "30.00"),
            ("5000", "100.00"),
            ("10000", "200.00"),
            ("20000", "200.00"),
            ("50000", "200.00"),
        ],
    )
    def test_brackets(self, salary, expected):
        assert housing_fund_contribution(Decimal(salary)) == Decimal(expected)

    def test_custom_rule(self):
        rule = HousingFundRule(max_contribution=Decimal("100"))
        assert housing_fund_contribution(Decimal("20000"), rule) == Decimal("100.00")


class TestStatutoryDeductions:
    """The per-fund breakdown and its total."""

    def test_breakdown_at_standard_salary(self):
        deductions = calculate_statutory_deductions(Decimal("50000"))

        assert deductions == StatutoryDeductions(
            social_insurance=Decimal("1125.00"),
            health_insurance=Decimal("1250.00"),
            housing_fund=Decimal("200.00"),
        )
        assert deductions.total == Decimal("2575.00")

    def test_total_matches_breakdown(self):
        salary = Decimal("12345.67")
        assert total_statutory_deduction(salary) == (
            calculate_statutory_deductions(salary).total
        )

    def test_zero_salary_still_owes_floors(self):
        deductions = calculate_statutory_deductions(Decimal("0"))
        assert deductions.total == Decimal("680.00")

    def test_uses_config_sections(self):
        config = PayrollConfig(
            housing_fund=HousingFundRule(max_contribution=Decimal("150")),
        )
        deductions = calculate_statutory_deductions(Decimal("50000"), config)
        assert deductions.housing_fund == Decimal("150.00")
        assert deductions.social_insurance == Decimal("1125.00")

    def test_emits_engine_trace(self, captured_logs):
        calculate_statutory_deductions(Decimal("50000"))

        traces = [
            r for r in captured_logs()
            if r["message"] == "PAYROLL_ENGINE_TRACE"
        ]
        assert [t["engine_name"] for t in traces] == ["statutory"]


class TestStatutoryProperties:
    """Property-based checks over arbitrary non-negative salaries."""

    @given(low=salaries, high=salaries)
    @settings(max_examples=200)
    def test_each_contribution_monotonic(self, low, high):
        if low > high:
            low, high = high, low
        assert social_insurance_contribution(low) <= social_insurance_contribution(high)
        assert health_insurance_contribution(low) <= health_insurance_contribution(high)
        assert housing_fund_contribution(low) <= housing_fund_contribution(high)

    @given(salary=salaries)
    def test_contributions_within_caps(self, salary):
        deductions = calculate_statutory_deductions(salary)
        assert Decimal("180.00") <= deductions.social_insurance <= Decimal("1125.00")
        assert Decimal("500.00") <= deductions.health_insurance <= Decimal("5000.00")
        assert Decimal("0") <= deductions.housing_fund <= Decimal("200.00")

    @given(salary=salaries)
    def test_amounts_have_two_places(self, salary):
        deductions = calculate_statutory_deductions(salary)
        for amount in (
            deductions.social_insurance,
            deductions.health_insurance,
            deductions.housing_fund,
        ):
            assert amount == amount.quantize(Decimal("0.01"))
