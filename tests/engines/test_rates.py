"""
Tests for the rate deriver (payroll_engines.rates).

Covers:
- Daily and hourly rate derivation from a monthly rate
- Overtime pricing at the premium multiplier
- Custom work schedules
"""

from decimal import ROUND_HALF_UP, Decimal

from payroll_config.schema import WorkSchedule
from payroll_engines.rates import daily_rate, hourly_rate, overtime_pay


def _cents(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class TestDailyRate:
    """Monthly rate spread over 22 working days."""

    def test_standard_salary(self):
        assert _cents(daily_rate(Decimal("50000"))) == Decimal("2272.73")

    def test_exact_division(self):
        assert daily_rate(Decimal("22000")) == Decimal("1000")

    def test_zero_salary(self):
        assert daily_rate(Decimal("0")) == Decimal("0")

    def test_custom_schedule(self):
        schedule = WorkSchedule(working_days_per_month=Decimal("20"))
        assert daily_rate(Decimal("50000"), schedule) == Decimal("2500")


class TestHourlyRate:
    """Daily rate spread over 8 hours."""

    def test_standard_salary(self):
        assert _cents(hourly_rate(Decimal("50000"))) == Decimal("284.09")

    def test_hourly_is_daily_over_hours(self):
        monthly = Decimal("37500")
        assert hourly_rate(monthly) == daily_rate(monthly) / Decimal("8")

    def test_custom_schedule(self):
        schedule = WorkSchedule(
            working_days_per_month=Decimal("20"), hours_per_day=Decimal("10")
        )
        assert hourly_rate(Decimal("50000"), schedule) == Decimal("250")


class TestOvertimePay:
    """Overtime priced at 1.25x the hourly rate."""

    def test_five_hours_at_standard_salary(self):
        hourly = hourly_rate(Decimal("50000"))
        assert _cents(overtime_pay(Decimal("5"), hourly)) == Decimal("1775.57")

    def test_zero_hours(self):
        assert overtime_pay(Decimal("0"), Decimal("284.09")) == Decimal("0")

    def test_fractional_hours(self):
        assert overtime_pay(Decimal("0.5"), Decimal("100")) == Decimal("62.500")

    def test_premium_is_flat(self):
        """The multiplier does not grow with the number of hours."""
        hourly = Decimal("100")
        one = overtime_pay(Decimal("1"), hourly)
        ten = overtime_pay(Decimal("10"), hourly)
        assert ten == one * 10

    def test_custom_multiplier(self):
        schedule = WorkSchedule(overtime_multiplier=Decimal("1.5"))
        assert overtime_pay(Decimal("2"), Decimal("100"), schedule) == Decimal("300.0")
