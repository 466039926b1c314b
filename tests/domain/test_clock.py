"""Tests for the Clock abstraction."""

from datetime import date, datetime, timezone

from payroll_kernel.domain.clock import DeterministicClock, SystemClock


class TestDeterministicClock:

    def test_default_time(self):
        clock = DeterministicClock()
        assert clock.now() == datetime(2024, 7, 15, 12, 0, tzinfo=timezone.utc)
        assert clock.today() == date(2024, 7, 15)

    def test_on_date(self):
        clock = DeterministicClock.on_date(date(2024, 2, 29))
        assert clock.today() == date(2024, 2, 29)
        assert clock.now().tzinfo is not None

    def test_repeated_calls_stable(self):
        clock = DeterministicClock()
        assert clock.now() == clock.now()

    def test_set_time_moves_today(self):
        clock = DeterministicClock.on_date(date(2024, 6, 30))
        clock.set_time(datetime(2024, 7, 1, 9, 0, tzinfo=timezone.utc))
        assert clock.today() == date(2024, 7, 1)


class TestSystemClock:

    def test_now_is_timezone_aware(self):
        assert SystemClock().now().tzinfo is not None

    def test_today_is_local_date(self):
        assert SystemClock().today() == date.today()
