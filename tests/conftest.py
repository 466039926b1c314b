"""
Pytest fixtures for the payroll test suite.

Provides:
- Structured-logging setup and a ``captured_logs`` fixture
- A deterministic clock pinned after the sample pay periods
- An in-memory data access seeded with a sample employee
- A SQLite-backed session with the payroll tables created
"""

import json
import logging
from datetime import date, time
from decimal import Decimal
from io import StringIO

import pytest

from payroll_kernel.db.engine import (
    create_tables,
    drop_tables,
    get_session,
    init_engine_from_url,
    reset_engine,
)
from payroll_kernel.domain.clock import DeterministicClock
from payroll_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from payroll_kernel.models.attendance import Attendance
from payroll_kernel.models.employee import Employee
from payroll_services.data_access import InMemoryPayrollDataAccess

SAMPLE_EMPLOYEE_ID = 10001
JUNE_START = date(2024, 6, 1)
JUNE_END = date(2024, 6, 30)
TODAY = date(2024, 7, 15)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture payroll_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, calculator):
            calculator.calculate_payroll(...)
            logs = captured_logs()
            assert any(r["message"] == "payroll_calculation_completed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("payroll_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def deterministic_clock() -> DeterministicClock:
    """Clock pinned to 2024-07-15, after the June 2024 sample period."""
    return DeterministicClock.on_date(TODAY)


def make_employee(**overrides) -> Employee:
    values = dict(
        employee_id=SAMPLE_EMPLOYEE_ID,
        first_name="John",
        last_name="Doe",
        birthday=date(1990, 1, 1),
        basic_salary=Decimal("50000"),
        status="Regular",
        position="Developer",
        rice_subsidy=Decimal("1500"),
        phone_allowance=Decimal("1000"),
        clothing_allowance=Decimal("800"),
    )
    values.update(overrides)
    return Employee(**values)


def make_attendance(
    work_date: date,
    log_in: time | None = time(8, 0),
    log_out: time | None = time(17, 0),
    employee_id: int = SAMPLE_EMPLOYEE_ID,
) -> Attendance:
    return Attendance(
        employee_id=employee_id,
        work_date=work_date,
        log_in=log_in,
        log_out=log_out,
    )


@pytest.fixture
def sample_employee() -> Employee:
    return make_employee()


@pytest.fixture
def june_attendance() -> list[Attendance]:
    """Three June days: 9h, 8h and 10h (3 overtime hours in total)."""
    return [
        make_attendance(date(2024, 6, 3), time(8, 0), time(17, 0)),
        make_attendance(date(2024, 6, 4), time(8, 0), time(16, 0)),
        make_attendance(date(2024, 6, 5), time(8, 0), time(18, 0)),
    ]


@pytest.fixture
def data_access(sample_employee, june_attendance) -> InMemoryPayrollDataAccess:
    return InMemoryPayrollDataAccess(
        employees=[sample_employee],
        attendance=june_attendance,
    )


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'payroll_test.db'}"


@pytest.fixture
def db_engine(sqlite_url):
    engine = init_engine_from_url(sqlite_url)
    create_tables()
    yield engine
    drop_tables()
    reset_engine()


@pytest.fixture
def session(db_engine):
    session = get_session()
    yield session
    session.rollback()
    session.close()
