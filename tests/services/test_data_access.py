"""
Tests for the PayrollDataAccess adapters.

The SQL adapter runs against a SQLite file database created per test.
"""

from datetime import date, time
from decimal import Decimal

import pytest

from conftest import (
    JUNE_END,
    JUNE_START,
    SAMPLE_EMPLOYEE_ID,
    make_attendance,
    make_employee,
)
from payroll_kernel.db.orm import AttendanceModel, EmployeeModel
from payroll_services.data_access import (
    InMemoryPayrollDataAccess,
    PayrollDataAccess,
    SqlPayrollDataAccess,
)
from payroll_services.payroll_calculator import PayrollCalculator


class TestInMemoryPayrollDataAccess:

    def test_is_payroll_data_access(self):
        assert isinstance(InMemoryPayrollDataAccess(), PayrollDataAccess)

    def test_find_employee(self, data_access, sample_employee):
        assert data_access.find_employee_by_id(SAMPLE_EMPLOYEE_ID) == sample_employee

    def test_missing_employee(self, data_access):
        assert data_access.find_employee_by_id(42) is None

    def test_returns_copies(self, data_access):
        found = data_access.find_employee_by_id(SAMPLE_EMPLOYEE_ID)
        found.basic_salary = Decimal("1")
        again = data_access.find_employee_by_id(SAMPLE_EMPLOYEE_ID)
        assert again.basic_salary == Decimal("50000")

    def test_attendance_filtered_by_period(self, data_access):
        data_access.add_attendance(make_attendance(date(2024, 7, 2)))
        records = data_access.find_attendance_by_employee_and_period(
            SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END
        )
        assert len(records) == 3
        assert all(r.in_period(JUNE_START, JUNE_END) for r in records)

    def test_attendance_for_unknown_employee(self, data_access):
        assert data_access.find_attendance_by_employee_and_period(
            42, JUNE_START, JUNE_END
        ) == []

    def test_clear_attendance(self, data_access):
        data_access.clear_attendance(SAMPLE_EMPLOYEE_ID)
        assert data_access.find_attendance_by_employee_and_period(
            SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END
        ) == []

    def test_rejects_employee_without_id(self):
        with pytest.raises(ValueError):
            InMemoryPayrollDataAccess().add_employee(make_employee(employee_id=None))

    def test_rejects_attendance_without_employee(self):
        with pytest.raises(ValueError):
            InMemoryPayrollDataAccess().add_attendance(
                make_attendance(date(2024, 6, 3), employee_id=None)
            )


@pytest.fixture
def seeded_session(session, sample_employee, june_attendance):
    session.add(EmployeeModel.from_dto(sample_employee))
    session.flush()
    for record in june_attendance:
        session.add(AttendanceModel.from_dto(record))
    session.add(AttendanceModel.from_dto(make_attendance(date(2024, 7, 1))))
    session.commit()
    return session


class TestSqlPayrollDataAccess:

    def test_find_employee(self, seeded_session, sample_employee):
        data_access = SqlPayrollDataAccess(seeded_session)
        found = data_access.find_employee_by_id(SAMPLE_EMPLOYEE_ID)

        assert found == sample_employee
        assert found.total_allowances == Decimal("3300")

    def test_missing_employee(self, seeded_session):
        assert SqlPayrollDataAccess(seeded_session).find_employee_by_id(42) is None

    def test_attendance_in_period(self, seeded_session, june_attendance):
        records = SqlPayrollDataAccess(
            seeded_session
        ).find_attendance_by_employee_and_period(
            SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END
        )

        assert records == june_attendance
        assert records[0].log_in == time(8, 0)

    def test_calculator_over_sql(self, seeded_session, deterministic_clock):
        calculator = PayrollCalculator(
            SqlPayrollDataAccess(seeded_session), clock=deterministic_clock
        )
        result = calculator.calculate_payroll(SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END)

        assert result.days_worked == 3
        assert result.gross_pay == Decimal("11183.52")
        assert result.net_pay == Decimal("8608.52")

    def test_sql_and_memory_agree(self, seeded_session, data_access, deterministic_clock):
        sql_result = PayrollCalculator(
            SqlPayrollDataAccess(seeded_session), clock=deterministic_clock
        ).calculate_payroll(SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END)
        memory_result = PayrollCalculator(
            data_access, clock=deterministic_clock
        ).calculate_payroll(SAMPLE_EMPLOYEE_ID, JUNE_START, JUNE_END)

        assert sql_result == memory_result
