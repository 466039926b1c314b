"""
Payroll ORM Persistence Models (``payroll_kernel.db.orm``).

Responsibility:
    SQLAlchemy ORM models that persist the payroll entities defined in
    ``payroll_kernel.models``.  Each ORM class mirrors an entity and
    provides ``to_dto()`` / ``from_dto()`` round-trip conversion.

Architecture position:
    Kernel > DB -- persistence companions to the pure entities.  The
    calculator never sees these classes; selectors convert rows to
    entities before returning them.

Invariants enforced:
    - All monetary fields use Decimal (maps to Numeric(38,9)) -- NEVER float.
    - Attendance rows reference employees through an explicit ForeignKey.
    - One attendance row per (employee, work_date).
    - ``to_dto()`` re-runs entity validation, so a corrupt row surfaces as
      ``InvalidFieldError`` instead of flowing into a calculation.
"""

from datetime import date, time
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, String, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from payroll_kernel.db.base import TrackedBase
from payroll_kernel.models.attendance import Attendance
from payroll_kernel.models.employee import Employee
from payroll_kernel.models.payroll import PayrollResult, StatutoryDeductions

# ---------------------------------------------------------------------------
# EmployeeModel
# ---------------------------------------------------------------------------


class EmployeeModel(TrackedBase):
    """
    ORM model for ``Employee``.

    Guarantees:
        - ``employee_id`` is the primary key (business identifier).
        - salary and allowances are always Decimal (Numeric(38,9)).
    """

    __tablename__ = "payroll_employees"

    employee_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)
    basic_salary: Mapped[Decimal] = mapped_column(nullable=False)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rice_subsidy: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal("0"))
    phone_allowance: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal("0"))
    clothing_allowance: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal("0"))

    __table_args__ = (
        Index("idx_payroll_employee_last_name", "last_name"),
    )

    def to_dto(self) -> Employee:
        return Employee(
            employee_id=self.employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            birthday=self.birthday,
            basic_salary=self.basic_salary,
            status=self.status,
            position=self.position,
            rice_subsidy=self.rice_subsidy,
            phone_allowance=self.phone_allowance,
            clothing_allowance=self.clothing_allowance,
        )

    @classmethod
    def from_dto(cls, dto: Employee) -> "EmployeeModel":
        return cls(
            employee_id=dto.employee_id,
            first_name=dto.first_name,
            last_name=dto.last_name,
            birthday=dto.birthday,
            basic_salary=dto.basic_salary,
            status=dto.status,
            position=dto.position,
            rice_subsidy=dto.rice_subsidy,
            phone_allowance=dto.phone_allowance,
            clothing_allowance=dto.clothing_allowance,
        )

    def __repr__(self) -> str:
        return (
            f"<EmployeeModel {self.employee_id}: "
            f"{self.first_name} {self.last_name} ({self.status})>"
        )


# ---------------------------------------------------------------------------
# AttendanceModel
# ---------------------------------------------------------------------------


class AttendanceModel(TrackedBase):
    """
    ORM model for ``Attendance`` -- one clock-in/clock-out day.

    Guarantees:
        - (employee_id, work_date) is unique (uq_payroll_attendance_day).
    """

    __tablename__ = "payroll_attendance"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("payroll_employees.employee_id"), nullable=False
    )
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    log_in: Mapped[time | None] = mapped_column(Time, nullable=True)
    log_out: Mapped[time | None] = mapped_column(Time, nullable=True)

    __table_args__ = (
        UniqueConstraint("employee_id", "work_date", name="uq_payroll_attendance_day"),
        Index("idx_payroll_attendance_employee_date", "employee_id", "work_date"),
    )

    def to_dto(self) -> Attendance:
        return Attendance(
            employee_id=self.employee_id,
            work_date=self.work_date,
            log_in=self.log_in,
            log_out=self.log_out,
        )

    @classmethod
    def from_dto(cls, dto: Attendance) -> "AttendanceModel":
        return cls(
            employee_id=dto.employee_id,
            work_date=dto.work_date,
            log_in=dto.log_in,
            log_out=dto.log_out,
        )

    def __repr__(self) -> str:
        return f"<AttendanceModel {self.employee_id} {self.work_date}>"


# ---------------------------------------------------------------------------
# PayrollRecordModel
# ---------------------------------------------------------------------------


class PayrollRecordModel(TrackedBase):
    """
    ORM model for a persisted ``PayrollResult``.

    The calculator does not persist; a caller that wants to keep a result
    stores ``PayrollRecordModel.from_dto(result)`` in its own transaction.
    """

    __tablename__ = "payroll_records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("payroll_employees.employee_id"), nullable=False
    )
    period_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    period_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    monthly_rate: Mapped[Decimal] = mapped_column(nullable=False)
    days_worked: Mapped[int] = mapped_column(nullable=False)
    overtime_hours: Mapped[Decimal] = mapped_column(nullable=False)
    gross_pay: Mapped[Decimal] = mapped_column(nullable=False)
    total_deductions: Mapped[Decimal] = mapped_column(nullable=False)
    net_pay: Mapped[Decimal] = mapped_column(nullable=False)
    social_insurance: Mapped[Decimal | None] = mapped_column(nullable=True)
    health_insurance: Mapped[Decimal | None] = mapped_column(nullable=True)
    housing_fund: Mapped[Decimal | None] = mapped_column(nullable=True)

    __table_args__ = (
        Index("idx_payroll_record_employee_period", "employee_id", "period_start"),
    )

    def to_dto(self) -> PayrollResult:
        deductions = None
        if self.social_insurance is not None:
            deductions = StatutoryDeductions(
                social_insurance=self.social_insurance,
                health_insurance=self.health_insurance,
                housing_fund=self.housing_fund,
            )
        return PayrollResult(
            employee_id=self.employee_id,
            monthly_rate=self.monthly_rate,
            days_worked=self.days_worked,
            overtime_hours=self.overtime_hours,
            gross_pay=self.gross_pay,
            total_deductions=self.total_deductions,
            net_pay=self.net_pay,
            period_start=self.period_start,
            period_end=self.period_end,
            deductions=deductions,
        )

    @classmethod
    def from_dto(cls, dto: PayrollResult) -> "PayrollRecordModel":
        breakdown = dto.deductions
        return cls(
            employee_id=dto.employee_id,
            period_start=dto.period_start,
            period_end=dto.period_end,
            monthly_rate=dto.monthly_rate,
            days_worked=dto.days_worked,
            overtime_hours=dto.overtime_hours,
            gross_pay=dto.gross_pay,
            total_deductions=dto.total_deductions,
            net_pay=dto.net_pay,
            social_insurance=breakdown.social_insurance if breakdown else None,
            health_insurance=breakdown.health_insurance if breakdown else None,
            housing_fund=breakdown.housing_fund if breakdown else None,
        )

    def __repr__(self) -> str:
        return (
            f"<PayrollRecordModel {self.employee_id} "
            f"{self.period_start}..{self.period_end} net={self.net_pay}>"
        )
