"""Read-only queries over persisted attendance records."""

from datetime import date

from sqlalchemy import select

from payroll_kernel.db.orm import AttendanceModel
from payroll_kernel.models.attendance import Attendance
from payroll_kernel.selectors.base import BaseSelector


class AttendanceSelector(BaseSelector):
    """Attendance lookups by employee and date range."""

    def for_employee_in_period(
        self,
        employee_id: int,
        period_start: date,
        period_end: date,
    ) -> list[Attendance]:
        """
        Records of ``employee_id`` dated within [period_start, period_end].

        Ordered by date; ordering carries no meaning for the calculation.
        """
        stmt = (
            select(AttendanceModel)
            .where(
                AttendanceModel.employee_id == employee_id,
                AttendanceModel.work_date >= period_start,
                AttendanceModel.work_date <= period_end,
            )
            .order_by(AttendanceModel.work_date)
        )
        return [model.to_dto() for model in self.session.scalars(stmt)]
