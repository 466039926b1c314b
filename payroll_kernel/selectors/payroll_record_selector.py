"""Read-only queries over persisted payroll results."""

from sqlalchemy import select

from payroll_kernel.db.orm import PayrollRecordModel
from payroll_kernel.models.payroll import PayrollResult
from payroll_kernel.selectors.base import BaseSelector


class PayrollRecordSelector(BaseSelector):
    """Payroll history of an employee."""

    def for_employee(self, employee_id: int) -> list[PayrollResult]:
        """Stored results of ``employee_id``, oldest period first."""
        stmt = (
            select(PayrollRecordModel)
            .where(PayrollRecordModel.employee_id == employee_id)
            .order_by(PayrollRecordModel.period_start, PayrollRecordModel.id)
        )
        return [model.to_dto() for model in self.session.scalars(stmt)]
