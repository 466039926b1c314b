"""Read-only queries over persisted employees."""

from sqlalchemy import select

from payroll_kernel.db.orm import EmployeeModel
from payroll_kernel.models.employee import Employee
from payroll_kernel.selectors.base import BaseSelector


class EmployeeSelector(BaseSelector):
    """Employee lookups by id and listing."""

    def get(self, employee_id: int) -> Employee | None:
        """Employee with ``employee_id``, or None if no row exists."""
        model = self.session.get(EmployeeModel, employee_id)
        return model.to_dto() if model is not None else None

    def list_all(self) -> list[Employee]:
        stmt = select(EmployeeModel).order_by(EmployeeModel.employee_id)
        return [model.to_dto() for model in self.session.scalars(stmt)]

    def exists(self, employee_id: int) -> bool:
        return self.session.get(EmployeeModel, employee_id) is not None
