from __future__ import annotations

from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import Employee, EmployeeRequest
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employees (CRUD)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        return employee

    def create_employee(self, req: EmployeeRequest) -> Employee:
        employee_id = self._employees.create(first_name=req.first_name, last_name=req.last_name, plate=req.plate)
        return self.get_employee(employee_id)

    def update_employee(self, employee_id: int, req: EmployeeRequest) -> Employee:
        self.get_employee(employee_id)
        self._employees.update(employee_id, first_name=req.first_name, last_name=req.last_name, plate=req.plate)
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Empleado no encontrado")
