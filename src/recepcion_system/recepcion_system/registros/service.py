from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import RegistroRecord, RegistroRequest
from .repository import RegistroRepository

logger = logging.getLogger(__name__)


class RegistroService:
    """Use case: employee entry log.

    Creating a registro finds the employee by (first_name, last_name) and
    creates one when no match exists.
    """

    def __init__(self, registros: RegistroRepository, employees: EmployeeRepository):
        self._registros = registros
        self._employees = employees

    def list_registros(self) -> Sequence[RegistroRecord]:
        return self._registros.list_records()

    def get_registro(self, registro_id: int) -> RegistroRecord:
        record = self._registros.get_record(registro_id)
        if not record:
            raise NotFoundError("Registro no encontrado")
        return record

    def create_registro(self, req: RegistroRequest) -> RegistroRecord:
        employee = self._employees.find_or_create(first_name=req.first_name, last_name=req.last_name, plate=req.plate)
        if employee.created:
            logger.info("Employee auto-created id=%s for registro", employee.id)

        registro_id = self._registros.create(employee_id=employee.id, entry_time=req.entry_time)
        return self.get_registro(registro_id)

    def update_registro(self, registro_id: int, req: RegistroRequest) -> RegistroRecord:
        employee_id = self._registros.get_employee_id(registro_id)
        if employee_id is None:
            raise NotFoundError("Registro no encontrado")

        self._employees.update(employee_id, first_name=req.first_name, last_name=req.last_name, plate=req.plate)
        self._registros.update_entry_time(registro_id, entry_time=req.entry_time)
        return self.get_registro(registro_id)

    def delete_registro(self, registro_id: int) -> None:
        if not self._registros.delete_by_id(registro_id):
            raise NotFoundError("Registro no encontrado")
