from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import FieldValidator, optional_employee_plate, require_non_empty


@dataclass(frozen=True)
class Employee:
    employee_id: int
    first_name: str
    last_name: str
    plate: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "plate": self.plate,
        }


@dataclass(frozen=True)
class EmployeeRequest:
    first_name: str
    last_name: str
    plate: Optional[str] = None

    @classmethod
    def from_payload(cls, payload) -> "EmployeeRequest":
        v = FieldValidator(payload)
        first_name = v.check("first_name", require_non_empty, label="Nombre")
        last_name = v.check("last_name", require_non_empty, label="Apellido")
        plate = v.check("plate", optional_employee_plate, label="Placa")
        v.raise_if_invalid("Nombre y apellido son obligatorios")
        return cls(first_name=first_name, last_name=last_name, plate=plate)
