from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_minute
from ..common.validators import FieldValidator, optional_employee_plate, require_entry_time, require_non_empty


@dataclass(frozen=True)
class RegistroRecord:
    """Read-model: an employee entry joined with the employee."""

    registro_id: int
    entry_time: datetime
    first_name: str
    last_name: str
    plate: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.registro_id,
            "entry_time": format_minute(self.entry_time),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "plate": self.plate,
        }


@dataclass(frozen=True)
class RegistroRequest:
    first_name: str
    last_name: str
    entry_time: datetime
    plate: Optional[str] = None

    @classmethod
    def from_payload(cls, payload) -> "RegistroRequest":
        v = FieldValidator(payload)
        first_name = v.check("first_name", require_non_empty, label="Nombre")
        last_name = v.check("last_name", require_non_empty, label="Apellido")
        entry_time = v.check("entry_time", require_entry_time, label="Hora de ingreso")
        plate = v.check("plate", optional_employee_plate, label="Placa")
        v.raise_if_invalid("Nombre, apellido y hora son obligatorios")
        return cls(first_name=first_name, last_name=last_name, entry_time=entry_time, plate=plate)
