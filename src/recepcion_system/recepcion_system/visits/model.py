from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import format_iso_utc
from ..common.validators import FieldValidator, require_national_id, require_non_empty, require_plate


@dataclass(frozen=True)
class VisitRequest:
    """A validated visitor entry submission."""

    national_id: str
    first_name: str
    last_name: str
    company: str
    area: str
    items_carried_in: str
    authorized_by: str
    plate: str

    @classmethod
    def from_payload(cls, payload) -> "VisitRequest":
        v = FieldValidator(payload)
        national_id = v.check("national_id", require_national_id, label="Cédula")
        first_name = v.check("first_name", require_non_empty, label="Nombre")
        last_name = v.check("last_name", require_non_empty, label="Apellido")
        company = v.check("company", require_non_empty, label="Empresa")
        area = v.check("area", require_non_empty, label="Área")
        items = v.check("items_carried_in", require_non_empty, label="Elementos ingresados")
        authorized_by = v.check("authorized_by", require_non_empty, label="Autorizador")
        plate = v.check("plate", require_plate, label="Placa")
        v.raise_if_invalid()
        return cls(
            national_id=national_id,
            first_name=first_name,
            last_name=last_name,
            company=company,
            area=area,
            items_carried_in=items,
            authorized_by=authorized_by,
            plate=plate,
        )


@dataclass(frozen=True)
class VisitRecord:
    """Read-model: a visit joined with its person."""

    visit_id: int
    national_id: str
    first_name: str
    last_name: str
    company: str
    area: str
    items_carried_in: str
    authorized_by: str
    plate: str
    entry_time: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.visit_id,
            "national_id": self.national_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "company": self.company,
            "area": self.area,
            "items_carried_in": self.items_carried_in,
            "authorized_by": self.authorized_by,
            "plate": self.plate,
            "entry_time": format_iso_utc(self.entry_time),
        }
