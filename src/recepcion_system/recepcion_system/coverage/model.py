from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.validators import FieldValidator, require_iso_date, require_national_id, require_non_empty
from ..core.enums import CoverageKind


@dataclass(frozen=True)
class ARLRecord:
    """Monthly occupational-risk insurance (ARL) coverage."""

    arl_id: int
    person_id: int
    coverage_month: date
    provider: str


@dataclass(frozen=True)
class EPSRecord:
    """Health insurance (EPS) coverage window, valid through `expiration_date`."""

    eps_id: int
    person_id: int
    expiration_date: date
    provider: str


@dataclass(frozen=True)
class CoverageRequest:
    kind: CoverageKind
    national_id: str
    coverage_date: date
    provider: str

    @classmethod
    def arl_from_payload(cls, payload) -> "CoverageRequest":
        v = FieldValidator(payload)
        national_id = v.check("national_id", require_national_id, label="Cédula")
        month = v.check("coverage_month", require_iso_date, label="Mes de vigencia")
        provider = v.check("provider", require_non_empty, label="Entidad ARL")
        v.raise_if_invalid()
        return cls(kind=CoverageKind.ARL, national_id=national_id, coverage_date=month, provider=provider)

    @classmethod
    def eps_from_payload(cls, payload) -> "CoverageRequest":
        v = FieldValidator(payload)
        national_id = v.check("national_id", require_national_id, label="Cédula")
        expiration = v.check("expiration_date", require_iso_date, label="Fecha de vencimiento")
        provider = v.check("provider", require_non_empty, label="Entidad EPS")
        v.raise_if_invalid()
        return cls(kind=CoverageKind.EPS, national_id=national_id, coverage_date=expiration, provider=provider)
