from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional

from ..core.constants import (
    EMPLOYEE_PLATE_MAX_LENGTH,
    NATIONAL_ID_MAX_LENGTH,
    NATIONAL_ID_MIN_LENGTH,
    PLATE_MAX_LENGTH,
)
from ..core.exceptions import ValidationError
from .datetime_utils import parse_entry_time, parse_iso_date


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def require_non_empty(value: Any, field_name: str) -> str:
    value = _as_text(value)
    if not value or not value.strip():
        raise ValidationError(f"{field_name} requerido")
    return value.strip()


def require_max_length(value: Any, field_name: str, max_len: int) -> str:
    value = _as_text(value)
    if len(value) > max_len:
        raise ValidationError(f"{field_name} tiene máximo {max_len} caracteres")
    return value


def require_digits(value: Any, field_name: str) -> str:
    value = _as_text(value)
    if not value.isascii() or not value.isdigit():
        raise ValidationError(f"{field_name}: solo números permitidos")
    return value


def require_iso_date(value: Any, field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name}: fecha inválida")


def require_entry_time(value: Any, field_name: str) -> datetime:
    value = require_non_empty(value, field_name)
    try:
        return parse_entry_time(value)
    except ValueError:
        raise ValidationError(f"{field_name}: fecha y hora inválidas")


def optional_text(value: Any) -> Optional[str]:
    value = _as_text(value).strip()
    return value or None


class FieldValidator:
    """Runs checks over a JSON payload and reports every failing field at once.

    Each check is one of the `require_*` functions above. Once a field fails,
    later checks on that field are skipped so it is reported only once.
    """

    def __init__(self, payload: Optional[Mapping[str, Any]]):
        self._payload = payload if isinstance(payload, Mapping) else {}
        self._errors: list[dict] = []
        self._failed: set[str] = set()

    def check(self, field: str, rule: Callable[..., Any], *args: Any, label: Optional[str] = None) -> Any:
        if field in self._failed:
            return None
        try:
            return rule(self._payload.get(field), label or field, *args)
        except ValidationError as e:
            self._failed.add(field)
            self._errors.append({"field": field, "message": str(e)})
            return None

    def raise_if_invalid(self, message: str = "Datos inválidos") -> None:
        if self._errors:
            raise ValidationError(message, errors=self._errors)


def require_national_id(value: Any, field_name: str) -> str:
    """Cédula: 6-20 characters, digits only."""
    value = _as_text(value)
    if not NATIONAL_ID_MIN_LENGTH <= len(value) <= NATIONAL_ID_MAX_LENGTH:
        raise ValidationError(
            f"{field_name} inválida ({NATIONAL_ID_MIN_LENGTH}-{NATIONAL_ID_MAX_LENGTH} caracteres)"
        )
    return require_digits(value, field_name)


def require_plate(value: Any, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    return require_max_length(value, field_name, PLATE_MAX_LENGTH)


def optional_employee_plate(value: Any, field_name: str) -> Optional[str]:
    """Employee plate: optional, blank means none."""
    value = optional_text(value)
    if value is not None:
        require_max_length(value, field_name, EMPLOYEE_PLATE_MAX_LENGTH)
    return value
