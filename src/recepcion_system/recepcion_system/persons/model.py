from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import PLACEHOLDER_VALUE


@dataclass(frozen=True)
class Person:
    """Visitor identity, keyed by national id (cédula)."""

    person_id: int
    national_id: str
    first_name: str
    last_name: str
    company: str

    @property
    def is_placeholder(self) -> bool:
        return PLACEHOLDER_VALUE in (self.first_name, self.last_name, self.company)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["id"] = data.pop("person_id")
        return data

