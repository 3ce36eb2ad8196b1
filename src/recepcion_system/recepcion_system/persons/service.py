from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from .model import Person
from .repository import PersonRepository


class PersonService:
    """Use case: look up a visitor by cédula (pre-fills the visit form)."""

    def __init__(self, persons: PersonRepository):
        self._persons = persons

    def find_person(self, national_id: Optional[str]) -> Optional[Person]:
        national_id = require_non_empty(national_id, "Cédula")
        return self._persons.get_by_national_id(national_id)
