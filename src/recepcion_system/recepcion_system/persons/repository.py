from __future__ import annotations

from typing import Optional, Protocol

from ..core.results import FindOrCreateResult
from .model import Person


class PersonRepository(Protocol):
    def get_by_national_id(self, national_id: str) -> Optional[Person]:
        raise NotImplementedError

    def upsert(self, *, national_id: str, first_name: str, last_name: str, company: str) -> None:
        """Insert or, when the national id exists, overwrite names and company."""

        raise NotImplementedError

    def find_or_create_placeholder(self, national_id: str) -> FindOrCreateResult:
        raise NotImplementedError
