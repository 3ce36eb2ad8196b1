from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import VisitRecord


class VisitRepository(Protocol):
    def create(self, *, person_id: int, area: str, items_carried_in: str, authorized_by: str, plate: str) -> int:
        """Insert a visit; entry time is assigned by the database (UTC)."""

        raise NotImplementedError

    def get_record(self, visit_id: int) -> Optional[VisitRecord]:
        raise NotImplementedError

    def list_records(self) -> Sequence[VisitRecord]:
        raise NotImplementedError
