from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import RegistroRecord


class RegistroRepository(Protocol):
    def create(self, *, employee_id: int, entry_time: datetime) -> int:
        raise NotImplementedError

    def get_record(self, registro_id: int) -> Optional[RegistroRecord]:
        raise NotImplementedError

    def list_records(self) -> Sequence[RegistroRecord]:
        """Newest entry first."""

        raise NotImplementedError

    def get_employee_id(self, registro_id: int) -> Optional[int]:
        raise NotImplementedError

    def update_entry_time(self, registro_id: int, *, entry_time: datetime) -> None:
        raise NotImplementedError

    def delete_by_id(self, registro_id: int) -> bool:
        raise NotImplementedError
