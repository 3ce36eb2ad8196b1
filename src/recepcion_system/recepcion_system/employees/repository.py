from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.results import FindOrCreateResult
from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, first_name: str, last_name: str, plate: Optional[str]) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, *, first_name: str, last_name: str, plate: Optional[str]) -> None:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def find_or_create(self, *, first_name: str, last_name: str, plate: Optional[str]) -> FindOrCreateResult:
        """Match on (first_name, last_name); insert a new employee when absent."""

        raise NotImplementedError
