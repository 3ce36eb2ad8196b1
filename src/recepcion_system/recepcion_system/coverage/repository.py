from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import EPSRecord


class CoverageRepository(Protocol):
    """ARL and EPS rows, always keyed by the person's durable id."""

    def upsert_arl(self, *, person_id: int, coverage_month: date, provider: str) -> None:
        raise NotImplementedError

    def add_eps(self, *, person_id: int, expiration_date: date, provider: str) -> int:
        raise NotImplementedError

    def has_arl_between(self, *, person_id: int, start: date, end: date) -> bool:
        raise NotImplementedError

    def latest_valid_eps(self, *, person_id: int, on_or_after: date) -> Optional[EPSRecord]:
        raise NotImplementedError
