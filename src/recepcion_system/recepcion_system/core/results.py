from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FindOrCreateResult:
    """Outcome of a find-or-create: the durable id and whether a row was inserted."""

    id: int
    created: bool
