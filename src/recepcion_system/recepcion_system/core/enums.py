from __future__ import annotations

from enum import Enum


class CoverageCode(str, Enum):
    """Machine-readable reasons a visit is rejected for missing coverage."""

    ARL_MENSUAL_REQUERIDA = "ARL_MENSUAL_REQUERIDA"
    EPS_REQUERIDA = "EPS_REQUERIDA"


class CoverageKind(str, Enum):
    ARL = "arl"
    EPS = "eps"


class VisitStep(str, Enum):
    """Steps of the visit registration unit of work, in execution order."""

    UPSERT_PERSON = "UPSERT_PERSON"
    RESOLVE_PERSON = "RESOLVE_PERSON"
    CHECK_ARL = "CHECK_ARL"
    CHECK_EPS = "CHECK_EPS"
    INSERT_VISIT = "INSERT_VISIT"
    COMPOSE_RESULT = "COMPOSE_RESULT"
