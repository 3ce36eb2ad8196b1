from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from ..common.datetime_utils import first_day_of_month
from ..core.enums import CoverageKind
from ..core.exceptions import PersistenceError, describe_error
from ..core.results import FindOrCreateResult
from .model import CoverageRequest

if TYPE_CHECKING:
    from ..database.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES = {
    CoverageKind.ARL: "Error al registrar ARL",
    CoverageKind.EPS: "Error al registrar EPS",
}


class CoverageService:
    """Use case: register ARL / EPS coverage for a cédula.

    Unknown cédulas get a placeholder person ("TEMPORAL") so coverage can be
    filed before the visitor's first entry; the visit form later overwrites
    the placeholder with real data.
    """

    def __init__(self, unit_of_work: Callable[[], UnitOfWork]):
        self._unit_of_work = unit_of_work

    def register(self, req: CoverageRequest) -> FindOrCreateResult:
        try:
            with self._unit_of_work() as uow:
                person = uow.persons.find_or_create_placeholder(req.national_id)
                if person.created:
                    logger.info("Placeholder person created id=%s national_id=%s", person.id, req.national_id)

                if req.kind == CoverageKind.ARL:
                    uow.coverage.upsert_arl(
                        person_id=person.id,
                        coverage_month=first_day_of_month(req.coverage_date),
                        provider=req.provider,
                    )
                else:
                    # Each EPS submission opens a new window; the latest valid one wins.
                    uow.coverage.add_eps(
                        person_id=person.id,
                        expiration_date=req.coverage_date,
                        provider=req.provider,
                    )
        except Exception as e:
            logger.exception("%s coverage failed national_id=%s", req.kind.value.upper(), req.national_id)
            raise PersistenceError(_FAILURE_MESSAGES[req.kind], detail=describe_error(e)) from e

        return person
