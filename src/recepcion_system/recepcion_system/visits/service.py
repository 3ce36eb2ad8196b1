from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock, month_window, today_utc
from ..core.enums import CoverageCode, VisitStep
from ..core.exceptions import CoverageError, IntegrityError, PersistenceError, describe_error
from .model import VisitRecord, VisitRequest
from .repository import VisitRepository

if TYPE_CHECKING:
    from ..database.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class _Progress:
    """Tracks which step of the registration is running, for logs and errors."""

    def __init__(self, national_id: str):
        self.national_id = national_id
        self.step: Optional[VisitStep] = None

    def enter(self, step: VisitStep) -> None:
        self.step = step
        logger.debug("visit national_id=%s step=%s", self.national_id, step.value)


class VisitService:
    """Use case: register a visitor entry, gated by ARL and EPS coverage.

    The whole registration runs in one unit of work (one connection, one
    transaction):

        UPSERT_PERSON -> RESOLVE_PERSON -> CHECK_ARL -> CHECK_EPS
            -> INSERT_VISIT -> COMPOSE_RESULT -> commit

    A coverage rejection or any database error rolls back every step,
    including the person upsert, so a rejected visit leaves no trace.
    Coverage is looked up by the person's durable id, never by cédula.
    """

    def __init__(
        self,
        unit_of_work: Callable[[], UnitOfWork],
        visits: VisitRepository,
        *,
        clock: Optional[Clock] = None,
    ):
        self._unit_of_work = unit_of_work
        self._visits = visits
        self._clock = clock or SystemClock()

    def register_visit(self, req: VisitRequest) -> VisitRecord:
        today = today_utc(self._clock)
        window = month_window(today)
        progress = _Progress(req.national_id)

        try:
            with self._unit_of_work() as uow:
                progress.enter(VisitStep.UPSERT_PERSON)
                uow.persons.upsert(
                    national_id=req.national_id,
                    first_name=req.first_name,
                    last_name=req.last_name,
                    company=req.company,
                )

                progress.enter(VisitStep.RESOLVE_PERSON)
                person = uow.persons.get_by_national_id(req.national_id)
                if not person:
                    raise IntegrityError(
                        "Persona no encontrada tras el registro",
                        detail=f"cedula={req.national_id}",
                        step=progress.step,
                    )

                progress.enter(VisitStep.CHECK_ARL)
                if not uow.coverage.has_arl_between(person_id=person.person_id, start=window.start, end=window.end):
                    raise CoverageError(CoverageCode.ARL_MENSUAL_REQUERIDA, "ARL requerida para el mes actual")

                progress.enter(VisitStep.CHECK_EPS)
                if uow.coverage.latest_valid_eps(person_id=person.person_id, on_or_after=today) is None:
                    raise CoverageError(CoverageCode.EPS_REQUERIDA, "EPS vencida o no registrada")

                progress.enter(VisitStep.INSERT_VISIT)
                visit_id = uow.visits.create(
                    person_id=person.person_id,
                    area=req.area,
                    items_carried_in=req.items_carried_in,
                    authorized_by=req.authorized_by,
                    plate=req.plate,
                )

                progress.enter(VisitStep.COMPOSE_RESULT)
                record = uow.visits.get_record(visit_id)
                if record is None:
                    raise IntegrityError(
                        "Visita no encontrada tras el registro",
                        detail=f"visita_id={visit_id}",
                        step=progress.step,
                    )
        except CoverageError as e:
            logger.info("Visit rejected national_id=%s code=%s", req.national_id, e.code.value)
            raise
        except PersistenceError:
            logger.exception("Visit rolled back national_id=%s step=%s", req.national_id, progress.step)
            raise
        except Exception as e:
            logger.exception("Visit rolled back national_id=%s step=%s", req.national_id, progress.step)
            raise PersistenceError("Error en el registro", detail=describe_error(e), step=progress.step) from e

        logger.info("Visit registered id=%s national_id=%s", record.visit_id, record.national_id)
        return record

    def list_visits(self) -> Sequence[VisitRecord]:
        return self._visits.list_records()
