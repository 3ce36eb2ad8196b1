from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import as_utc
from ..database.mysql_base import MySQLRepository, fetchall, fetchone
from .model import VisitRecord
from .repository import VisitRepository

_RECORD_SELECT = """
    SELECT v.id, p.cedula, p.nombre, p.apellido, p.empresa,
           v.area, v.elementos_ingresa, v.autoriza_ingreso, v.placa,
           v.hora_ingreso
    FROM visitas v
    JOIN personas p ON v.persona_id = p.id
"""


def _to_record(r: dict) -> VisitRecord:
    return VisitRecord(
        visit_id=int(r["id"]),
        national_id=r["cedula"],
        first_name=r["nombre"],
        last_name=r["apellido"],
        company=r["empresa"],
        area=r["area"],
        items_carried_in=r["elementos_ingresa"],
        authorized_by=r["autoriza_ingreso"],
        plate=r["placa"],
        entry_time=as_utc(r["hora_ingreso"]),
    )


class MySQLVisitRepository(MySQLRepository, VisitRepository):
    def create(self, *, person_id: int, area: str, items_carried_in: str, authorized_by: str, plate: str) -> int:
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO visitas(persona_id, area, elementos_ingresa, autoriza_ingreso, placa)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(person_id), area, items_carried_in, authorized_by, plate),
            )
            return int(cur.lastrowid)

    def get_record(self, visit_id: int) -> Optional[VisitRecord]:
        with self._cursor() as cur:
            cur.execute(_RECORD_SELECT + " WHERE v.id=%s", (int(visit_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_records(self) -> Sequence[VisitRecord]:
        with self._cursor() as cur:
            cur.execute(_RECORD_SELECT + " ORDER BY v.hora_ingreso DESC, v.id DESC")
            return [_to_record(r) for r in fetchall(cur)]
