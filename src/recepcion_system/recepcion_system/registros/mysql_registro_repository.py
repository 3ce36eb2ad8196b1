from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.mysql_base import MySQLRepository, fetchall, fetchone
from .model import RegistroRecord
from .repository import RegistroRepository

_RECORD_SELECT = """
    SELECT r.id, r.hora_ingreso, e.nombre, e.apellido, e.placa
    FROM registros r
    JOIN empleados e ON r.empleado_id = e.id
"""


def _to_record(r: dict) -> RegistroRecord:
    return RegistroRecord(
        registro_id=int(r["id"]),
        entry_time=r["hora_ingreso"],
        first_name=r["nombre"],
        last_name=r["apellido"],
        plate=r.get("placa"),
    )


class MySQLRegistroRepository(MySQLRepository, RegistroRepository):
    def create(self, *, employee_id: int, entry_time: datetime) -> int:
        with self._cursor() as cur:
            cur.execute(
                "INSERT INTO registros(empleado_id, hora_ingreso) VALUES(%s,%s)",
                (int(employee_id), entry_time),
            )
            return int(cur.lastrowid)

    def get_record(self, registro_id: int) -> Optional[RegistroRecord]:
        with self._cursor() as cur:
            cur.execute(_RECORD_SELECT + " WHERE r.id=%s", (int(registro_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_records(self) -> Sequence[RegistroRecord]:
        with self._cursor() as cur:
            cur.execute(_RECORD_SELECT + " ORDER BY r.hora_ingreso DESC, r.id DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def get_employee_id(self, registro_id: int) -> Optional[int]:
        with self._cursor() as cur:
            cur.execute("SELECT empleado_id FROM registros WHERE id=%s", (int(registro_id),))
            r = fetchone(cur)
            return int(r["empleado_id"]) if r else None

    def update_entry_time(self, registro_id: int, *, entry_time: datetime) -> None:
        with self._cursor() as cur:
            cur.execute("UPDATE registros SET hora_ingreso=%s WHERE id=%s", (entry_time, int(registro_id)))

    def delete_by_id(self, registro_id: int) -> bool:
        with self._cursor() as cur:
            cur.execute("DELETE FROM registros WHERE id=%s", (int(registro_id),))
            return cur.rowcount > 0
