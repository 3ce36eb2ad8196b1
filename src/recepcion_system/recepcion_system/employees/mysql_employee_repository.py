from __future__ import annotations

from typing import Optional, Sequence

from ..core.results import FindOrCreateResult
from ..database.mysql_base import MySQLRepository, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        first_name=r["nombre"],
        last_name=r["apellido"],
        plate=r.get("placa"),
    )


class MySQLEmployeeRepository(MySQLRepository, EmployeeRepository):
    def list_all(self) -> Sequence[Employee]:
        with self._cursor() as cur:
            cur.execute("SELECT id, nombre, apellido, placa FROM empleados ORDER BY apellido, nombre, id")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._cursor() as cur:
            cur.execute("SELECT id, nombre, apellido, placa FROM empleados WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, *, first_name: str, last_name: str, plate: Optional[str]) -> int:
        with self._cursor() as cur:
            cur.execute(
                "INSERT INTO empleados(nombre, apellido, placa) VALUES(%s,%s,%s)",
                (first_name, last_name, plate),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, first_name: str, last_name: str, plate: Optional[str]) -> None:
        with self._cursor() as cur:
            cur.execute(
                "UPDATE empleados SET nombre=%s, apellido=%s, placa=%s WHERE id=%s",
                (first_name, last_name, plate, int(employee_id)),
            )

    def delete_by_id(self, employee_id: int) -> bool:
        with self._cursor() as cur:
            cur.execute("DELETE FROM empleados WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def find_or_create(self, *, first_name: str, last_name: str, plate: Optional[str]) -> FindOrCreateResult:
        with self._cursor() as cur:
            cur.execute(
                "SELECT id FROM empleados WHERE nombre=%s AND apellido=%s ORDER BY id LIMIT 1",
                (first_name, last_name),
            )
            r = fetchone(cur)
            if r:
                return FindOrCreateResult(id=int(r["id"]), created=False)

        return FindOrCreateResult(id=self.create(first_name=first_name, last_name=last_name, plate=plate), created=True)
