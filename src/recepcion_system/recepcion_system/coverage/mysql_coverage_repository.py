from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.mysql_base import MySQLRepository, fetchone
from .model import EPSRecord
from .repository import CoverageRepository


class MySQLCoverageRepository(MySQLRepository, CoverageRepository):
    def upsert_arl(self, *, person_id: int, coverage_month: date, provider: str) -> None:
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO arl(persona_id, mes_vigencia, entidad)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE mes_vigencia=VALUES(mes_vigencia), entidad=VALUES(entidad)
                """,
                (int(person_id), coverage_month, provider),
            )

    def add_eps(self, *, person_id: int, expiration_date: date, provider: str) -> int:
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO eps(persona_id, fecha_vencimiento, entidad)
                VALUES(%s,%s,%s)
                """,
                (int(person_id), expiration_date, provider),
            )
            return int(cur.lastrowid)

    def has_arl_between(self, *, person_id: int, start: date, end: date) -> bool:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT 1 AS ok FROM arl
                WHERE persona_id=%s AND mes_vigencia BETWEEN %s AND %s
                LIMIT 1
                """,
                (int(person_id), start, end),
            )
            return fetchone(cur) is not None

    def latest_valid_eps(self, *, person_id: int, on_or_after: date) -> Optional[EPSRecord]:
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT id, persona_id, fecha_vencimiento, entidad
                FROM eps
                WHERE persona_id=%s AND fecha_vencimiento >= %s
                ORDER BY fecha_vencimiento DESC
                LIMIT 1
                """,
                (int(person_id), on_or_after),
            )
            r = fetchone(cur)
            if not r:
                return None
            return EPSRecord(
                eps_id=int(r["id"]),
                person_id=int(r["persona_id"]),
                expiration_date=r["fecha_vencimiento"],
                provider=r["entidad"],
            )
