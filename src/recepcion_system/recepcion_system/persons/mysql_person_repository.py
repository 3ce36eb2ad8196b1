from __future__ import annotations

import logging
from typing import Optional

from mysql.connector import errors as mysql_errors

from ..core.constants import PLACEHOLDER_VALUE
from ..core.results import FindOrCreateResult
from ..database.mysql_base import MySQLRepository, fetchone, is_duplicate_key
from .model import Person
from .repository import PersonRepository

logger = logging.getLogger(__name__)

_PERSON_SELECT = """
    SELECT id, cedula, nombre, apellido, empresa
    FROM personas
    WHERE cedula=%s
"""
_SHARED_LOCK = " LOCK IN SHARE MODE"


class MySQLPersonRepository(MySQLRepository, PersonRepository):
    def get_by_national_id(self, national_id: str, *, locking: bool = False) -> Optional[Person]:
        """Person by cédula.

        `locking` reads the latest committed row (shared lock) instead of the
        transaction's snapshot.
        """
        sql = _PERSON_SELECT + (_SHARED_LOCK if locking else "")
        with self._cursor() as cur:
            cur.execute(sql, (national_id,))
            r = fetchone(cur)
            if not r:
                return None
            return Person(
                person_id=int(r["id"]),
                national_id=r["cedula"],
                first_name=r["nombre"],
                last_name=r["apellido"],
                company=r["empresa"],
            )

    def upsert(self, *, national_id: str, first_name: str, last_name: str, company: str) -> None:
        with self._cursor() as cur:
            cur.execute(
                """
                INSERT INTO personas(cedula, nombre, apellido, empresa)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    nombre=VALUES(nombre), apellido=VALUES(apellido), empresa=VALUES(empresa)
                """,
                (national_id, first_name, last_name, company),
            )

    def find_or_create_placeholder(self, national_id: str) -> FindOrCreateResult:
        existing = self.get_by_national_id(national_id)
        if existing:
            return FindOrCreateResult(id=existing.person_id, created=False)

        try:
            with self._cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO personas(cedula, nombre, apellido, empresa)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (national_id, PLACEHOLDER_VALUE, PLACEHOLDER_VALUE, PLACEHOLDER_VALUE),
                )
                return FindOrCreateResult(id=int(cur.lastrowid), created=True)
        except mysql_errors.IntegrityError as e:
            if not is_duplicate_key(e):
                raise
            # Another request committed the same cédula after our snapshot; a
            # locking read sees its row.
            logger.info("Placeholder race on national_id=%s, re-reading existing row", national_id)
            winner = self.get_by_national_id(national_id, locking=True)
            if not winner:
                raise
            return FindOrCreateResult(id=winner.person_id, created=False)
