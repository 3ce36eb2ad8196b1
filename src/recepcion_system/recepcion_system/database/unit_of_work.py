from __future__ import annotations

from contextlib import ExitStack
from typing import Protocol

from ..coverage.mysql_coverage_repository import MySQLCoverageRepository
from ..coverage.repository import CoverageRepository
from ..persons.mysql_person_repository import MySQLPersonRepository
from ..persons.repository import PersonRepository
from ..visits.mysql_visit_repository import MySQLVisitRepository
from ..visits.repository import VisitRepository
from .connection import DatabaseConnection
from .mysql_base import db_transaction


class UnitOfWork(Protocol):
    """Repositories sharing one connection and one transaction.

    Leaving the `with` block normally commits; leaving it with an exception
    rolls everything back.
    """

    persons: PersonRepository
    coverage: CoverageRepository
    visits: VisitRepository

    def __enter__(self) -> "UnitOfWork":
        raise NotImplementedError

    def __exit__(self, exc_type, exc, tb) -> bool:
        raise NotImplementedError


class MySQLUnitOfWork:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._stack: ExitStack | None = None

    def __enter__(self) -> "MySQLUnitOfWork":
        stack = ExitStack()
        _, cur = stack.enter_context(db_transaction(self._conn_factory))
        self._stack = stack
        self.persons = MySQLPersonRepository(self._conn_factory, cursor=cur)
        self.coverage = MySQLCoverageRepository(self._conn_factory, cursor=cur)
        self.visits = MySQLVisitRepository(self._conn_factory, cursor=cur)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        stack, self._stack = self._stack, None
        if stack is None:
            return False
        return bool(stack.__exit__(exc_type, exc, tb))


class MySQLUnitOfWorkFactory:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def __call__(self) -> MySQLUnitOfWork:
        return MySQLUnitOfWork(self._conn_factory)
