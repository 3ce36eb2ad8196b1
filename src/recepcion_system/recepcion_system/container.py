from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.datetime_utils import Clock
from .core.constants import DEFAULT_POOL_SIZE
from .coverage.service import CoverageService
from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import MySQLUnitOfWorkFactory
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .persons.mysql_person_repository import MySQLPersonRepository
from .persons.service import PersonService
from .registros.mysql_registro_repository import MySQLRegistroRepository
from .registros.service import RegistroService
from .visits.mysql_visit_repository import MySQLVisitRepository
from .visits.service import VisitService


@dataclass(frozen=True)
class Container:
    employee_service: EmployeeService
    registro_service: RegistroService
    person_service: PersonService
    coverage_service: CoverageService
    visit_service: VisitService


def build_container(*, db_config: dict, clock: Optional[Clock] = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config.get("password", "")),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )
    conn = DatabaseConnection(config)

    employees_repo = MySQLEmployeeRepository(conn)
    registros_repo = MySQLRegistroRepository(conn)
    persons_repo = MySQLPersonRepository(conn)
    visits_repo = MySQLVisitRepository(conn)
    unit_of_work = MySQLUnitOfWorkFactory(conn)

    return Container(
        employee_service=EmployeeService(employees_repo),
        registro_service=RegistroService(registros_repo, employees_repo),
        person_service=PersonService(persons_repo),
        coverage_service=CoverageService(unit_of_work),
        visit_service=VisitService(unit_of_work, visits_repo, clock=clock),
    )
