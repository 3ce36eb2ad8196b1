from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from src.recepcion_system.recepcion_system.common.datetime_utils import FixedClock
from src.recepcion_system.recepcion_system.container import Container
from src.recepcion_system.recepcion_system.core.constants import PLACEHOLDER_VALUE
from src.recepcion_system.recepcion_system.core.results import FindOrCreateResult
from src.recepcion_system.recepcion_system.coverage.model import ARLRecord, EPSRecord
from src.recepcion_system.recepcion_system.coverage.service import CoverageService
from src.recepcion_system.recepcion_system.employees.model import Employee
from src.recepcion_system.recepcion_system.employees.service import EmployeeService
from src.recepcion_system.recepcion_system.main import create_app
from src.recepcion_system.recepcion_system.persons.model import Person
from src.recepcion_system.recepcion_system.persons.service import PersonService
from src.recepcion_system.recepcion_system.registros.model import RegistroRecord
from src.recepcion_system.recepcion_system.registros.service import RegistroService
from src.recepcion_system.recepcion_system.visits.model import VisitRecord
from src.recepcion_system.recepcion_system.visits.service import VisitService


@dataclass
class InMemoryDB:
    """Tables kept as plain dicts/lists; snapshot/restore stands in for a transaction."""

    persons: dict[int, Person] = field(default_factory=dict)
    arl: list[ARLRecord] = field(default_factory=list)
    eps: list[EPSRecord] = field(default_factory=list)
    visits: dict[int, dict] = field(default_factory=dict)
    employees: dict[int, Employee] = field(default_factory=dict)
    registros: dict[int, dict] = field(default_factory=dict)
    next_id: int = 1

    def new_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value

    def snapshot(self) -> dict:
        return copy.deepcopy(self.__dict__)

    def restore(self, state: dict) -> None:
        self.__dict__.update(copy.deepcopy(state))


class InMemoryPersons:
    def __init__(self, db: InMemoryDB):
        self._db = db

    def get_by_national_id(self, national_id: str) -> Optional[Person]:
        for p in self._db.persons.values():
            if p.national_id == national_id:
                return p
        return None

    def upsert(self, *, national_id, first_name, last_name, company) -> None:
        existing = self.get_by_national_id(national_id)
        person_id = existing.person_id if existing else self._db.new_id()
        self._db.persons[person_id] = Person(
            person_id=person_id,
            national_id=national_id,
            first_name=first_name,
            last_name=last_name,
            company=company,
        )

    def find_or_create_placeholder(self, national_id: str) -> FindOrCreateResult:
        existing = self.get_by_national_id(national_id)
        if existing:
            return FindOrCreateResult(id=existing.person_id, created=False)
        person_id = self._db.new_id()
        self._db.persons[person_id] = Person(
            person_id=person_id,
            national_id=national_id,
            first_name=PLACEHOLDER_VALUE,
            last_name=PLACEHOLDER_VALUE,
            company=PLACEHOLDER_VALUE,
        )
        return FindOrCreateResult(id=person_id, created=True)


class InMemoryCoverage:
    def __init__(self, db: InMemoryDB):
        self._db = db
        self.fail_with: Optional[Exception] = None

    def upsert_arl(self, *, person_id, coverage_month, provider) -> None:
        if self.fail_with:
            raise self.fail_with
        self._db.arl = [
            a for a in self._db.arl if not (a.person_id == person_id and a.coverage_month == coverage_month)
        ]
        self._db.arl.append(ARLRecord(self._db.new_id(), person_id, coverage_month, provider))

    def add_eps(self, *, person_id, expiration_date, provider) -> int:
        if self.fail_with:
            raise self.fail_with
        eps_id = self._db.new_id()
        self._db.eps.append(EPSRecord(eps_id, person_id, expiration_date, provider))
        return eps_id

    def has_arl_between(self, *, person_id, start, end) -> bool:
        return any(a.person_id == person_id and start <= a.coverage_month <= end for a in self._db.arl)

    def latest_valid_eps(self, *, person_id, on_or_after) -> Optional[EPSRecord]:
        valid = [e for e in self._db.eps if e.person_id == person_id and e.expiration_date >= on_or_after]
        return max(valid, key=lambda e: e.expiration_date) if valid else None


class InMemoryVisits:
    def __init__(self, db: InMemoryDB, clock: FixedClock):
        self._db = db
        self._clock = clock
        self.fail_with: Optional[Exception] = None

    def create(self, *, person_id, area, items_carried_in, authorized_by, plate) -> int:
        if self.fail_with:
            raise self.fail_with
        visit_id = self._db.new_id()
        self._db.visits[visit_id] = {
            "person_id": person_id,
            "area": area,
            "items_carried_in": items_carried_in,
            "authorized_by": authorized_by,
            "plate": plate,
            "entry_time": self._clock.now().replace(tzinfo=None),
        }
        return visit_id

    def get_record(self, visit_id: int) -> Optional[VisitRecord]:
        v = self._db.visits.get(visit_id)
        if not v:
            return None
        p = self._db.persons[v["person_id"]]
        return VisitRecord(
            visit_id=visit_id,
            national_id=p.national_id,
            first_name=p.first_name,
            last_name=p.last_name,
            company=p.company,
            area=v["area"],
            items_carried_in=v["items_carried_in"],
            authorized_by=v["authorized_by"],
            plate=v["plate"],
            entry_time=v["entry_time"],
        )

    def list_records(self):
        records = [self.get_record(vid) for vid in self._db.visits]
        return sorted(records, key=lambda r: (r.entry_time, r.visit_id), reverse=True)


class InMemoryUnitOfWork:
    def __init__(self, db: InMemoryDB, persons, coverage, visits, log: list):
        self._db = db
        self._log = log
        self.persons = persons
        self.coverage = coverage
        self.visits = visits
        self._state = None

    def __enter__(self):
        self._state = self._db.snapshot()
        self._log.append("begin")
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self._log.append("commit")
        else:
            self._db.restore(self._state)
            self._log.append("rollback")
        return False


class InMemoryEmployees:
    def __init__(self, db: InMemoryDB):
        self._db = db

    def list_all(self):
        return sorted(self._db.employees.values(), key=lambda e: (e.last_name, e.first_name, e.employee_id))

    def get_by_id(self, employee_id):
        return self._db.employees.get(int(employee_id))

    def create(self, *, first_name, last_name, plate) -> int:
        employee_id = self._db.new_id()
        self._db.employees[employee_id] = Employee(employee_id, first_name, last_name, plate)
        return employee_id

    def update(self, employee_id, *, first_name, last_name, plate) -> None:
        if int(employee_id) in self._db.employees:
            self._db.employees[int(employee_id)] = Employee(int(employee_id), first_name, last_name, plate)

    def delete_by_id(self, employee_id) -> bool:
        return self._db.employees.pop(int(employee_id), None) is not None

    def find_or_create(self, *, first_name, last_name, plate) -> FindOrCreateResult:
        for e in sorted(self._db.employees.values(), key=lambda e: e.employee_id):
            if e.first_name == first_name and e.last_name == last_name:
                return FindOrCreateResult(id=e.employee_id, created=False)
        return FindOrCreateResult(id=self.create(first_name=first_name, last_name=last_name, plate=plate), created=True)


class InMemoryRegistros:
    def __init__(self, db: InMemoryDB):
        self._db = db

    def create(self, *, employee_id, entry_time) -> int:
        registro_id = self._db.new_id()
        self._db.registros[registro_id] = {"employee_id": employee_id, "entry_time": entry_time}
        return registro_id

    def get_record(self, registro_id) -> Optional[RegistroRecord]:
        r = self._db.registros.get(int(registro_id))
        if not r:
            return None
        e = self._db.employees[r["employee_id"]]
        return RegistroRecord(int(registro_id), r["entry_time"], e.first_name, e.last_name, e.plate)

    def list_records(self):
        records = [self.get_record(rid) for rid in self._db.registros]
        return sorted(records, key=lambda r: (r.entry_time, r.registro_id), reverse=True)

    def get_employee_id(self, registro_id):
        r = self._db.registros.get(int(registro_id))
        return r["employee_id"] if r else None

    def update_entry_time(self, registro_id, *, entry_time) -> None:
        self._db.registros[int(registro_id)]["entry_time"] = entry_time

    def delete_by_id(self, registro_id) -> bool:
        return self._db.registros.pop(int(registro_id), None) is not None


@dataclass
class Harness:
    db: InMemoryDB
    clock: FixedClock
    persons: InMemoryPersons
    coverage: InMemoryCoverage
    visits: InMemoryVisits
    employees: InMemoryEmployees
    registros: InMemoryRegistros
    uow_log: list
    unit_of_work: object
    container: Container

    def add_person(self, national_id: str, first_name="Ana", last_name="Rojas", company="Acme") -> int:
        self.persons.upsert(national_id=national_id, first_name=first_name, last_name=last_name, company=company)
        return self.persons.get_by_national_id(national_id).person_id

    def add_arl(self, person_id: int, month: date, provider="Sura") -> None:
        self.coverage.upsert_arl(person_id=person_id, coverage_month=month, provider=provider)

    def add_eps(self, person_id: int, expiration: date, provider="Sanitas") -> None:
        self.coverage.add_eps(person_id=person_id, expiration_date=expiration, provider=provider)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 20, 14, 30, 0))


@pytest.fixture
def harness(clock) -> Harness:
    db = InMemoryDB()
    persons = InMemoryPersons(db)
    coverage = InMemoryCoverage(db)
    visits = InMemoryVisits(db, clock)
    employees = InMemoryEmployees(db)
    registros = InMemoryRegistros(db)
    uow_log: list = []

    def unit_of_work():
        return InMemoryUnitOfWork(db, persons, coverage, visits, uow_log)

    container = Container(
        employee_service=EmployeeService(employees),
        registro_service=RegistroService(registros, employees),
        person_service=PersonService(persons),
        coverage_service=CoverageService(unit_of_work),
        visit_service=VisitService(unit_of_work, visits, clock=clock),
    )
    return Harness(db, clock, persons, coverage, visits, employees, registros, uow_log, unit_of_work, container)


@pytest.fixture
def client(harness):
    app = create_app(container=harness.container, settings_module="config.testing")
    return app.test_client()
