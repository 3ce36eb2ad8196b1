from __future__ import annotations

from datetime import date

import pytest

from src.recepcion_system.recepcion_system.core.constants import PLACEHOLDER_VALUE
from src.recepcion_system.recepcion_system.core.enums import CoverageKind
from src.recepcion_system.recepcion_system.core.exceptions import PersistenceError, ValidationError
from src.recepcion_system.recepcion_system.core.results import FindOrCreateResult
from src.recepcion_system.recepcion_system.coverage.model import CoverageRequest


def _arl(national_id="123456", month=date(2024, 3, 15), provider="Sura") -> CoverageRequest:
    return CoverageRequest(kind=CoverageKind.ARL, national_id=national_id, coverage_date=month, provider=provider)


def _eps(national_id="123456", expiration=date(2024, 12, 31), provider="Sanitas") -> CoverageRequest:
    return CoverageRequest(kind=CoverageKind.EPS, national_id=national_id, coverage_date=expiration, provider=provider)


def test_unknown_national_id_gets_placeholder_person(harness):
    result = harness.container.coverage_service.register(_arl())

    assert result.created is True
    person = harness.persons.get_by_national_id("123456")
    assert person.person_id == result.id
    assert person.first_name == PLACEHOLDER_VALUE
    assert person.is_placeholder


def test_existing_person_is_reused(harness):
    pid = harness.add_person("123456")

    result = harness.container.coverage_service.register(_eps())

    assert result == FindOrCreateResult(id=pid, created=False)
    assert len(harness.db.persons) == 1
    assert harness.persons.get_by_national_id("123456").first_name == "Ana"


def test_arl_month_is_normalized_to_first_day(harness):
    harness.container.coverage_service.register(_arl(month=date(2024, 3, 15)))

    assert [a.coverage_month for a in harness.db.arl] == [date(2024, 3, 1)]


def test_same_arl_twice_yields_one_record(harness):
    harness.container.coverage_service.register(_arl(month=date(2024, 3, 2)))
    harness.container.coverage_service.register(_arl(month=date(2024, 3, 28), provider="Colmena"))

    assert len(harness.db.arl) == 1
    assert harness.db.arl[0].provider == "Colmena"


def test_each_eps_submission_appends_a_window(harness):
    harness.container.coverage_service.register(_eps(expiration=date(2024, 4, 30)))
    harness.container.coverage_service.register(_eps(expiration=date(2024, 10, 31)))

    assert sorted(e.expiration_date for e in harness.db.eps) == [date(2024, 4, 30), date(2024, 10, 31)]


def test_database_failure_surfaces_detail_and_keeps_no_placeholder(harness):
    harness.coverage.fail_with = RuntimeError("Cannot add or update a child row")

    with pytest.raises(PersistenceError) as exc:
        harness.container.coverage_service.register(_arl())

    assert str(exc.value) == "Error al registrar ARL"
    assert "child row" in exc.value.detail
    assert harness.persons.get_by_national_id("123456") is None


def test_payload_validation():
    req = CoverageRequest.eps_from_payload(
        {"national_id": "123456", "expiration_date": "2024-05-31", "provider": "Sanitas"}
    )
    assert req.coverage_date == date(2024, 5, 31)

    with pytest.raises(ValidationError) as exc:
        CoverageRequest.arl_from_payload({"national_id": "12", "coverage_month": "marzo", "provider": ""})
    assert [e["field"] for e in exc.value.errors] == ["national_id", "coverage_month", "provider"]
