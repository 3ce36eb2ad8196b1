from __future__ import annotations

import pytest

from src.recepcion_system.recepcion_system.core.exceptions import NotFoundError, ValidationError
from src.recepcion_system.recepcion_system.employees.model import EmployeeRequest


def test_crud_round(harness):
    service = harness.container.employee_service

    created = service.create_employee(EmployeeRequest(first_name="Marta", last_name="Díaz", plate="KLM321"))
    assert service.get_employee(created.employee_id) == created

    updated = service.update_employee(created.employee_id, EmployeeRequest(first_name="Marta", last_name="Díaz"))
    assert updated.plate is None

    service.delete_employee(created.employee_id)
    with pytest.raises(NotFoundError):
        service.get_employee(created.employee_id)


def test_list_is_sorted_by_last_then_first_name(harness):
    service = harness.container.employee_service
    for first, last in [("Zoe", "Bernal"), ("Ana", "Zapata"), ("Ana", "Bernal")]:
        service.create_employee(EmployeeRequest(first_name=first, last_name=last))

    names = [(e.last_name, e.first_name) for e in service.list_employees()]

    assert names == [("Bernal", "Ana"), ("Bernal", "Zoe"), ("Zapata", "Ana")]


def test_update_unknown_employee_is_not_found(harness):
    with pytest.raises(NotFoundError) as exc:
        harness.container.employee_service.update_employee(77, EmployeeRequest(first_name="A", last_name="B"))

    assert str(exc.value) == "Empleado no encontrado"
    assert harness.db.employees == {}


def test_delete_unknown_employee_is_not_found(harness):
    with pytest.raises(NotFoundError):
        harness.container.employee_service.delete_employee(77)


def test_request_requires_first_and_last_name():
    with pytest.raises(ValidationError) as exc:
        EmployeeRequest.from_payload({"first_name": "  "})

    assert str(exc.value) == "Nombre y apellido son obligatorios"
    assert {e["field"] for e in exc.value.errors} == {"first_name", "last_name"}


def test_request_from_non_object_payload():
    with pytest.raises(ValidationError):
        EmployeeRequest.from_payload(["not", "an", "object"])


def test_request_rejects_plate_longer_than_column():
    with pytest.raises(ValidationError) as exc:
        EmployeeRequest.from_payload({"first_name": "Marta", "last_name": "Díaz", "plate": "ABCDEFGHIJK"})

    assert [e["field"] for e in exc.value.errors] == ["plate"]


def test_request_blank_plate_means_none():
    req = EmployeeRequest.from_payload({"first_name": "Marta", "last_name": "Díaz", "plate": "   "})

    assert req.plate is None
