from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import unexpected_errors
from ..container import Container
from .model import EmployeeRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/empleados", methods=["POST"], endpoint="create_employee")
    @unexpected_errors("Error al crear empleado")
    def create_employee():
        req = EmployeeRequest.from_payload(request.get_json(silent=True))
        employee = container.employee_service.create_employee(req)
        return jsonify(employee.to_dict()), 201

    @app.route("/empleados", methods=["GET"], endpoint="list_employees")
    @unexpected_errors("Error al obtener empleados")
    def list_employees():
        return jsonify([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/empleados/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @unexpected_errors("Error al obtener empleado")
    def get_employee(employee_id: int):
        return jsonify(container.employee_service.get_employee(employee_id).to_dict())

    @app.route("/empleados/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @unexpected_errors("Error al actualizar empleado")
    def update_employee(employee_id: int):
        req = EmployeeRequest.from_payload(request.get_json(silent=True))
        employee = container.employee_service.update_employee(employee_id, req)
        return jsonify(employee.to_dict())

    @app.route("/empleados/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @unexpected_errors("Error al eliminar empleado")
    def delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"message": "Empleado eliminado exitosamente"})
