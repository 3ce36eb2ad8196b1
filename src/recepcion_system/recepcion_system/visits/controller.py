from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import unexpected_errors
from ..container import Container
from ..coverage.model import CoverageRequest
from .model import VisitRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/visitas", methods=["POST"], endpoint="register_visit")
    @unexpected_errors("Error en el registro")
    def register_visit():
        req = VisitRequest.from_payload(request.get_json(silent=True))
        record = container.visit_service.register_visit(req)
        return jsonify({"success": True, "data": record.to_dict()}), 201

    @app.route("/visitas", methods=["GET"], endpoint="list_visits")
    @unexpected_errors("Error al obtener visitas")
    def list_visits():
        return jsonify({"data": [v.to_dict() for v in container.visit_service.list_visits()]})

    @app.route("/visitas/buscar-persona", methods=["GET"], endpoint="find_person")
    @unexpected_errors("Error al buscar persona")
    def find_person():
        person = container.person_service.find_person(request.args.get("national_id"))
        if person is None:
            return jsonify({"success": True, "found": False})
        return jsonify({"success": True, "found": True, "data": person.to_dict()})

    @app.route("/visitas/arl", methods=["POST"], endpoint="register_arl")
    @unexpected_errors("Error al registrar ARL")
    def register_arl():
        req = CoverageRequest.arl_from_payload(request.get_json(silent=True))
        container.coverage_service.register(req)
        return jsonify({"success": True})

    @app.route("/visitas/eps", methods=["POST"], endpoint="register_eps")
    @unexpected_errors("Error al registrar EPS")
    def register_eps():
        req = CoverageRequest.eps_from_payload(request.get_json(silent=True))
        container.coverage_service.register(req)
        return jsonify({"success": True})
