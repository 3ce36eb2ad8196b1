from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import unexpected_errors
from ..container import Container
from .model import RegistroRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/registros", methods=["POST"], endpoint="create_registro")
    @unexpected_errors("Error al crear registro")
    def create_registro():
        req = RegistroRequest.from_payload(request.get_json(silent=True))
        record = container.registro_service.create_registro(req)
        return jsonify(record.to_dict()), 201

    @app.route("/registros", methods=["GET"], endpoint="list_registros")
    @unexpected_errors("Error al obtener registros")
    def list_registros():
        return jsonify([r.to_dict() for r in container.registro_service.list_registros()])

    @app.route("/registros/<int:registro_id>", methods=["GET"], endpoint="get_registro")
    @unexpected_errors("Error al obtener registro")
    def get_registro(registro_id: int):
        return jsonify(container.registro_service.get_registro(registro_id).to_dict())

    @app.route("/registros/<int:registro_id>", methods=["PUT"], endpoint="update_registro")
    @unexpected_errors("Error al actualizar registro")
    def update_registro(registro_id: int):
        req = RegistroRequest.from_payload(request.get_json(silent=True))
        record = container.registro_service.update_registro(registro_id, req)
        return jsonify(record.to_dict())

    @app.route("/registros/<int:registro_id>", methods=["DELETE"], endpoint="delete_registro")
    @unexpected_errors("Error al eliminar registro")
    def delete_registro(registro_id: int):
        container.registro_service.delete_registro(registro_id)
        return jsonify({"message": "Registro eliminado exitosamente"})
