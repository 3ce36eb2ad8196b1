from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.constants import INTERNAL_ERROR_MESSAGE
from ..core.exceptions import CoverageError, DomainError, NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def unexpected_errors(message: str):
    """Turn unexpected failures of a route into a logged 500 with a fixed message.

    Domain and persistence errors pass through to the app-level handlers.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (DomainError, PersistenceError, HTTPException):
                raise
            except Exception:
                logger.exception(message)
                return jsonify({"error": message}), 500

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        body = {"error": str(e)}
        if e.errors:
            body["errors"] = e.errors
        return jsonify(body), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(CoverageError)
    def _coverage(e: CoverageError):
        return jsonify({"error": str(e), "codigo": e.code.value}), 400

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        return jsonify({"error": str(e), "detalle": e.detail}), 500

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500
