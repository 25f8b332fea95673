from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, NotFound

from ..core.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Map domain and framework errors to JSON bodies; never leak a traceback."""

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StoreError)
    def handle_store(e: StoreError):
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(NotFound)
    def handle_unknown_route(e: NotFound):
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return jsonify({"error": "Internal server error"}), 500
