"""Flask application factory for the inventory HTTP API."""

from __future__ import annotations

import time
from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog
from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from inventoryctl import __version__
from inventoryctl.api.routes import build_blueprint
from inventoryctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from inventoryctl.infrastructure.warehouse import Warehouse

log = structlog.get_logger("inventoryctl.api")

EXTENSION_KEY = "inventoryctl"


def create_app(warehouse: Warehouse) -> Flask:
    """Build a Flask app exposing one blueprint per entity service in *warehouse*."""
    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.extensions[EXTENSION_KEY] = warehouse

    for service in warehouse.services():
        app.register_blueprint(build_blueprint(service))

    @app.get("/health")
    def health() -> tuple[Response, HTTPStatus]:
        return jsonify(
            {"status": "ok", "version": __version__, "backend": warehouse.backend}
        ), HTTPStatus.OK

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException) -> tuple[Response, int]:
        # Unmatched routes and methods still answer in the API's error shape.
        code = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
        return jsonify(
            {"error": exc.description or exc.name, "code": HTTPStatus(code).name}
        ), code

    verbose = warehouse.settings.verbose

    @app.before_request
    def start_request() -> None:
        # Request threads start with a fresh context; -v has to be re-applied.
        if verbose:
            enable_telemetry()
        g.started = time.perf_counter()

    @app.after_request
    def log_request(response: Response) -> Response:
        started = g.get("started")
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2) if started else None
        log.info(
            "request.complete",
            method=request.method,
            path=request.path,
            status=response.status_code,
            duration_ms=elapsed_ms,
        )
        return response

    return app
