"""
main.py — AlgoTrace Flask API
=============================
JSON web server over the algorithm registry and the execution engine.

Routes:
  GET    /api/algorithms                     – catalogue (optional ?category=)
  GET    /api/algorithms/<key>               – one algorithm, with pseudocode
  POST   /api/execute/algorithm              – run {algorithmId, input, options}
  GET    /api/execute/status/<id>            – fetch a stored execution
  DELETE /api/execute/cancel/<id>            – drop a stored execution
  GET    /api/execute/sample-input/<key>     – ready-made input for an algorithm
  POST   /api/execute/validate               – check input without running

State management:
  Runs finish inside the request, so the only shared state is the
  ExecutionStore kept on the app (app.config["EXECUTION_STORE"]).
  Clients fetch earlier runs back by id until they expire.
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from algorithms import CATEGORIES, algorithms_by_category, get_algorithm, list_algorithms
from config import get_config
from engine import (
    AlgoTraceError,
    ExecutionNotFoundError,
    ExecutionStore,
    InvalidInputError,
    Recorder,
    UnknownAlgorithmError,
    generate_sample_input,
    validate_input,
)
from logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        config: Settings dict shaped like config.yaml; defaults to get_config().
    """
    config = config or get_config()
    execution = config.get("execution", {})
    store_cfg = config.get("store", {})

    app = Flask(__name__)
    app.config["ALGOTRACE"] = config
    app.config["EXECUTION_STORE"] = ExecutionStore(
        max_entries=store_cfg.get("max_entries", 1000),
        ttl_seconds=store_cfg.get("ttl_seconds", 3600),
    )
    app.config["RECORDER"] = Recorder(
        store=app.config["EXECUTION_STORE"],
        max_steps=execution.get("max_steps"),
    )

    _register_error_handlers(app)
    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
def _error(message: str, status: int, details: Optional[list] = None):
    body: Dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InvalidInputError)
    def handle_invalid_input(exc: InvalidInputError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc.errors)
        return _error(str(exc), 400, exc.errors)

    @app.errorhandler(UnknownAlgorithmError)
    def handle_unknown_algorithm(exc: UnknownAlgorithmError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc)
        return _error(str(exc), 404)

    @app.errorhandler(ExecutionNotFoundError)
    def handle_execution_not_found(exc: ExecutionNotFoundError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, exc)
        return _error(str(exc), 404)

    @app.errorhandler(AlgoTraceError)
    def handle_engine_error(exc: AlgoTraceError):
        logger.error("Engine error on %s %s: %s", request.method, request.path, exc)
        return _error(str(exc), 500)


def _json_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return body


def _require_algorithm_id(body: Dict[str, Any]) -> str:
    algorithm_id = body.get("algorithmId")
    if not isinstance(algorithm_id, str) or not algorithm_id:
        raise InvalidInputError("algorithmId is required")
    return algorithm_id


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    # -- catalogue ---------------------------------------------------------
    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        category = request.args.get("category")
        if category is None:
            infos = list_algorithms()
        elif category in CATEGORIES:
            infos = algorithms_by_category(category)
        else:
            raise InvalidInputError(f"Unknown category: {category}", [f"Category must be one of {', '.join(CATEGORIES)}"])
        return jsonify({"algorithms": [info.to_dict() for info in infos], "total": len(infos)})

    @app.route("/api/algorithms/<key>", methods=["GET"])
    def api_algorithm(key: str):
        info = get_algorithm(key)
        if info is None:
            raise UnknownAlgorithmError(key)
        return jsonify(info.to_dict())

    # -- execution ---------------------------------------------------------
    @app.route("/api/execute/algorithm", methods=["POST"])
    def api_execute():
        body = _json_body()
        algorithm_id = _require_algorithm_id(body)
        options = body.get("options") or {}
        if not isinstance(options, dict):
            raise InvalidInputError("options must be an object")

        result = app.config["RECORDER"].run(algorithm_id, body.get("input"), options)
        logger.info("Executed %s as %s (%d steps)", algorithm_id, result.id, result.total_steps)
        return jsonify(result.to_dict())

    @app.route("/api/execute/status/<execution_id>", methods=["GET"])
    def api_execution_status(execution_id: str):
        result = app.config["EXECUTION_STORE"].get(execution_id)
        if result is None:
            raise ExecutionNotFoundError(execution_id)
        return jsonify(result.to_dict())

    @app.route("/api/execute/cancel/<execution_id>", methods=["DELETE"])
    def api_execution_cancel(execution_id: str):
        if not app.config["EXECUTION_STORE"].delete(execution_id):
            raise ExecutionNotFoundError(execution_id)
        return jsonify({"id": execution_id, "cancelled": True})

    @app.route("/api/execute/sample-input/<key>", methods=["GET"])
    def api_sample_input(key: str):
        return jsonify({"algorithmId": key, "input": generate_sample_input(key)})

    @app.route("/api/execute/validate", methods=["POST"])
    def api_validate():
        body = _json_body()
        algorithm_id = _require_algorithm_id(body)
        errors = validate_input(algorithm_id, body.get("input"))
        return jsonify({"algorithmId": algorithm_id, "valid": not errors, "errors": errors})


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = get_config()
    setup_logging(settings["logging"]["level"], settings["logging"].get("file"))

    server = settings["server"]
    logger.info("AlgoTrace API listening on http://%s:%s", server["host"], server["port"])
    create_app(settings).run(debug=server["debug"], host=server["host"], port=server["port"])
