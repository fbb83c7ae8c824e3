"""HTTP endpoints for the error budget engine (no chat model involved)."""

import logging
from typing import Optional

from flask import Flask, jsonify, request

from pulselab.agent.store import ConfigStore
from pulselab.error_budget import compute_error_budget, estimate_robustness
from pulselab.schema import HardwareParams
from pulselab.validation import validate_params

logger = logging.getLogger(__name__)


def _bad_request(message, issues=None):
    body = {"error": message}
    if issues is not None:
        body["issues"] = issues
    return jsonify(body), 400


def _params_from_request():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    try:
        return HardwareParams.from_dict(data), data
    except KeyError as e:
        raise ValueError(f"Missing hardware parameter: {e.args[0]}")
    except (TypeError, ValueError) as e:
        raise ValueError(f"Hardware parameters must be numbers: {e}")


def create_app(store: Optional[ConfigStore] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        store: Configuration store served under /api/configs. A new empty
               store is created when omitted.
    """
    app = Flask(__name__)
    app.config["CONFIG_STORE"] = store if store is not None else ConfigStore()

    @app.post("/api/error-budget")
    def error_budget():
        try:
            params, data = _params_from_request()
        except ValueError as e:
            return _bad_request(str(e))

        accept_warnings = data.get("accept_warnings", False)
        if not isinstance(accept_warnings, bool):
            return _bad_request("accept_warnings must be a JSON boolean.")

        report = validate_params(params)
        if not report.ok or (report.warnings and not accept_warnings):
            return _bad_request(report.render(), report.serialize())

        body = compute_error_budget(params).serialize()
        body["warnings"] = [w.serialize() for w in report.warnings]
        return jsonify(body)

    @app.post("/api/robustness")
    def robustness():
        try:
            params, _ = _params_from_request()
        except ValueError as e:
            return _bad_request(str(e))

        report = validate_params(params)
        if not report.ok:
            return _bad_request(report.render(), report.serialize())
        return jsonify([r.serialize() for r in estimate_robustness(params)])

    @app.get("/api/configs")
    def list_configs():
        configs = app.config["CONFIG_STORE"].list()
        return jsonify([c.serialize() for c in configs])

    @app.post("/api/configs")
    def save_config():
        try:
            params, data = _params_from_request()
        except ValueError as e:
            return _bad_request(str(e))
        name = data.get("name")
        if not name:
            return _bad_request("Missing configuration name.")

        report = validate_params(params)
        if not report.ok:
            return _bad_request(report.render(), report.serialize())

        config = app.config["CONFIG_STORE"].save(str(name), params)
        logger.info("Saved configuration %r", config.name)
        return jsonify(config.serialize()), 201

    return app
