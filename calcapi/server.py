"""HTTP interface for the calculator."""
import logging
import math
from typing import Optional

from flask import Flask, jsonify, render_template, request

from calcapi.config import CALC_STRICT, HOST, LOG_LEVEL, MAX_EXPRESSION_LENGTH, PORT
from calcapi.guards.policy import apply_guards
from calcapi.observability.logging_config import configure_logging
from calcapi.observability.telemetry import Source
from calcapi.runner import run_expression

logger = logging.getLogger(__name__)


def create_app(strict: Optional[bool] = None, max_length: Optional[int] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        strict: Reject malformed expressions (defaults to CALC_STRICT)
        max_length: Longest accepted expression (defaults to MAX_EXPRESSION_LENGTH)
    """
    app = Flask(__name__)
    app.config["CALC_STRICT"] = CALC_STRICT if strict is None else strict
    app.config["MAX_EXPRESSION_LENGTH"] = (
        MAX_EXPRESSION_LENGTH if max_length is None else max_length)

    @app.route("/", methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
               provide_automatic_options=False)
    def index():
        return render_template("index.html")

    @app.post("/api/calculate", provide_automatic_options=False)
    def calculate():
        payload = request.get_json(silent=True)
        passed, error, expression = apply_guards(
            payload, app.config["MAX_EXPRESSION_LENGTH"])
        if not passed:
            return jsonify({"error": error}), 400

        outcome = run_expression(
            expression, app.config["CALC_STRICT"], Source.HTTP)
        if not outcome.ok:
            return jsonify({"error": outcome.message}), 400
        # JSON has no representation for inf or nan
        if not math.isfinite(outcome.value):
            return jsonify({"error": "Result is not a finite number"}), 400
        return jsonify({"result": outcome.value})

    @app.errorhandler(404)
    def not_found(_error):
        return "Not found", 404

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return "Method not allowed", 405

    logger.info(
        f"Calculator app created (strict={app.config['CALC_STRICT']}, "
        f"max_length={app.config['MAX_EXPRESSION_LENGTH']})")
    return app


def main():
    configure_logging(LOG_LEVEL)
    app = create_app()
    logger.info(f"Serving on http://{HOST}:{PORT}")
    app.run(host=HOST, port=PORT)


if __name__ == "__main__":
    main()
