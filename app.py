"""
ARCJUMP - arcade jump parameter resolver
Flask application factory.

Serves the REST API of the registered JumpService instances.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

import logging

from flask import Flask, jsonify

from arcjump import __version__
from arcjump.services import JumpRegistry
from arcjump.services.trajectory import TrajectoryService

log = logging.getLogger(__name__)


def create_registry():
    """Build and populate the service registry."""
    registry = JumpRegistry()
    registry.register(TrajectoryService())
    return registry


def create_app():
    """Application factory for the ARCJUMP Flask app."""
    app = Flask(__name__)

    # Build service registry
    registry = create_registry()

    # Create and register API blueprint (shared + service-owned routes)
    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api)

    @app.route("/")
    def root():
        return jsonify({
            "name": "arcjump",
            "version": __version__,
            "services": registry.list_all(),
        })

    log.info("ARCJUMP app created with %d service(s)", len(registry.services()))
    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
