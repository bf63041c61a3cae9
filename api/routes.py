"""
Flask API routes shared by all ARCJUMP services.

Endpoints:
  GET  /api/services   - metadata of every registered service
  GET  /api/kinds      - the jump parameter kinds in canonical order

Service-specific endpoints are mounted by each registered service through
JumpService.register_routes().
"""

from flask import Blueprint, jsonify

from arcjump.constants import API_KIND_ALIASES, WIDTH_ALIASES, DEFAULT_WIDTH
from arcjump.kinds import ParameterKind


def kinds_payload():
    """Kinds in canonical order, with every spelling the API accepts."""
    kinds = []
    for kind in ParameterKind:
        aliases = sorted(
            alias for alias, name in API_KIND_ALIASES.items() if name == kind.label)
        kinds.append({
            "name": kind.label,
            "order": int(kind),
            "symbol": kind.symbol,
            "title": kind.title,
            "aliases": aliases,
        })
    return kinds


def create_api_blueprint(registry):
    """
    Build the /api blueprint: shared routes plus the routes of every
    registered service.
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for all registered services."""
        return jsonify(registry.list_all())

    @api.route("/kinds", methods=["GET"])
    def list_kinds():
        """Return the parameter kinds and the accepted numeric widths."""
        return jsonify({
            "kinds": kinds_payload(),
            "widths": sorted(set(WIDTH_ALIASES.values())),
            "default_width": DEFAULT_WIDTH,
        })

    for service in registry.services():
        service.register_routes(api)

    return api
