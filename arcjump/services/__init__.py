"""
ARCJUMP service layer.

A JumpService exposes part of the resolver over HTTP: it validates a
JSON payload into a config, computes a JSON result from it, and mounts
its endpoints on the /api blueprint. JumpRegistry holds the services
the application serves.

Every endpoint answers failures the same way (see JumpService.respond):

    ValueError from validation          -> 400 {"error"}
    ResolverError / HorizontalError     -> 422 {"error", "parameter"}

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
from abc import ABC, abstractmethod

from flask import jsonify, request

from arcjump.errors import HorizontalError, ResolverError

log = logging.getLogger(__name__)


def undefined_parameter(error):
    """Name of the null parameter carried by a resolver or horizontal error."""
    if isinstance(error, HorizontalError):
        return error.parameter.value
    return error.parameter.label


class JumpService(ABC):
    """
    Base class for an ARCJUMP service.

    Class Attributes
    ----------------
    id : str
        Unique service identifier, also the URL segment under /api.
    name : str
        Human-readable name.
    description : str
        One-line summary for GET /api/services.
    endpoints : tuple of (str, str)
        (method, path) pairs mounted by register_routes(), listed in the
        service metadata.
    """

    id = ""
    name = ""
    description = ""
    endpoints = ()

    @abstractmethod
    def validate(self, config):
        """
        Validate a raw request payload and return a normalized config.

        Raises
        ------
        ValueError
            If the payload is invalid.
        """

    @abstractmethod
    def compute(self, config):
        """
        Compute the JSON result for a validated config.

        Raises
        ------
        ResolverError
            If an identity is undefined for the given values.
        """

    @abstractmethod
    def register_routes(self, blueprint):
        """Mount the service endpoints on the /api blueprint."""

    def respond(self, validate, compute):
        """
        Run validate then compute on the current request body and build
        the JSON response, mapping failures to 400 and 422.
        """
        data = request.get_json(silent=True)
        try:
            config = validate(data)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        try:
            result = compute(config)
        except (ResolverError, HorizontalError) as e:
            log.info("%s request undefined: %s", self.id, e)
            return jsonify({"error": str(e), "parameter": undefined_parameter(e)}), 422
        return jsonify(result)

    def metadata(self):
        """Service info for GET /api/services."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "endpoints": [
                {"method": method, "path": path} for method, path in self.endpoints
            ],
        }


class JumpRegistry:
    """Services served by the application, in registration order."""

    def __init__(self):
        self._services = {}

    def register(self, service):
        """
        Register a service instance.

        Raises
        ------
        ValueError
            If a service with the same id is already registered.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def get(self, service_id):
        """Look up a service by id; None if not found."""
        return self._services.get(service_id)

    def services(self):
        return list(self._services.values())

    def list_all(self):
        """Metadata for all registered services."""
        return [s.metadata() for s in self._services.values()]
