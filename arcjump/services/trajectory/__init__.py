"""
Trajectory Service.

Resolves jump parameters over HTTP: give any two of height, time,
impulse and gravity and get the other two, a single derived parameter,
or the time budget of a jump covering a horizontal range.

Endpoints (mounted on the /api blueprint):
  POST /api/trajectory             - full trajectory from two parameters
  POST /api/trajectory/resolve     - one derived parameter
  POST /api/trajectory/horizontal  - time budget from speed and range

Validation errors are reported as 400, undefined identities (a null
input) as 422 with the name of the offending parameter.
"""

import logging
import math
import numbers

from arcjump import dispatch, horizontal, resolver
from arcjump.constants import MAX_API_MAGNITUDE
from arcjump.kinds import parse_kind
from arcjump.scalar import cast, normalize_width
from arcjump.services import JumpService
from arcjump.trajectory import Trajectory

log = logging.getLogger(__name__)


def _number(name, value):
    """Validate one numeric field of a payload."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError("{} must be a number".format(name))
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("{} must be finite".format(name))
    if abs(value) > MAX_API_MAGNITUDE:
        raise ValueError("{} must be at most {:g} in magnitude".format(
            name, MAX_API_MAGNITUDE))
    return value


def _json_value(value):
    """Plain float for JSON, or None for a non-finite result."""
    value = float(value)
    return value if math.isfinite(value) else None


def _known_parameters(values, width):
    """Parse {kind: number} with exactly two distinct kinds."""
    if not isinstance(values, dict):
        raise ValueError("Parameters must be a JSON object")
    known = {}
    for key, value in values.items():
        kind = parse_kind(key)
        if kind in known:
            raise ValueError("Parameter {} given twice".format(kind.label))
        known[kind] = cast(_number(kind.label, value), width)
    if len(known) != 2:
        raise ValueError(
            "Exactly two of height, time, impulse and gravity are required, "
            "got {}".format(len(known)))
    return known


class TrajectoryConfig:
    """
    Normalized request of the trajectory service.

    Parameters
    ----------
    width : str
        "f32" or "f64".
    known : dict
        {ParameterKind: numpy scalar}, exactly two entries.
    outputs : tuple of ParameterKind
        Parameters to derive, in request order.
    """

    def __init__(self, width, known, outputs):
        self.width = width
        self.known = known
        self.outputs = tuple(outputs)

    @property
    def inputs(self):
        """The two known kinds, in canonical order."""
        return tuple(sorted(self.known))

    def identities(self):
        """Dispatched identity for each output."""
        first, second = self.inputs
        return [dispatch.select(first, second, output) for output in self.outputs]

    def to_dict(self):
        return {
            "width": self.width,
            "inputs": {kind.label: float(value) for kind, value in sorted(self.known.items())},
            "outputs": [kind.label for kind in self.outputs],
        }


class TrajectoryService(JumpService):

    id = "trajectory"
    name = "Jump Trajectory"
    description = "Derive height, time, impulse and gravity from any two of them"
    endpoints = (
        ("POST", "/api/trajectory"),
        ("POST", "/api/trajectory/resolve"),
        ("POST", "/api/trajectory/horizontal"),
    )

    def validate(self, config):
        """
        Validate a full-trajectory request.

        {"width": "f32", "height": 20, "time": 10}
        """
        if not isinstance(config, dict):
            raise ValueError("Request body must be a JSON object")
        values = dict(config)
        width = normalize_width(values.pop("width", None))
        known = _known_parameters(values, width)
        return TrajectoryConfig(width, known, dispatch.missing_kinds(*known))

    def compute(self, config):
        """Build the trajectory; ResolverError propagates."""
        trajectory = Trajectory.from_parameters(config.known)
        log.debug("Trajectory computed: %s", config.to_dict())
        return {
            "width": config.width,
            "trajectory": {k: _json_value(v) for k, v in trajectory.to_dict().items()},
            "identities": [identity.name for identity in config.identities()],
        }

    def validate_resolve(self, config):
        """
        Validate a single-parameter request.

        {"inputs": {"height": 20, "time": 10}, "output": "gravity"}
        """
        if not isinstance(config, dict):
            raise ValueError("Request body must be a JSON object")
        width = normalize_width(config.get("width"))
        known = _known_parameters(config.get("inputs"), width)
        if "output" not in config:
            raise ValueError("Missing output parameter")
        output = parse_kind(config["output"])
        result = TrajectoryConfig(width, known, (output,))
        # repeated kinds are a request error, not a resolver failure
        result.identities()
        return result

    def compute_resolve(self, config):
        """Evaluate the one requested identity."""
        (identity,) = config.identities()
        first, second = identity.inputs
        value = resolver.function_for(identity)(config.known[first], config.known[second])
        return {
            "width": config.width,
            "output": identity.output.label,
            "value": _json_value(value),
            "identity": identity.name,
        }

    def validate_horizontal(self, config):
        """
        Validate a horizontal request.

        {"speed": 5, "range": 100, "ratio": 0.5, "height": 20}; ratio
        and height are optional.
        """
        if not isinstance(config, dict):
            raise ValueError("Request body must be a JSON object")
        width = normalize_width(config.get("width"))
        result = {"width": width}
        for field in ("speed", "range"):
            if field not in config:
                raise ValueError("Missing {}".format(field))
            result[field] = cast(_number(field, config[field]), width)
        for field in ("ratio", "height"):
            if config.get(field) is not None:
                result[field] = cast(_number(field, config[field]), width)
        if "ratio" in result and not 0 <= result["ratio"] <= 1:
            raise ValueError("ratio must be between 0 and 1")
        return result

    def compute_horizontal(self, config):
        """Time budget and, given a height, the preset trajectory."""
        speed = config["speed"]
        distance = config["range"]
        result = {
            "width": config["width"],
            "time": _json_value(horizontal.time_from_speed_and_range(speed, distance)),
        }
        if "ratio" in config:
            up, down = horizontal.time_from_speed_range_and_ratio(
                speed, distance, config["ratio"])
            result["ascent_time"] = _json_value(up)
            result["descent_time"] = _json_value(down)
        if "height" in config:
            trajectory = Trajectory.from_height_speed_and_range(
                config["height"], speed, distance)
            result["trajectory"] = {
                k: _json_value(v) for k, v in trajectory.to_dict().items()
            }
        return result

    def register_routes(self, bp):
        """Register trajectory API endpoints on the given blueprint."""
        service = self

        @bp.route("/trajectory", methods=["POST"])
        def trajectory_compute():
            return service.respond(service.validate, service.compute)

        @bp.route("/trajectory/resolve", methods=["POST"])
        def trajectory_resolve():
            return service.respond(service.validate_resolve, service.compute_resolve)

        @bp.route("/trajectory/horizontal", methods=["POST"])
        def trajectory_horizontal():
            return service.respond(service.validate_horizontal, service.compute_horizontal)
