"""
Jump trajectory aggregate.

A Trajectory holds all four jump parameters. It is built from any two of
them; the other two are derived through the dispatcher and the resolver,
so every trajectory satisfies (for finite, non-degenerate inputs):

    V = 2H / T      G = -V / T      H = -V^2 / (2G)

The record is immutable once constructed.
"""

from arcjump import dispatch, horizontal, resolver
from arcjump.errors import HorizontalError
from arcjump.kinds import ParameterKind, parse_kind


class Trajectory:
    """
    Immutable record of the four parameters of a jump.

    Build one with a from_* constructor rather than directly; the
    constructor does not check that the four values are consistent.

    Parameters
    ----------
    height : float
        Peak height H.
    time : float
        Time to reach the peak T.
    impulse : float
        Initial vertical impulse V.
    gravity : float
        Constant vertical acceleration G (negative is downward).
    """

    __slots__ = ("_height", "_time", "_impulse", "_gravity")

    def __init__(self, height, time, impulse, gravity):
        object.__setattr__(self, "_height", height)
        object.__setattr__(self, "_time", time)
        object.__setattr__(self, "_impulse", impulse)
        object.__setattr__(self, "_gravity", gravity)

    def __setattr__(self, name, value):
        raise AttributeError("Trajectory is immutable")

    def __delattr__(self, name):
        raise AttributeError("Trajectory is immutable")

    @property
    def height(self):
        """Height of the peak."""
        return self._height

    @property
    def time(self):
        """Time it takes to reach the peak."""
        return self._time

    @property
    def impulse(self):
        """Initial vertical impulse."""
        return self._impulse

    @property
    def gravity(self):
        """Acceleration due to gravity."""
        return self._gravity

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_parameters(cls, values):
        """
        Build a trajectory from a mapping of exactly two kinds to values.

        Parameters
        ----------
        values : dict
            {kind: value} with two distinct kinds. Keys may be
            ParameterKind members or anything parse_kind() accepts.

        Raises
        ------
        ValueError
            If the mapping does not name exactly two distinct kinds.
        ResolverError
            The first error met while deriving the missing parameters.
        """
        known = {}
        for key, value in values.items():
            kind = parse_kind(key)
            if kind in known:
                raise ValueError("Parameter {} given twice".format(kind))
            known[kind] = value
        if len(known) != 2:
            raise ValueError(
                "Exactly two parameters are required, got {}".format(len(known)))

        (first, second) = sorted(known)
        for kind in dispatch.missing_kinds(first, second):
            identity = dispatch.select(first, second, kind)
            solve = resolver.function_for(identity)
            known[kind] = solve(known[first], known[second])

        return cls(
            known[ParameterKind.HEIGHT],
            known[ParameterKind.TIME],
            known[ParameterKind.IMPULSE],
            known[ParameterKind.GRAVITY],
        )

    @classmethod
    def from_height_and_time(cls, height, time):
        """Construct from the peak height and the time to reach it."""
        return cls.from_parameters({
            ParameterKind.HEIGHT: height,
            ParameterKind.TIME: time,
        })

    @classmethod
    def from_height_and_impulse(cls, height, impulse):
        """Construct from the peak height and the initial impulse."""
        return cls.from_parameters({
            ParameterKind.HEIGHT: height,
            ParameterKind.IMPULSE: impulse,
        })

    @classmethod
    def from_height_and_gravity(cls, height, gravity):
        """Construct from the peak height and the gravity."""
        return cls.from_parameters({
            ParameterKind.HEIGHT: height,
            ParameterKind.GRAVITY: gravity,
        })

    @classmethod
    def from_time_and_impulse(cls, time, impulse):
        """Construct from the time to reach the peak and the initial impulse."""
        return cls.from_parameters({
            ParameterKind.TIME: time,
            ParameterKind.IMPULSE: impulse,
        })

    @classmethod
    def from_time_and_gravity(cls, time, gravity):
        """Construct from the time to reach the peak and the gravity."""
        return cls.from_parameters({
            ParameterKind.TIME: time,
            ParameterKind.GRAVITY: gravity,
        })

    @classmethod
    def from_impulse_and_gravity(cls, impulse, gravity):
        """Construct from the initial impulse and the gravity."""
        return cls.from_parameters({
            ParameterKind.IMPULSE: impulse,
            ParameterKind.GRAVITY: gravity,
        })

    @classmethod
    def from_height_speed_and_range(cls, height, speed, distance):
        """
        Jump peaking at `height` halfway along a horizontal `distance`
        travelled at horizontal `speed`.

        The time to peak is d / (2s). A null speed is reported as
        ResolverError(TIME): the horizontal error is widened, so the
        caller no longer learns that the speed was the culprit.
        """
        try:
            time = horizontal.time_from_speed_and_range(speed, distance)
        except HorizontalError as error:
            raise error.widen() from error
        return cls.from_height_and_time(height, time)

    # ------------------------------------------------------------------
    # Value protocol
    # ------------------------------------------------------------------

    def __iter__(self):
        return iter((self._height, self._time, self._impulse, self._gravity))

    def __eq__(self, other):
        if not isinstance(other, Trajectory):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return "Trajectory(height={!r}, time={!r}, impulse={!r}, gravity={!r})".format(
            self._height, self._time, self._impulse, self._gravity)

    def to_dict(self):
        """Serialize as plain floats, keyed by kind name."""
        return {
            "height": float(self._height),
            "time": float(self._time),
            "impulse": float(self._impulse),
            "gravity": float(self._gravity),
        }
