"""
Jump parameter resolver.

The twelve identities with an explicit error channel: every function
either returns the derived scalar or raises ResolverError naming the
null input that left the identity undefined. This supersedes the
infinities returned by the width-specialized primitives for the same
inputs.

    function                          degenerate when   raises
    --------------------------------  ----------------  ---------------
    impulse_from_height_and_time      time == 0         TIME
    gravity_from_height_and_time      time == 0         TIME
    time_from_height_and_impulse      impulse == 0      IMPULSE
    gravity_from_height_and_impulse   height == 0       HEIGHT
    time_from_height_and_gravity      gravity == 0      GRAVITY
    impulse_from_height_and_gravity   never
    height_from_time_and_impulse      never
    gravity_from_time_and_impulse     time == 0         TIME
    height_from_time_and_gravity      never
    impulse_from_time_and_gravity     never
    height_from_impulse_and_gravity   gravity == 0      GRAVITY
    time_from_impulse_and_gravity     gravity == 0      GRAVITY

Arguments are always given in canonical kind order. The width of the
computation is inferred from the arguments (see arcjump.scalar) and
the arguments are converted to it before the null checks, so a value
that only vanishes in 32 bits is still reported. The resolver itself
is width-agnostic, stateless and never logs.
"""

from arcjump import nofailure
from arcjump.errors import ResolverError
from arcjump.kinds import ParameterKind
from arcjump.scalar import coerce


def _require(value, kind):
    if value == 0:
        raise ResolverError(kind)


# ----------------------------------------------------------------------
# Peak height
# ----------------------------------------------------------------------

def height_from_time_and_impulse(time, impulse):
    """Peak height from time to peak and impulse: H = V*T/2."""
    return nofailure.height_from_time_and_impulse(time, impulse)


def height_from_time_and_gravity(time, gravity):
    """Peak height from time to peak and gravity: H = -G*T^2/2."""
    return nofailure.height_from_time_and_gravity(time, gravity)


def height_from_impulse_and_gravity(impulse, gravity):
    """Peak height from impulse and gravity: H = -V^2 / (2G)."""
    primitives, (impulse, gravity) = coerce(impulse, gravity)
    _require(gravity, ParameterKind.GRAVITY)
    return primitives.height_from_impulse_and_gravity(impulse, gravity)


# ----------------------------------------------------------------------
# Time to peak
# ----------------------------------------------------------------------

def time_from_height_and_impulse(height, impulse):
    """Time to peak from height and impulse: T = 2H / V."""
    primitives, (height, impulse) = coerce(height, impulse)
    _require(impulse, ParameterKind.IMPULSE)
    return primitives.time_from_height_and_impulse(height, impulse)


def time_from_height_and_gravity(height, gravity):
    """
    Time to peak from height and gravity: T = sqrt(|2H / G|).

    Returns the magnitude whatever the signs of height and gravity, so a
    positive gravity magnitude gives the same answer as its negative.
    """
    primitives, (height, gravity) = coerce(height, gravity)
    _require(gravity, ParameterKind.GRAVITY)
    return primitives.time_from_height_and_gravity(height, gravity)


def time_from_impulse_and_gravity(impulse, gravity):
    """Time to peak from impulse and gravity: T = -V / G."""
    primitives, (impulse, gravity) = coerce(impulse, gravity)
    _require(gravity, ParameterKind.GRAVITY)
    return primitives.time_from_impulse_and_gravity(impulse, gravity)


# ----------------------------------------------------------------------
# Vertical impulse
# ----------------------------------------------------------------------

def impulse_from_height_and_time(height, time):
    """Impulse from height and time to peak: V = 2H / T."""
    primitives, (height, time) = coerce(height, time)
    _require(time, ParameterKind.TIME)
    return primitives.impulse_from_height_and_time(height, time)


def impulse_from_height_and_gravity(height, gravity):
    """Impulse from height and gravity: V = sqrt(|2HG|)."""
    return nofailure.impulse_from_height_and_gravity(height, gravity)


def impulse_from_time_and_gravity(time, gravity):
    """Impulse from time to peak and gravity: V = -G*T."""
    return nofailure.impulse_from_time_and_gravity(time, gravity)


# ----------------------------------------------------------------------
# Gravity
# ----------------------------------------------------------------------

def gravity_from_height_and_time(height, time):
    """Gravity from height and time to peak: G = -2H / T^2."""
    primitives, (height, time) = coerce(height, time)
    _require(time, ParameterKind.TIME)
    return primitives.gravity_from_height_and_time(height, time)


def gravity_from_height_and_impulse(height, impulse):
    """Gravity from height and impulse: G = -V^2 / (2H)."""
    primitives, (height, impulse) = coerce(height, impulse)
    _require(height, ParameterKind.HEIGHT)
    return primitives.gravity_from_height_and_impulse(height, impulse)


def gravity_from_time_and_impulse(time, impulse):
    """Gravity from time to peak and impulse: G = -V / T."""
    primitives, (time, impulse) = coerce(time, impulse)
    _require(time, ParameterKind.TIME)
    return primitives.gravity_from_time_and_impulse(time, impulse)


def function_for(identity):
    """
    Return the resolver function implementing a dispatched identity.

    Parameters
    ----------
    identity : arcjump.dispatch.Identity
        Result of arcjump.dispatch.select().
    """
    return globals()[identity.name]
