"""
Identities that cannot fail.

Four of the twelve identities involve no division by an input, so they
are defined for every finite input and return a scalar directly:

    H = V*T/2        (time, impulse)
    H = -G*T^2/2     (time, gravity)
    V = -G*T         (time, gravity)
    V = sqrt(|2HG|)  (height, gravity)

The width is inferred from the arguments (see arcjump.scalar).
"""

from arcjump.scalar import primitives_of


def height_from_time_and_impulse(time, impulse):
    """Peak height from time to peak and impulse."""
    return primitives_of(time, impulse).height_from_time_and_impulse(time, impulse)


def height_from_time_and_gravity(time, gravity):
    """Peak height from time to peak and gravity."""
    return primitives_of(time, gravity).height_from_time_and_gravity(time, gravity)


def impulse_from_time_and_gravity(time, gravity):
    """Impulse from time to peak and gravity."""
    return primitives_of(time, gravity).impulse_from_time_and_gravity(time, gravity)


def impulse_from_height_and_gravity(height, gravity):
    """Impulse from height and gravity; the magnitude, never NaN."""
    return primitives_of(height, gravity).impulse_from_height_and_gravity(height, gravity)
