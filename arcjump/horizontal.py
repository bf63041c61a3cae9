"""
Horizontal range helpers.

Map a horizontal speed and range to the time budget of a jump. Used by
the horizontal trajectory preset (Trajectory.from_height_speed_and_range)
to derive the time to peak from level-design quantities.

Errors are HorizontalError; construction paths that need a
ResolverError use HorizontalError.widen().
"""

from arcjump.errors import HorizontalError, HorizontalParameter
from arcjump.scalar import coerce


def time_from_speed_and_range(speed, distance):
    """
    Time to peak for a jump whose peak is halfway along the range.

        T = d / (2s)

    Parameters
    ----------
    speed : float
        Horizontal speed s.
    distance : float
        Horizontal range d covered by the whole jump.

    Returns
    -------
    float
        Time to reach the peak.

    Raises
    ------
    HorizontalError
        SPEED if the horizontal speed is null.
    """
    primitives, (speed, distance) = coerce(speed, distance)
    if speed == 0:
        raise HorizontalError(HorizontalParameter.SPEED)
    return primitives.time_from_speed_and_range(speed, distance)


def time_from_speed_range_and_ratio(speed, distance, ratio):
    """
    Split the time to cover a range between the ascent and the descent.

        (T_up, T_down) = (r * d/s, (1 - r) * d/s)

    The ratio r is expected in [0, 1]; it is not checked, so values
    outside that range give a negative phase.

    Raises
    ------
    HorizontalError
        SPEED if the horizontal speed is null.
    """
    primitives, (speed, distance, ratio) = coerce(speed, distance, ratio)
    if speed == 0:
        raise HorizontalError(HorizontalParameter.SPEED)
    return primitives.time_from_speed_range_and_ratio(speed, distance, ratio)
