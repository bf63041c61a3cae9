"""
64-bit kinematic primitives.

Same identities and degeneracy policy as arcjump.float32, evaluated in
numpy.float64. Plain Python floats are converted on entry, so results
are always numpy.float64 (which is also a Python float).
"""

import numpy as np

_F = np.float64

_HALF = _F(0.5)
_ONE = _F(1.0)
_TWO = _F(2.0)
_INF = _F(np.inf)
_NEG_INF = _F(-np.inf)


# ----------------------------------------------------------------------
# Peak height
# ----------------------------------------------------------------------

def height_from_time_and_impulse(time, impulse):
    """Peak height from time to peak and impulse: H = V*T/2."""
    return _HALF * _F(impulse) * _F(time)


def height_from_time_and_gravity(time, gravity):
    """Peak height from time to peak and gravity: H = -G*T^2/2."""
    time = _F(time)
    return -_HALF * _F(gravity) * time * time


def height_from_impulse_and_gravity(impulse, gravity):
    """Peak height from impulse and gravity: H = -V^2 / (2G)."""
    impulse = _F(impulse)
    gravity = _F(gravity)
    if gravity == 0:
        return _INF
    return -_HALF * impulse * impulse / gravity


# ----------------------------------------------------------------------
# Time to peak
# ----------------------------------------------------------------------

def time_from_height_and_impulse(height, impulse):
    """Time to peak from height and impulse: T = 2H / V."""
    impulse = _F(impulse)
    if impulse == 0:
        return _INF
    return _TWO * _F(height) / impulse


def time_from_height_and_gravity(height, gravity):
    """Time to peak from height and gravity: T = sqrt(|2H / G|)."""
    gravity = _F(gravity)
    if gravity == 0:
        return _INF
    return np.sqrt(np.abs(_TWO * _F(height) / gravity))


def time_from_impulse_and_gravity(impulse, gravity):
    """Time to peak from impulse and gravity: T = -V / G."""
    gravity = _F(gravity)
    if gravity == 0:
        return _INF
    return -_F(impulse) / gravity


# ----------------------------------------------------------------------
# Vertical impulse
# ----------------------------------------------------------------------

def impulse_from_height_and_time(height, time):
    """Impulse from height and time to peak: V = 2H / T."""
    time = _F(time)
    if time == 0:
        return _INF
    return _TWO * _F(height) / time


def impulse_from_height_and_gravity(height, gravity):
    """Impulse from height and gravity: V = sqrt(|2HG|)."""
    return np.sqrt(np.abs(_TWO * _F(height) * _F(gravity)))


def impulse_from_time_and_gravity(time, gravity):
    """Impulse from time to peak and gravity: V = -G*T."""
    return -_F(gravity) * _F(time)


# ----------------------------------------------------------------------
# Gravity
# ----------------------------------------------------------------------

def gravity_from_height_and_time(height, time):
    """Gravity from height and time to peak: G = -2H / T^2."""
    time = _F(time)
    if time == 0:
        return _NEG_INF
    return -_TWO * _F(height) / (time * time)


def gravity_from_height_and_impulse(height, impulse):
    """Gravity from height and impulse: G = -V^2 / (2H)."""
    height = _F(height)
    impulse = _F(impulse)
    if height == 0:
        return _NEG_INF
    return -_HALF * impulse * impulse / height


def gravity_from_time_and_impulse(time, impulse):
    """Gravity from time to peak and impulse: G = -V / T."""
    time = _F(time)
    if time == 0:
        return _NEG_INF
    return -_F(impulse) / time


# ----------------------------------------------------------------------
# Horizontal helpers
# ----------------------------------------------------------------------

def time_from_speed_and_range(speed, distance):
    """Half-range time to peak: T = d / (2s)."""
    speed = _F(speed)
    if speed == 0:
        return _INF
    return _HALF * _F(distance) / speed


def time_from_speed_range_and_ratio(speed, distance, ratio):
    """Ascent / descent time split: (ratio * d/s, (1 - ratio) * d/s)."""
    speed = _F(speed)
    if speed == 0:
        return _INF, _INF
    total = _F(distance) / speed
    ratio = _F(ratio)
    return total * ratio, total * (_ONE - ratio)
