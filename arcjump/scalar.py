"""
Scalar widths: 32-bit and 64-bit IEEE-754 binary floating point.

The primitives are specialized per width (arcjump.float32 and
arcjump.float64); everything above them is width-agnostic and picks the
width from the values it is given:

    - any numpy.float64 argument     -> 64-bit
    - otherwise any numpy.float32    -> 32-bit
    - otherwise (plain Python number) -> 64-bit

Plain Python numbers never widen a 32-bit computation, the same way
numpy treats Python scalars as weakly typed.
"""

import numpy as np

from arcjump import float32, float64
from arcjump.constants import DEFAULT_WIDTH, FLOAT32, FLOAT64, WIDTH_ALIASES

DTYPES = {
    FLOAT32: np.float32,
    FLOAT64: np.float64,
}


def normalize_width(name):
    """
    Return the canonical width name ("f32" or "f64") for a spelling.

    Accepts f32, f64, float32, float64 (case-insensitive), the numpy
    scalar types themselves, or None for the default width.

    Raises
    ------
    ValueError
        If the spelling is not a supported width.
    """
    if name is None:
        return DEFAULT_WIDTH
    if name is np.float32:
        return FLOAT32
    if name is np.float64 or name is float:
        return FLOAT64
    if isinstance(name, str):
        width = WIDTH_ALIASES.get(name.strip().lower())
        if width is not None:
            return width
    raise ValueError(
        "Unsupported numeric width {!r}: expected one of {}".format(
            name, ", ".join(sorted(WIDTH_ALIASES))))


def dtype_for(width):
    """numpy scalar type for a width spelling."""
    return DTYPES[normalize_width(width)]


def cast(value, width):
    """Convert a value to a numpy scalar of the given width."""
    return dtype_for(width)(value)


def width_of(*values):
    """
    Infer the width a computation on these values should run in.

    np.float64 is a subclass of float, so it has to be checked before
    anything that would treat it as a plain Python number.
    """
    if any(isinstance(v, np.float64) for v in values):
        return FLOAT64
    if any(isinstance(v, np.float32) for v in values):
        return FLOAT32
    return DEFAULT_WIDTH


def primitives_for(width):
    """Return the primitive module (arcjump.float32 / arcjump.float64) for a width."""
    if normalize_width(width) == FLOAT32:
        return float32
    return float64


def primitives_of(*values):
    """Primitive module matching the width inferred from the values."""
    return primitives_for(width_of(*values))


def coerce(*values):
    """
    Convert values to the width inferred from them.

    Returns
    -------
    tuple of (module, list)
        The primitive module for that width and the converted values.
        A value too small for the width comes back as zero, so null
        checks made on the result see what the primitives will see.
    """
    width = width_of(*values)
    return primitives_for(width), [cast(value, width) for value in values]
