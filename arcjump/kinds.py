"""
Jump parameter kinds.

The four quantities describing an arcade jump, in their canonical order:

    HEIGHT < TIME < IMPULSE < GRAVITY

The order only serves to canonicalize an unordered pair of inputs before
an identity is selected, which halves the identity table from 24 to 12
entries. It must stay stable: the dispatcher, the trajectory aggregate
and the solve-DSL all rely on it.
"""

import enum

from arcjump.constants import API_KIND_ALIASES, KIND_SPELLINGS


class ParameterKind(enum.IntEnum):
    """One of the four jump parameters."""

    HEIGHT = 0
    TIME = 1
    IMPULSE = 2
    GRAVITY = 3

    @property
    def label(self):
        """Lower-case name, as used in identity names and JSON keys."""
        return self.name.lower()

    @property
    def symbol(self):
        """Single letter DSL spelling (H, T, I, G)."""
        return _SPELLINGS[self][0]

    @property
    def title(self):
        """Long DSL spelling (Height, Time, Impulse, Gravity)."""
        return _SPELLINGS[self][1]

    def __str__(self):
        return self.title


_SPELLINGS = {
    ParameterKind[name.upper()]: spellings for name, spellings in KIND_SPELLINGS
}

_BY_SPELLING = {
    spelling: kind
    for kind, spellings in _SPELLINGS.items()
    for spelling in spellings
}


def from_spelling(text):
    """
    Look up a kind from its DSL spelling.

    Only the exact spellings H, Height, T, Time, I, Impulse, G, Gravity
    are recognized.

    Returns
    -------
    ParameterKind or None
        None if the spelling is not a kind.
    """
    return _BY_SPELLING.get(text)


def parse_kind(value):
    """
    Parse a kind from a user-supplied value (JSON payload, config).

    Accepts a ParameterKind, a DSL spelling, a canonical lower-case name
    or one of the API aliases (v, velocity, ...), case-insensitively.

    Raises
    ------
    ValueError
        If the value does not name a parameter kind.
    """
    if isinstance(value, ParameterKind):
        return value
    if not isinstance(value, str):
        raise ValueError("Unknown parameter kind: {!r}".format(value))
    kind = from_spelling(value)
    if kind is not None:
        return kind
    name = value.strip().lower()
    name = API_KIND_ALIASES.get(name, name)
    try:
        return ParameterKind[name.upper()]
    except KeyError:
        raise ValueError("Unknown parameter kind: {!r}".format(value))
