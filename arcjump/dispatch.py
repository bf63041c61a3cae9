"""
Identity dispatcher.

Maps (input kind, input kind, output kind) to the identity that derives
the output from the two inputs. The input pair is unordered: it is
sorted by the canonical kind order (height < time < impulse < gravity)
first, so the 24 valid ordered triples collapse onto 12 table entries.

Any triple with a repeated kind has no identity and raises
InvalidCombination. The dispatcher is pure and width-agnostic.
"""

from collections import namedtuple

from arcjump.errors import InvalidCombination
from arcjump.kinds import ParameterKind

_H = ParameterKind.HEIGHT
_T = ParameterKind.TIME
_I = ParameterKind.IMPULSE
_G = ParameterKind.GRAVITY


class Identity(namedtuple("Identity", ["name", "inputs", "output"])):
    """
    One closed-form identity.

    Attributes
    ----------
    name : str
        Function name shared by arcjump.resolver and the width modules,
        e.g. "impulse_from_height_and_time".
    inputs : tuple of ParameterKind
        The two inputs, in canonical order (the argument order).
    output : ParameterKind
        The derived parameter.
    """

    __slots__ = ()

    def __str__(self):
        return "{}, {} => {}".format(self.inputs[0], self.inputs[1], self.output)


def _identity(input1, input2, output):
    name = "{}_from_{}_and_{}".format(output.label, input1.label, input2.label)
    return Identity(name, (input1, input2), output)


IDENTITIES = {
    (a, b, out): _identity(a, b, out)
    for a, b, out in (
        (_H, _T, _I), (_H, _T, _G),
        (_H, _I, _T), (_H, _I, _G),
        (_H, _G, _T), (_H, _G, _I),
        (_T, _I, _H), (_T, _I, _G),
        (_T, _G, _H), (_T, _G, _I),
        (_I, _G, _H), (_I, _G, _T),
    )
}


def canonical_order(kind1, kind2):
    """
    Return the two kinds sorted by canonical order, plus whether they
    were swapped.

    Returns
    -------
    tuple of ((ParameterKind, ParameterKind), bool)
    """
    kind1 = ParameterKind(kind1)
    kind2 = ParameterKind(kind2)
    if kind2 < kind1:
        return (kind2, kind1), True
    return (kind1, kind2), False


def select(input1, input2, output):
    """
    Select the identity computing `output` from `input1` and `input2`.

    Parameters
    ----------
    input1, input2 : ParameterKind
        The known parameters, in any order.
    output : ParameterKind
        The parameter to derive.

    Returns
    -------
    Identity

    Raises
    ------
    InvalidCombination
        If any two of the three kinds are equal.
    """
    (a, b), _ = canonical_order(input1, input2)
    try:
        return IDENTITIES[(a, b, ParameterKind(output))]
    except KeyError:
        raise InvalidCombination(input1, input2, output) from None


def missing_kinds(input1, input2):
    """The two kinds not given, in canonical order."""
    known = {ParameterKind(input1), ParameterKind(input2)}
    return tuple(kind for kind in ParameterKind if kind not in known)
