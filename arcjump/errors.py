"""
Error taxonomy for jump parameter resolution.

Three disjoint failure families:

    ResolverError       - an identity is undefined because one input is
                          null (e.g. zero time when dividing by time).
    HorizontalError     - the horizontal range / speed helpers failed.
    InvalidCombination  - no identity maps the requested inputs to the
                          requested output (repeated kinds).

All derive from ValueError so callers that only care about "bad input"
can catch that.
"""

import enum

from arcjump.constants import NULL_HORIZONTAL_MESSAGES, NULL_PARAMETER_MESSAGES
from arcjump.kinds import ParameterKind


class HorizontalParameter(enum.Enum):
    """Parameters of the horizontal helpers."""

    TIME = "time"
    RANGE = "range"
    SPEED = "speed"


class ResolverError(ValueError):
    """
    An identity could not be evaluated because an input was null.

    Attributes
    ----------
    parameter : ParameterKind
        The input whose null value made the identity undefined.
    """

    def __init__(self, parameter):
        self.parameter = ParameterKind(parameter)
        super().__init__(NULL_PARAMETER_MESSAGES[self.parameter.label])


class HorizontalError(ValueError):
    """
    A horizontal helper could not be evaluated.

    Attributes
    ----------
    parameter : HorizontalParameter
        The offending horizontal parameter.
    """

    def __init__(self, parameter):
        self.parameter = HorizontalParameter(parameter)
        super().__init__(NULL_HORIZONTAL_MESSAGES[self.parameter.value])

    def widen(self):
        """
        Convert to ResolverError(TIME) for trajectory construction paths.

        This is lossy: the result no longer says whether the speed, the
        range or the time was at fault.
        """
        return ResolverError(ParameterKind.TIME)


class InvalidCombination(ValueError):
    """
    No identity computes `output` from the two `inputs`.

    Raised whenever two of the three kinds are the same.
    """

    def __init__(self, input1, input2, output):
        self.inputs = (ParameterKind(input1), ParameterKind(input2))
        self.output = ParameterKind(output)
        super().__init__(
            "Invalid parameter combination {}, {} => {}".format(
                self.inputs[0], self.inputs[1], self.output))
