"""
Solve-DSL: jump parameter statements embedded in Python.

    >>> from arcjump.dsl import compute
    >>> h, t = 20.0, 10.0
    >>> v, g = compute("H(h), T(t) => I, G")
    >>> float(v), float(g)
    (4.0, -0.4)

Statements are checked when first used: an invalid statement raises a
JumpSyntaxError subclass pointing at the offending token, before any
operand is evaluated.
"""

from arcjump.dsl.errors import (
    InvalidCombinationError,
    InvalidEndError,
    InvalidExpressionError,
    InvalidWidthError,
    JumpSyntaxError,
    MissingArrowError,
    MissingParameterError,
    OutputBindingError,
    UnknownKindError,
)
from arcjump.dsl.program import (
    JumpBlock,
    JumpExpression,
    block,
    compute,
    define,
    expand,
    expression,
)

__all__ = [
    "InvalidCombinationError",
    "InvalidEndError",
    "InvalidExpressionError",
    "InvalidWidthError",
    "JumpBlock",
    "JumpExpression",
    "JumpSyntaxError",
    "MissingArrowError",
    "MissingParameterError",
    "OutputBindingError",
    "UnknownKindError",
    "block",
    "compute",
    "define",
    "expand",
    "expression",
]
