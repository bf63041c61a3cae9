"""
Compile-time errors of the solve-DSL.

Every error is a SyntaxError subclass anchored on the offending token,
so tracebacks show the statement line with a caret under the token, the
same way Python reports its own syntax errors.
"""


class JumpSyntaxError(SyntaxError):
    """
    Base class for DSL expansion errors.

    Attributes
    ----------
    token : arcjump.dsl.tokens.Token
        The token the diagnostic points at.
    lineno, offset : int
        1-based line and column of the token (SyntaxError convention).
    """

    def __init__(self, message, token, filename="<jump>"):
        self.token = token
        row, col = token.start
        super().__init__(message, (filename, row, col + 1, token.line))


class MissingParameterError(JumpSyntaxError):
    """A parameter operand (or its expression) is missing."""


class UnknownKindError(JumpSyntaxError):
    """A kind spelling is not one of H, Height, T, Time, I, Impulse, G, Gravity."""


class MissingArrowError(JumpSyntaxError):
    """The `=>` separator is missing or not written as two joined characters."""


class InvalidEndError(JumpSyntaxError):
    """Unexpected tokens after the outputs of a statement."""


class InvalidCombinationError(JumpSyntaxError):
    """No identity derives the requested output from the two inputs."""


class InvalidExpressionError(JumpSyntaxError):
    """An operand is not a valid Python expression."""


class InvalidWidthError(JumpSyntaxError):
    """Unknown numeric width in a preamble or an `as` suffix."""


class OutputBindingError(JumpSyntaxError):
    """An output operand is named (or unnamed) where the form forbids it."""
