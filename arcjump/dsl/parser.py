"""
Parser for the solve-DSL.

Grammar (one statement per expression, `;`-separated in blocks):

    block      := [ preamble ] statement ( ";" statement )* [ ";" ]
    preamble   := "use" [ "const" ] WIDTH ";"
    statement  := input "," input "=>" output [ "," output ] [ "as" WIDTH ]
    input      := KIND "(" expression ")" | expression ":" KIND
    output     := IDENT ":" KIND | KIND
    KIND       := H | Height | T | Time | I | Impulse | G | Gravity
    WIDTH      := f32 | f64 | float32 | float64

`expression` is any Python expression. Each statement is checked against
the dispatcher while parsing, so an impossible combination such as
`H(h), H(h) => I` never reaches code generation.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import ast
import keyword

from arcjump import dispatch
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
from arcjump.dsl.tokens import END, NAME, OP, Source
from arcjump.errors import InvalidCombination
from arcjump.kinds import from_spelling
from arcjump.scalar import normalize_width

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}

# Nodes allowed in the operands of a `use const` block
_CONSTANT_NODES = (
    ast.Expression, ast.Constant, ast.Name, ast.Load, ast.Attribute,
    ast.UnaryOp, ast.UAdd, ast.USub,
    ast.BinOp, ast.Add, ast.Sub, ast.Mult, ast.Div, ast.FloorDiv,
    ast.Mod, ast.Pow,
)


class InputOperand:
    """
    A known parameter: a Python expression tagged with a kind.

    Attributes
    ----------
    kind : ParameterKind
    kind_token : Token
    expression : str
        Exact source text of the expression.
    identifier : str or None
        The expression itself when it is a bare identifier.
    """

    def __init__(self, kind, kind_token, expression, identifier):
        self.kind = kind
        self.kind_token = kind_token
        self.expression = expression
        self.identifier = identifier

    def __repr__(self):
        return "InputOperand({}, {!r})".format(self.kind, self.expression)


class OutputOperand:
    """A parameter to derive, optionally bound to a new identifier."""

    def __init__(self, kind, kind_token, name=None, name_token=None):
        self.kind = kind
        self.kind_token = kind_token
        self.name = name
        self.name_token = name_token

    def __repr__(self):
        return "OutputOperand({}, {!r})".format(self.kind, self.name)


class Statement:
    """
    Two inputs, one or two outputs, and an optional enforced width.

    `identities` holds the dispatched identity for each output, in
    output order.
    """

    def __init__(self, inputs, outputs, width, identities):
        self.inputs = inputs
        self.outputs = outputs
        self.width = width
        self.identities = identities

    def describe(self):
        return "{}, {} => {}".format(
            self.inputs[0].kind, self.inputs[1].kind,
            ", ".join(str(o.kind) for o in self.outputs))


class Preamble:
    """`use [const] WIDTH;` configuration of a block."""

    def __init__(self, is_const, width):
        self.is_const = is_const
        self.width = width

    def __repr__(self):
        return "Preamble(is_const={!r}, width={!r})".format(self.is_const, self.width)


class Program:
    """Parsed DSL source: optional preamble plus statements."""

    def __init__(self, source, preamble, statements):
        self.source = source
        self.preamble = preamble
        self.statements = statements

    @property
    def is_const(self):
        return self.preamble is not None and self.preamble.is_const

    @property
    def width(self):
        return self.preamble.width if self.preamble is not None else None


class _Parser:

    def __init__(self, source):
        self.source = source
        self.tokens = source.tokens
        self.pos = 0

    # -- token stream --------------------------------------------------

    def peek(self, ahead=0):
        return self.tokens[min(self.pos + ahead, len(self.tokens) - 1)]

    def advance(self):
        token = self.peek()
        if token.type != END:
            self.pos += 1
        return token

    def fail(self, error_class, message, token):
        return error_class(message, token, self.source.filename)

    def _scan(self, stop_at_as=False):
        """
        Collect the tokens of one operand, up to a top-level `,`, `;`,
        `=` (start of `=>`), optionally `as`, or the end.

        Returns the tokens and the indexes of top-level `:` tokens.
        """
        tokens = []
        colons = []
        closing = []
        while True:
            token = self.peek()
            if token.type == END:
                break
            if not closing:
                if token.type == OP and token.text in (",", ";", "="):
                    break
                if stop_at_as and token.is_name("as"):
                    break
                if token.is_op(":"):
                    colons.append(len(tokens))
            if token.type == OP and token.text in _OPENERS:
                closing.append(_OPENERS[token.text])
            elif token.type == OP and token.text in _CLOSERS:
                if not closing or closing[-1] != token.text:
                    raise self.fail(
                        InvalidExpressionError,
                        "Unmatched {!r} in parameter expression".format(token.text),
                        token)
                closing.pop()
            tokens.append(self.advance())
        return tokens, colons

    # -- pieces --------------------------------------------------------

    def kind(self, token):
        if token.type != NAME:
            raise self.fail(
                UnknownKindError,
                "Expected a parameter type (H, T, I or G), found {}".format(token),
                token)
        kind = from_spelling(token.text)
        if kind is None:
            raise self.fail(
                UnknownKindError,
                "Invalid parameter type {}: expected one of "
                "H, Height, T, Time, I, Impulse, G, Gravity".format(token),
                token)
        return kind

    def width(self, token):
        if token.type != NAME:
            raise self.fail(
                InvalidWidthError,
                "Expected a numeric type (f32 or f64), found {}".format(token),
                token)
        try:
            return normalize_width(token.text)
        except ValueError as error:
            raise self.fail(InvalidWidthError, str(error), token) from None

    def expression(self, tokens, const):
        text = self.source.segment(tokens[0], tokens[-1])
        try:
            tree = ast.parse("(" + text + ")", mode="eval")
        except SyntaxError:
            raise self.fail(
                InvalidExpressionError,
                "Invalid parameter expression {!r}".format(text),
                tokens[0]) from None
        if const:
            for node in ast.walk(tree):
                if not isinstance(node, _CONSTANT_NODES):
                    raise self.fail(
                        InvalidExpressionError,
                        "Expression {!r} is not allowed in a const block: only "
                        "literals, names and arithmetic are".format(text),
                        tokens[0])
        identifier = None
        if len(tokens) == 1 and tokens[0].type == NAME and not keyword.iskeyword(text):
            identifier = text
        return text, identifier

    def parse_input(self, trailing_error, trailing_message, const):
        start = self.peek()
        tokens, colons = self._scan()
        if not tokens:
            raise self.fail(MissingParameterError, "Missing parameter", start)

        if colons:
            # annotation form: expression : KIND
            colon = colons[-1]
            expression_tokens = tokens[:colon]
            kind_tokens = tokens[colon + 1:]
            if not kind_tokens:
                raise self.fail(
                    MissingParameterError,
                    "Missing parameter type after ':'", tokens[colon])
            kind_token = kind_tokens[0]
            kind = self.kind(kind_token)
            if not expression_tokens:
                raise self.fail(
                    MissingParameterError,
                    "Missing expression for parameter {}".format(kind), kind_token)
            trailing = kind_tokens[1:]
        else:
            # expression form: KIND ( expression )
            kind_token = tokens[0]
            if len(tokens) == 1 or not tokens[1].is_op("("):
                if kind_token.type == NAME and from_spelling(kind_token.text) is not None:
                    raise self.fail(
                        MissingParameterError,
                        "Missing expression for parameter {}".format(
                            from_spelling(kind_token.text)),
                        tokens[1] if len(tokens) > 1 else self.peek())
                raise self.fail(
                    UnknownKindError,
                    "Expected KIND(expression) or expression: KIND, found {}".format(
                        kind_token),
                    kind_token)
            kind = self.kind(kind_token)
            close = _matching(tokens, 1)
            expression_tokens = tokens[2:close]
            if not expression_tokens:
                raise self.fail(
                    MissingParameterError,
                    "Missing expression for parameter {}".format(kind), tokens[1])
            trailing = tokens[close + 1:]

        if trailing:
            raise self.fail(
                trailing_error,
                "{}, found {}".format(trailing_message, trailing[0]),
                trailing[0])

        text, identifier = self.expression(expression_tokens, const)
        return InputOperand(kind, kind_token, text, identifier)

    def parse_output(self):
        start = self.peek()
        tokens, _ = self._scan(stop_at_as=True)
        if not tokens:
            raise self.fail(MissingParameterError, "Missing output parameter", start)

        if len(tokens) > 1 and tokens[1].is_op(":"):
            name_token = tokens[0]
            if (name_token.type != NAME or keyword.iskeyword(name_token.text)
                    or name_token.text.startswith("__jump_")):
                raise self.fail(
                    OutputBindingError,
                    "Invalid output name {}".format(name_token), name_token)
            if len(tokens) == 2:
                raise self.fail(
                    MissingParameterError,
                    "Missing parameter type after ':'", tokens[1])
            kind = self.kind(tokens[2])
            if len(tokens) > 3:
                raise self.fail(
                    InvalidEndError,
                    "Unexpected token {} after output parameter".format(tokens[3]),
                    tokens[3])
            return OutputOperand(kind, tokens[2], name_token.text, name_token)

        kind = self.kind(tokens[0])
        if len(tokens) > 1:
            raise self.fail(
                InvalidEndError,
                "Unexpected token {} after output parameter: outputs are "
                "separated by ','".format(tokens[1]),
                tokens[1])
        return OutputOperand(kind, tokens[0])

    def parse_arrow(self):
        token = self.peek()
        if not token.is_op("="):
            raise self.fail(
                MissingArrowError,
                "Missing arrow '=>' between inputs and outputs, found {}".format(token),
                token)
        self.advance()
        head = self.peek()
        if not (head.is_op(">") and token.joined_to(head)):
            raise self.fail(
                MissingArrowError,
                "Malformed arrow: expected '=>' with no space between '=' and '>'",
                token)
        self.advance()

    def parse_preamble(self):
        self.advance()  # use
        token = self.advance()
        is_const = False
        if token.is_name("const"):
            is_const = True
            token = self.advance()
        width = self.width(token)
        end = self.peek()
        if not end.is_op(";"):
            raise self.fail(
                InvalidEndError,
                "Expected ';' after the 'use' preamble, found {}".format(end), end)
        self.advance()
        return Preamble(is_const, width)

    def parse_statement(self, const=False):
        input1 = self.parse_input(
            InvalidEndError, "Expected ',' after the first input parameter", const)

        separator = self.peek()
        if not separator.is_op(","):
            raise self.fail(
                MissingParameterError,
                "Missing second input parameter, found {}".format(separator),
                separator)
        self.advance()

        input2 = self.parse_input(
            MissingArrowError, "Expected '=>' after the input parameters", const)
        if input1.kind == input2.kind:
            raise self.fail(
                InvalidCombinationError,
                "Input parameter {} given twice".format(input2.kind),
                input2.kind_token)
        self.parse_arrow()

        outputs = [self.parse_output()]
        if self.peek().is_op(","):
            self.advance()
            outputs.append(self.parse_output())

        width = None
        if self.peek().is_name("as"):
            self.advance()
            width = self.width(self.advance())

        end = self.peek()
        if not (end.type == END or end.is_op(";")):
            raise self.fail(
                InvalidEndError,
                "Unexpected token {} at the end of the statement".format(end), end)

        identities = [self.select(input1, input2, output) for output in outputs]
        if len(outputs) == 2 and outputs[0].kind == outputs[1].kind:
            raise self.fail(
                OutputBindingError,
                "Output {} requested twice".format(outputs[1].kind),
                outputs[1].kind_token)
        return Statement((input1, input2), outputs, width, identities)

    def select(self, input1, input2, output):
        try:
            return dispatch.select(input1.kind, input2.kind, output.kind)
        except InvalidCombination as error:
            raise self.fail(
                InvalidCombinationError,
                "Cannot compute {} from {} and {}: it is already an input".format(
                    output.kind, input1.kind, input2.kind),
                output.kind_token) from error


def _matching(tokens, index):
    """Index of the bracket closing tokens[index]."""
    depth = 0
    for i in range(index, len(tokens)):
        token = tokens[i]
        if token.type == OP and token.text in _OPENERS:
            depth += 1
        elif token.type == OP and token.text in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return len(tokens) - 1


def parse_expression(text, filename="<jump>"):
    """
    Parse a single-statement expression, as used by compute().

    Outputs must be bare kinds; the statement value is returned rather
    than bound.

    Returns
    -------
    Program
        With no preamble and exactly one statement.
    """
    source = Source(text, filename)
    parser = _Parser(source)
    token = parser.peek()
    if token.is_name("use") and parser.peek(1).type == NAME:
        raise parser.fail(
            InvalidEndError,
            "A 'use' preamble is only allowed in a jump block", token)

    statement = parser.parse_statement()
    if parser.peek().is_op(";"):
        parser.advance()
    if parser.peek().type != END:
        raise parser.fail(
            InvalidEndError,
            "Only one statement is allowed in a jump expression", parser.peek())

    for output in statement.outputs:
        if output.name is not None:
            raise parser.fail(
                OutputBindingError,
                "Output {} cannot be bound to a name in an expression; "
                "use a jump block".format(output.kind),
                output.name_token)
    return Program(source, None, [statement])


def parse_block(text, filename="<jump>"):
    """
    Parse a declaration block: optional preamble, then `;`-separated
    statements whose outputs are all bound to names.

    Raises
    ------
    JumpSyntaxError
        At the first invalid statement; later statements are not read.
    """
    source = Source(text, filename)
    parser = _Parser(source)

    preamble = None
    if parser.peek().is_name("use") and parser.peek(1).type == NAME:
        preamble = parser.parse_preamble()
    const = preamble is not None and preamble.is_const

    statements = []
    while parser.peek().type != END:
        statement = parser.parse_statement(const)
        for output in statement.outputs:
            if output.name is None:
                raise parser.fail(
                    OutputBindingError,
                    "Output {} must be bound to a name in a jump block "
                    "(e.g. my_value: {})".format(output.kind, output.kind.symbol),
                    output.kind_token)
        if (len(statement.outputs) == 2
                and statement.outputs[0].name == statement.outputs[1].name):
            raise parser.fail(
                OutputBindingError,
                "Name {!r} bound twice in one statement".format(
                    statement.outputs[1].name),
                statement.outputs[1].name_token)
        statements.append(statement)
        parser.advance()  # ';' or end

    if not statements:
        raise parser.fail(JumpSyntaxError, "Empty jump block", parser.peek())
    return Program(source, preamble, statements)
