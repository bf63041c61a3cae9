"""
Tokenizer for the solve-DSL.

DSL operands embed host (Python) expressions, so the source is split
with the standard library tokenizer: `H(h * 2), T(1.5) => I` yields the
same NAME / NUMBER / OP tokens Python itself would see. Layout tokens
(newlines, indentation, comments) carry no meaning in the DSL and are
dropped; statements are separated by `;`.
"""

import io
import tokenize
from collections import namedtuple

from arcjump.dsl.errors import JumpSyntaxError

NAME = "name"
NUMBER = "number"
STRING = "string"
OP = "op"
OTHER = "other"
END = "end"

_TYPES = {
    tokenize.NAME: NAME,
    tokenize.NUMBER: NUMBER,
    tokenize.STRING: STRING,
    tokenize.OP: OP,
}

_LAYOUT = {
    tokenize.COMMENT,
    tokenize.NL,
    tokenize.NEWLINE,
    tokenize.INDENT,
    tokenize.DEDENT,
    tokenize.ENDMARKER,
}


class Token(namedtuple("Token", ["type", "text", "start", "end", "line"])):
    """
    A DSL token.

    start and end are (row, col) pairs: 1-based row, 0-based column,
    as produced by the tokenize module.
    """

    __slots__ = ()

    def is_op(self, text):
        return self.type == OP and self.text == text

    def is_name(self, text=None):
        return self.type == NAME and (text is None or self.text == text)

    def joined_to(self, other):
        """True if `other` starts exactly where this token ends."""
        return self.end == other.start

    def __str__(self):
        if self.type == END:
            return "end of statement"
        return repr(self.text)


def _strip_layout(text):
    # Indentation carries no meaning, so every line starts at column zero.
    return "".join(line.lstrip(" \t") for line in text.splitlines(keepends=True))


class Source:
    """
    DSL source text plus its tokens.

    Leading whitespace is removed from every line first, so blocks can be
    written as indented triple-quoted strings, with or without the first
    statement on the opening line. Diagnostic columns refer to that text.
    """

    def __init__(self, text, filename="<jump>"):
        self.text = _strip_layout(text)
        self.filename = filename
        self.lines = self.text.splitlines(keepends=True)
        self._line_offsets = []
        offset = 0
        for line in self.lines:
            self._line_offsets.append(offset)
            offset += len(line)
        self.tokens = self._tokenize()

    def _tokenize(self):
        tokens = []
        last = None
        try:
            for tok in tokenize.generate_tokens(io.StringIO(self.text).readline):
                last = tok
                if tok.type in _LAYOUT:
                    continue
                if tok.type == tokenize.ERRORTOKEN and not tok.string.strip():
                    continue
                kind = _TYPES.get(tok.type, OTHER)
                if tok.type == tokenize.ERRORTOKEN:
                    raise JumpSyntaxError(
                        "Unexpected character {!r}".format(tok.string),
                        Token(OTHER, tok.string, tok.start, tok.end, tok.line),
                        self.filename)
                tokens.append(Token(kind, tok.string, tok.start, tok.end, tok.line))
        except (tokenize.TokenError, IndentationError) as error:
            position = last.end if last is not None else (1, 0)
            line = last.line if last is not None else ""
            raise JumpSyntaxError(
                "Cannot tokenize jump statement: {}".format(error.args[0]),
                Token(END, "", position, position, line),
                self.filename) from error

        if tokens:
            position = tokens[-1].end
            line = tokens[-1].line
        else:
            position = (1, 0)
            line = ""
        tokens.append(Token(END, "", position, position, line))
        return tokens

    def offset(self, position):
        """Absolute character offset of a (row, col) position."""
        row, col = position
        if row - 1 >= len(self._line_offsets):
            return len(self.text)
        return self._line_offsets[row - 1] + col

    def segment(self, first, last):
        """Exact source text spanning tokens first..last (inclusive)."""
        return self.text[self.offset(first.start):self.offset(last.end)]
