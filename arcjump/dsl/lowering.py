"""
Lowering of parsed jump statements to Python source.

A statement such as

    H(h * 2), T(t) => I, G

becomes straight-line code calling the dispatched resolver identities:

    # Height, Time => Impulse, Gravity
    __jump_height_0 = (h * 2)
    __jump_result = (__jump_resolver.impulse_from_height_and_time(__jump_height_0, t),
                     __jump_resolver.gravity_from_height_and_time(__jump_height_0, t))

Every input is evaluated exactly once. Bare identifier inputs are used
as they are unless a width is enforced, in which case they are cast too.
"""

from arcjump.constants import FLOAT32, FLOAT64

RESOLVER = "__jump_resolver"
RESULT = "__jump_result"
CASTS = {
    FLOAT32: "__jump_f32",
    FLOAT64: "__jump_f64",
}

EXPRESSION = "expression"
BLOCK = "block"
MODES = (EXPRESSION, BLOCK)


class _Names:
    """Fresh binding names, unique within one generated program."""

    def __init__(self):
        self.count = 0

    def fresh(self, kind):
        name = "__jump_{}_{}".format(kind.label, self.count)
        self.count += 1
        return name


def _call(identity, arguments):
    a, b = identity.inputs
    return "{}.{}({}, {})".format(RESOLVER, identity.name, arguments[a], arguments[b])


def lower_statement(statement, width, mode, names):
    """
    Generate the source lines of one statement.

    Parameters
    ----------
    statement : arcjump.dsl.parser.Statement
    width : str or None
        Enforced width ("f32" / "f64"), or None to let the resolver infer
        it from the run-time values.
    mode : str
        EXPRESSION binds the statement value to RESULT; BLOCK binds each
        output to its name.
    names : _Names

    Returns
    -------
    list of str
    """
    lines = ["# {}".format(statement.describe())]

    arguments = {}
    for operand in statement.inputs:
        if operand.identifier is not None and width is None:
            arguments[operand.kind] = operand.identifier
            continue
        name = names.fresh(operand.kind)
        value = "({})".format(operand.expression)
        if width is not None:
            value = "{}{}".format(CASTS[width], value)
        lines.append("{} = {}".format(name, value))
        arguments[operand.kind] = name

    calls = [_call(identity, arguments) for identity in statement.identities]
    if mode == BLOCK:
        # Both calls run before any output is bound, so an output may
        # reuse the name of an input.
        target = ", ".join(output.name for output in statement.outputs)
    else:
        target = RESULT
    if len(calls) == 1:
        lines.append("{} = {}".format(target, calls[0]))
    else:
        lines.append("{} = ({},\n    {})".format(target, calls[0], calls[1]))
    return lines


def lower(program, mode):
    """
    Generate the Python source of a whole program.

    The statement width is its `as` suffix, else the block preamble
    width, else None.
    """
    if mode not in MODES:
        raise ValueError("Unknown jump mode {!r}: expected one of {}".format(
            mode, ", ".join(MODES)))

    names = _Names()
    lines = []
    for statement in program.statements:
        width = statement.width or program.width
        lines.extend(lower_statement(statement, width, mode, names))
    return "\n".join(lines) + "\n"
