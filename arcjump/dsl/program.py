"""
Compiled jump programs and the DSL entry points.

    compute(source)   one statement, evaluated in the caller's scope
    block(source)     a declaration block, evaluated on demand
    define(source)    a block evaluated once into a module namespace
    expand(source)    the generated Python source

Sources are parsed, lowered and compiled once; the compiled programs are
cached by source text and are immutable, so they can be shared between
threads.
"""

import functools
import logging
import sys

import numpy as np

from arcjump import resolver
from arcjump.constants import FLOAT32, FLOAT64
from arcjump.dsl import lowering
from arcjump.dsl.parser import parse_block, parse_expression

log = logging.getLogger(__name__)

_HELPERS = {
    lowering.RESOLVER: resolver,
    lowering.CASTS[FLOAT32]: np.float32,
    lowering.CASTS[FLOAT64]: np.float64,
}


def _scope(*mappings):
    # One dict serves as globals and locals, so generator expressions and
    # lambdas inside operands resolve the same names as the operand itself.
    scope = {}
    for mapping in mappings:
        if mapping:
            scope.update(mapping)
    scope.update(_HELPERS)
    return scope


class JumpExpression:
    """
    A compiled single-statement expression.

    Attributes
    ----------
    statement : arcjump.dsl.parser.Statement
    python_source : str
        The generated Python code.
    """

    def __init__(self, program, python_source, code):
        self.program = program
        self.statement = program.statements[0]
        self.python_source = python_source
        self._code = code

    def evaluate(self, namespace=None):
        """
        Evaluate against a namespace.

        Returns
        -------
        scalar, or tuple of two scalars for two outputs.
        """
        scope = _scope(namespace)
        exec(self._code, scope)
        return scope[lowering.RESULT]

    def __repr__(self):
        return "JumpExpression({!r})".format(self.statement.describe())


class JumpBlock:
    """
    A compiled declaration block.

    Evaluating it runs the statements in order and returns the bindings
    they introduce. Later statements can refer to earlier bindings.
    """

    def __init__(self, program, python_source, code):
        self.program = program
        self.python_source = python_source
        self._code = code

    @property
    def is_const(self):
        return self.program.is_const

    @property
    def width(self):
        return self.program.width

    @property
    def names(self):
        """Names bound by the block, in statement order."""
        return tuple(
            output.name
            for statement in self.program.statements
            for output in statement.outputs
        )

    def evaluate(self, namespace=None, **values):
        """
        Run the block.

        Parameters
        ----------
        namespace : mapping, optional
            Names visible to the operand expressions.
        **values
            Extra names, overriding the namespace.

        Returns
        -------
        dict
            {name: value} in statement order.
        """
        scope = _scope(namespace, values)
        exec(self._code, scope)
        return {name: scope[name] for name in self.names}

    def __repr__(self):
        return "JumpBlock({})".format(", ".join(self.names))


@functools.lru_cache(maxsize=256)
def _compile(source, mode):
    if mode == lowering.BLOCK:
        program = parse_block(source)
    else:
        program = parse_expression(source)
    python_source = lowering.lower(program, mode)
    code = compile(python_source, program.source.filename, "exec")
    log.debug("Expanded %d jump statement(s) in %s mode", len(program.statements), mode)
    if mode == lowering.BLOCK:
        return JumpBlock(program, python_source, code)
    return JumpExpression(program, python_source, code)


def expression(source):
    """Compile (or fetch from cache) a single-statement expression."""
    return _compile(source, lowering.EXPRESSION)


def block(source):
    """
    Compile (or fetch from cache) a declaration block.

    Examples
    --------
    >>> jump = block("use f32; H(height), T(time) => v: I, g: G")
    >>> values = jump.evaluate(height=20, time=10)
    >>> float(values["v"])
    4.0
    """
    return _compile(source, lowering.BLOCK)


def compute(source, namespace=None):
    """
    Evaluate one jump statement.

    Operand expressions are evaluated in `namespace` when given, else in
    the calling function's scope.

    Parameters
    ----------
    source : str
        e.g. "H(h), T(t) => I, G".
    namespace : mapping, optional

    Returns
    -------
    scalar or tuple
        One value per output, in output order.

    Raises
    ------
    JumpSyntaxError
        If the statement is invalid.
    ResolverError
        If an identity is undefined for the run-time values. With two
        outputs, the first failure is raised and the second output is
        not computed.
    """
    compiled = expression(source)
    if namespace is not None:
        return compiled.evaluate(namespace)
    frame = sys._getframe(1)
    try:
        scope = dict(frame.f_globals)
        scope.update(frame.f_locals)
    finally:
        del frame
    return compiled.evaluate(scope)


def define(source, namespace=None):
    """
    Evaluate a block once and install its bindings.

    Meant for module level, where `use const` blocks play the role of
    constant declarations:

        define('''
            use const f32;
            H(JUMP_HEIGHT), T(JUMP_TIME) => JUMP_IMPULSE: I;
        ''')

    Parameters
    ----------
    namespace : dict, optional
        Target namespace; defaults to the caller's module globals. It is
        also the namespace the operands are evaluated in.

    Returns
    -------
    dict
        The installed bindings.
    """
    compiled = block(source)
    if namespace is None:
        namespace = sys._getframe(1).f_globals
    bindings = compiled.evaluate(namespace)
    namespace.update(bindings)
    log.debug("Defined %s", ", ".join(bindings))
    return bindings


def expand(source, mode=lowering.EXPRESSION):
    """Return the Python source generated for a jump expression or block."""
    if mode not in lowering.MODES:
        raise ValueError("Unknown jump mode {!r}: expected one of {}".format(
            mode, ", ".join(lowering.MODES)))
    return _compile(source, mode).python_source
