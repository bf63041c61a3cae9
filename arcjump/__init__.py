"""
ARCJUMP - arcade jump parameter resolver.

A jump is described by four parameters: peak height H, time to peak T,
initial vertical impulse V and gravity G. Any two determine the other
two. This package provides the closed-form identities (per numeric
width and with an error channel), a dispatcher selecting the identity
for a (known, known, wanted) triple, the Trajectory aggregate and a
small DSL for writing such derivations inline.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

__version__ = "0.1.0"

from arcjump.errors import (
    HorizontalError,
    HorizontalParameter,
    InvalidCombination,
    ResolverError,
)
from arcjump.kinds import ParameterKind
from arcjump.trajectory import Trajectory
from arcjump.dsl import block, compute, define, expand

__all__ = [
    "HorizontalError",
    "HorizontalParameter",
    "InvalidCombination",
    "ParameterKind",
    "ResolverError",
    "Trajectory",
    "block",
    "compute",
    "define",
    "expand",
]
