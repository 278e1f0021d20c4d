"""Builder helpers for constructing type descriptors.

These are the shortest way to write a type by hand:

    strict(str) | strict(int)
    strict(int).optional()
"""

from types import NoneType

from vtypes.constrained import Constrained
from vtypes.contract import Type
from vtypes.logic import Predicate
from vtypes.nominal import Nominal
from vtypes.sum import Sum


def nominal(primitive: type) -> Nominal:
    return Nominal(primitive=primitive)


def strict(primitive: type) -> Constrained:
    """A nominal type that rejects anything not an instance of ``primitive``."""
    return Constrained(type=nominal(primitive), constraint=Predicate("type?", (primitive,)))


def nil() -> Constrained:
    return strict(NoneType)


def sum_of(first: Type, second: Type, *rest: Type) -> Sum:
    """Left-nested sum: sum_of(a, b, c) == (a | b) | c."""
    result = first | second
    for t in rest:
        result = result | t
    return result
