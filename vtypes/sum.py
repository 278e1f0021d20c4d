"""Sum types: the union of two type descriptors.

A Sum accepts any input that either operand accepts. Operands are always
consulted left first; ``right`` is evaluated only after ``left`` has rejected
the input, and the first success wins. Because a Sum satisfies the same
contract as its operands, sums nest freely:

    (a | b) | c   behaves like   a | (b | c)

when the three operands accept disjoint inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .contract import Fallback, OnFailure, Type
from .logic import Or, Rule
from .result import Failure, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sum(Type):
    """``left | right``.

    Equality covers (left, right, options, meta). Metadata is left out of
    the repr.
    """

    left: Type
    right: Type
    options: Mapping[str, Any] = field(default_factory=dict)
    meta: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @property
    def name(self) -> str:
        return " | ".join([self.left.name, self.right.name])

    @property
    def is_default(self) -> bool:
        return False

    @property
    def is_constrained(self) -> bool:
        return False

    @property
    def is_optional(self) -> bool:
        return self.is_primitive(None)

    # -- evaluation ---------------------------------------------------------

    def call_unsafe(self, input: Any) -> Any:
        return self.left.call_safe(input, lambda: self.right.call_unsafe(input))

    def call_safe(self, input: Any, fallback: Fallback | None = None) -> Any:
        return self.left.call_safe(input, lambda: self.right.call_safe(input, fallback))

    def try_(self, input: Any, on_failure: OnFailure | None = None) -> Any:
        def try_right(failure: Failure) -> Any:
            logger.debug(
                "%s rejected %r (%s), trying %s",
                self.left.name, input, failure.error, self.right.name,
            )
            return self.right.try_(input, on_failure)

        return self.left.try_(input, try_right)

    def success(self, input: Any) -> Result:
        if self.left.is_valid(input):
            return self.left.success(input)
        elif self.right.is_valid(input):
            return self.right.success(input)
        logger.debug("No operand of %s accepts %r", self.name, input)
        raise ValueError(f"Invalid success value {input!r} for {self!r}")

    def failure(self, input: Any, error: Exception | None = None) -> Result:
        # error is ignored; the failure is rebuilt from the rejecting operand
        if not self.left.is_valid(input):
            return self.left.failure(input, _error_of(self.left.try_(input)))
        return self.right.failure(input, _error_of(self.right.try_(input)))

    def is_primitive(self, value: Any) -> bool:
        return self.left.is_primitive(value) or self.right.is_primitive(value)

    # -- builders / introspection -------------------------------------------

    def constrained(self, **options: Any) -> Type:
        # An optional sum keeps its nil branch untouched
        if self.is_optional:
            return self.right.constrained(**options).optional()
        return super().constrained(**options)

    def to_ast(self, meta: bool = True) -> tuple[Any, ...]:
        return (
            "sum",
            (
                self.left.to_ast(meta=meta),
                self.right.to_ast(meta=meta),
                dict(self.meta) if meta else {},
            ),
        )


@dataclass(frozen=True)
class ConstrainedSum(Sum):
    """A Sum of two constrained operands, exposing their rules joined by OR."""

    @property
    def rule(self) -> Rule:
        return Or(self.left.rule, self.right.rule)

    @property
    def is_constrained(self) -> bool:
        return True


def _error_of(result: Any) -> Exception | None:
    if isinstance(result, Failure):
        return result.error
    return None
