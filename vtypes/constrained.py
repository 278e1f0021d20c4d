"""Constrained types: a type guarded by a logic rule.

The rule is checked before the wrapped type sees the input. A rejected input
never reaches the wrapped type.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .contract import Fallback, OnFailure, Type, Undefined
from .errors import ConstraintError
from .logic import And, Rule, rule_from_options


@dataclass(frozen=True)
class Constrained(Type):
    """A type whose inputs must satisfy ``constraint``.

    Example: Constrained(Nominal(int), Predicate("type?", (int,)))
    """

    type: Type
    constraint: Rule
    meta: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @property
    def name(self) -> str:
        return self.type.name

    @property
    def rule(self) -> Rule:
        return self.constraint

    @property
    def is_constrained(self) -> bool:
        return True

    @property
    def is_optional(self) -> bool:
        return self.type.is_optional

    def _holds(self, input: Any) -> bool:
        # A predicate applied to an input of the wrong shape (e.g. gt? on a str)
        # rejects it
        try:
            return self.constraint(input)
        except (TypeError, ValueError):
            return False

    def call_unsafe(self, input: Any) -> Any:
        if self._holds(input):
            return self.type.call_unsafe(input)
        raise ConstraintError(self.constraint, input)

    def call_safe(self, input: Any, fallback: Fallback | None = None) -> Any:
        if self._holds(input):
            return self.type.call_safe(input, fallback)
        if fallback is None:
            return Undefined
        return fallback()

    def try_(self, input: Any, on_failure: OnFailure | None = None) -> Any:
        if self._holds(input):
            return self.type.try_(input, on_failure)
        failure = self.failure(input, ConstraintError(self.constraint, input))
        if on_failure is None:
            return failure
        return on_failure(failure)

    def is_primitive(self, value: Any) -> bool:
        return self.type.is_primitive(value)

    def constrained(self, **options: Any) -> Type:
        return dataclasses.replace(
            self, constraint=And(self.constraint, rule_from_options(**options))
        )

    def to_ast(self, meta: bool = True) -> tuple[Any, ...]:
        return (
            "constrained",
            (
                self.type.to_ast(meta=meta),
                self.constraint.to_ast(),
                dict(self.meta) if meta else {},
            ),
        )
