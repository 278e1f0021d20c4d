"""Logic rules used as type constraints.

A rule is a boolean test over a single input. Rules come in three forms:

- Predicate: a named test from the predicate table, with bound arguments
  (e.g. gt?(5), type?(str))
- And: both sub-rules hold (short-circuits on the left)
- Or: at least one sub-rule holds

Rules are immutable values. They compose with ``&`` and ``|`` and render
to the same tagged-tuple AST shape as types do.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Predicate table — name → (arity, test). The input is always the last
# argument passed to the test.
# ---------------------------------------------------------------------------


def instance_of(t: type, input: Any) -> bool:
    # bool is an int subclass, but a bool is not an acceptable int
    if isinstance(input, bool) and t is not bool:
        return t is object
    return isinstance(input, t)


def _is_filled(input: Any) -> bool:
    if input is None:
        return False
    return not (hasattr(input, "__len__") and len(input) == 0)


def _has_size(size: int | range, input: Any) -> bool:
    if isinstance(size, range):
        return len(input) in size
    return len(input) == size


PREDICATES: dict[str, tuple[int, Callable[..., bool]]] = {
    "type?": (1, instance_of),
    "nil?": (0, lambda input: input is None),
    "filled?": (0, _is_filled),
    "eql?": (1, lambda v, input: input == v),
    "gt?": (1, lambda n, input: input > n),
    "gteq?": (1, lambda n, input: input >= n),
    "lt?": (1, lambda n, input: input < n),
    "lteq?": (1, lambda n, input: input <= n),
    "size?": (1, _has_size),
    "min_size?": (1, lambda n, input: len(input) >= n),
    "max_size?": (1, lambda n, input: len(input) <= n),
    "format?": (1, lambda pattern, input: re.search(pattern, input) is not None),
    "included_in?": (1, lambda items, input: input in items),
    "excluded_from?": (1, lambda items, input: input not in items),
}


# ---------------------------------------------------------------------------
# Rule AST
# ---------------------------------------------------------------------------


class Rule(ABC):
    """Base for all rule forms."""

    @abstractmethod
    def __call__(self, input: Any) -> bool: ...

    @abstractmethod
    def to_ast(self) -> tuple[Any, ...]: ...

    def __and__(self, other: Rule) -> And:
        return And(self, other)

    def __or__(self, other: Rule) -> Or:
        return Or(self, other)


@dataclass(frozen=True)
class Predicate(Rule):
    """A named predicate with its leading arguments bound.

    Example: gt?(5)  — Predicate("gt?", (5,))
    """

    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.name not in PREDICATES:
            raise ValueError(f"Unknown predicate: {self.name}")
        arity, _ = PREDICATES[self.name]
        if len(self.args) != arity:
            raise ValueError(
                f"Predicate '{self.name}' expects {arity} arguments, got {len(self.args)}"
            )

    def __call__(self, input: Any) -> bool:
        _, test = PREDICATES[self.name]
        return bool(test(*self.args, input))

    def to_ast(self) -> tuple[Any, ...]:
        return ("predicate", (self.name, self.args))

    def __str__(self) -> str:
        return f"{self.name}({', '.join(repr(a) for a in self.args)})"


@dataclass(frozen=True)
class And(Rule):
    left: Rule
    right: Rule

    def __call__(self, input: Any) -> bool:
        return self.left(input) and self.right(input)

    def to_ast(self) -> tuple[Any, ...]:
        return ("and", (self.left.to_ast(), self.right.to_ast()))

    def __str__(self) -> str:
        return f"{self.left} AND {self.right}"


@dataclass(frozen=True)
class Or(Rule):
    """Holds when either side holds. Truth does not depend on side order."""

    left: Rule
    right: Rule

    def __call__(self, input: Any) -> bool:
        return self.left(input) or self.right(input)

    def to_ast(self) -> tuple[Any, ...]:
        return ("or", (self.left.to_ast(), self.right.to_ast()))

    def __str__(self) -> str:
        return f"({self.left} OR {self.right})"


# ---------------------------------------------------------------------------
# Building rules from keyword options
# ---------------------------------------------------------------------------


def rule_from_options(**options: Any) -> Rule:
    """Build a conjunction of predicates from keyword options.

    Each key names a predicate without its trailing ``?``; the value is the
    bound argument, or ``True`` for argument-less predicates.

        rule_from_options(gt=0, lteq=10)  →  gt?(0) AND lteq?(10)
    """
    if not options:
        raise ValueError("At least one constraint option is required")

    rules: list[Rule] = []
    for key, value in options.items():
        name = f"{key}?"
        if name not in PREDICATES:
            raise ValueError(f"Unknown constraint option: {key}")
        arity, _ = PREDICATES[name]
        rules.append(Predicate(name, (value,) if arity else ()))

    rule = rules[0]
    for r in rules[1:]:
        rule = And(rule, r)
    return rule
