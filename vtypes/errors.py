"""Exceptions raised by type evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .logic import Rule


class CoercionError(Exception):
    """An input was rejected by a type."""


class ConstraintError(CoercionError):
    """An input did not satisfy a constraint rule.

    Carries the rejected input and the rule that rejected it so callers can
    report both.
    """

    def __init__(self, rule: Rule, input: Any) -> None:
        self.rule = rule
        self.input = input
        super().__init__(f"{input!r} violates constraints ({rule})")


class ConfigError(Exception):
    """An environment setting could not be parsed."""
