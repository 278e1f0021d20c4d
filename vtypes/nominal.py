"""Nominal types: a primitive class with no checks attached."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .contract import Fallback, OnFailure, Type
from .logic import instance_of


@dataclass(frozen=True)
class Nominal(Type):
    """A type that names a primitive but accepts any input unchanged.

    Example: Nominal(str) — name "str", is_primitive("x") is True,
    but call_unsafe(5) still returns 5.
    """

    primitive: type
    meta: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @property
    def name(self) -> str:
        return self.primitive.__name__

    def call_unsafe(self, input: Any) -> Any:
        return input

    def call_safe(self, input: Any, fallback: Fallback | None = None) -> Any:
        return input

    def try_(self, input: Any, on_failure: OnFailure | None = None) -> Any:
        return self.success(input)

    def is_primitive(self, value: Any) -> bool:
        return instance_of(self.primitive, value)

    def to_ast(self, meta: bool = True) -> tuple[Any, ...]:
        return ("nominal", (self.primitive, dict(self.meta) if meta else {}))
