"""The capability contract shared by every type descriptor.

A type descriptor answers three evaluation protocols over a single input:

- unsafe: ``call_unsafe(input)`` returns the (possibly transformed) value or
  raises a CoercionError
- safe: ``call_safe(input, fallback)`` never raises on rejection; it returns
  ``fallback()`` instead, or Undefined when no fallback is given
- try: ``try_(input, on_failure)`` returns a Success or Failure value

Leaf types and combinators implement the same contract, so a combinator never
needs to know what its operands are. Builder operations (``|``, ``optional``,
``constrained``, ``with_meta``) live here too and always return new
descriptors.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .result import Failure, Result, Success

if TYPE_CHECKING:
    from .logic import Rule
    from .sum import Sum


class _Undefined:
    """Marker returned by safe evaluation when nothing else applies."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined = _Undefined()

Fallback = Callable[[], Any]
OnFailure = Callable[[Failure], Any]

_INVALID = object()


class Type(ABC):
    """Base class for all type descriptors.

    Subclasses are frozen dataclasses and must carry a ``meta`` field.
    """

    meta: Any

    # -- evaluation ---------------------------------------------------------

    @abstractmethod
    def call_unsafe(self, input: Any) -> Any: ...

    @abstractmethod
    def call_safe(self, input: Any, fallback: Fallback | None = None) -> Any: ...

    @abstractmethod
    def try_(self, input: Any, on_failure: OnFailure | None = None) -> Any: ...

    def __call__(self, input: Any, fallback: Fallback | None = None) -> Any:
        if fallback is None:
            return self.call_unsafe(input)
        return self.call_safe(input, fallback)

    def is_valid(self, input: Any) -> bool:
        return self.call_safe(input, lambda: _INVALID) is not _INVALID

    def success(self, input: Any) -> Result:
        return Success(input)

    def failure(self, input: Any, error: Exception | None = None) -> Result:
        return Failure(input, error)

    # -- introspection ------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def is_primitive(self, value: Any) -> bool: ...

    @abstractmethod
    def to_ast(self, meta: bool = True) -> tuple[Any, ...]: ...

    @property
    def is_optional(self) -> bool:
        return False

    @property
    def is_constrained(self) -> bool:
        return False

    @property
    def is_default(self) -> bool:
        return False

    @property
    def rule(self) -> Rule:
        raise AttributeError(f"{self.name} carries no constraint rule")

    # -- builders -----------------------------------------------------------

    def __or__(self, other: Type) -> Sum:
        from .sum import ConstrainedSum, Sum

        if self.is_constrained and other.is_constrained:
            return ConstrainedSum(self, other)
        return Sum(self, other)

    def optional(self) -> Sum:
        from .helpers import nil

        return nil() | self

    def constrained(self, **options: Any) -> Type:
        from .constrained import Constrained
        from .logic import rule_from_options

        return Constrained(self, rule_from_options(**options))

    def with_meta(self, **data: Any) -> Type:
        return dataclasses.replace(self, meta={**self.meta, **data})
