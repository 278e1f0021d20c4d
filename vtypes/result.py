"""Outcome of trying an input against a type."""

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class Success:
    input: Any

    @property
    def success(self) -> bool:
        return True

    @property
    def failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    input: Any
    error: Exception | None = None

    @property
    def success(self) -> bool:
        return False

    @property
    def failure(self) -> bool:
        return True


Result: TypeAlias = Success | Failure
