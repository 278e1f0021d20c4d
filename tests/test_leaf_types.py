"""Tests for the leaf types: Nominal and Constrained."""

from __future__ import annotations

import dataclasses
from types import NoneType

import pytest

from vtypes import (
    And,
    Constrained,
    ConstraintError,
    Failure,
    Nominal,
    Predicate,
    Success,
    Undefined,
)
from vtypes.helpers import nil, nominal, strict


class TestNominal:
    @pytest.fixture(autouse=True)
    def _type(self) -> None:
        self.type = nominal(str)

    def test_name(self) -> None:
        assert self.type.name == "str"

    def test_accepts_anything_unchanged(self) -> None:
        assert self.type.call_unsafe(5) == 5
        assert self.type.call_safe(5, lambda: "unused") == 5
        assert self.type.try_(5) == Success(5)
        assert self.type.is_valid(object())

    def test_is_primitive(self) -> None:
        assert self.type.is_primitive("x")
        assert not self.type.is_primitive(5)

    def test_flags(self) -> None:
        assert not self.type.is_constrained
        assert not self.type.is_optional
        assert not self.type.is_default

    def test_with_meta(self) -> None:
        t = self.type.with_meta(a=1).with_meta(b=2)
        assert t.meta == {"a": 1, "b": 2}
        assert t != self.type
        assert t.primitive is str

    def test_int_excludes_bool(self) -> None:
        assert not Nominal(int).is_primitive(True)
        assert Nominal(bool).is_primitive(True)


class TestConstrained:
    @pytest.fixture(autouse=True)
    def _type(self) -> None:
        self.type = strict(int).constrained(gteq=1, lteq=5)

    def test_rule(self) -> None:
        assert self.type.rule == And(
            Predicate("type?", (int,)),
            And(Predicate("gteq?", (1,)), Predicate("lteq?", (5,))),
        )

    def test_call_unsafe(self) -> None:
        assert self.type.call_unsafe(3) == 3
        with pytest.raises(ConstraintError) as exc_info:
            self.type.call_unsafe(6)
        assert exc_info.value.input == 6
        assert "violates constraints" in str(exc_info.value)

    def test_call_safe(self) -> None:
        assert self.type.call_safe(6) is Undefined
        assert self.type.call_safe(6, lambda: -1) == -1
        assert self.type.call_safe("x", lambda: -1) == -1

    def test_try(self) -> None:
        assert self.type.try_(1) == Success(1)
        result = self.type.try_(0)
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConstraintError)
        assert self.type.try_(0, lambda f: f.input) == 0

    def test_delegates_to_wrapped(self) -> None:
        assert self.type.name == "int"
        assert self.type.is_primitive(10)
        assert self.type.is_constrained

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.type.constraint = Predicate("nil?")  # type: ignore[misc]


def test_nil() -> None:
    t = nil()
    assert isinstance(t, Constrained)
    assert t.name == "NoneType"
    assert t.is_primitive(None)
    assert t.try_(None) == Success(None)
    assert isinstance(t.try_(0), Failure)
    assert t.type == Nominal(NoneType)


def test_optional_constrained_is_optional() -> None:
    assert strict(int).optional().constrained(gt=0).is_optional
