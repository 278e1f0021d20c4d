"""Tests for vtypes.logic — predicates, composition, option parsing."""

import pytest

from vtypes.logic import And, Or, Predicate, Rule, instance_of, rule_from_options


@pytest.mark.parametrize(
    "name, args, value, expected",
    [
        ("type?", (str,), "x", True),
        ("type?", (int,), True, False),
        ("type?", (object,), True, True),
        ("nil?", (), None, True),
        ("filled?", (), "", False),
        ("filled?", (), [0], True),
        ("filled?", (), None, False),
        ("eql?", (3,), 3, True),
        ("gt?", (3,), 3, False),
        ("gteq?", (3,), 3, True),
        ("lt?", (3,), 2, True),
        ("lteq?", (3,), 4, False),
        ("size?", (2,), "ab", True),
        ("size?", (range(1, 3),), "abc", False),
        ("min_size?", (2,), [1], False),
        ("max_size?", (2,), [1], True),
        ("format?", (r"^\d+$",), "123", True),
        ("format?", (r"^\d+$",), "12a", False),
        ("included_in?", (("a", "b"),), "a", True),
        ("excluded_from?", (("a", "b"),), "a", False),
    ],
)
def test_predicates(name: str, args: tuple, value: object, expected: bool) -> None:
    assert Predicate(name, args)(value) is expected


def test_unknown_predicate() -> None:
    with pytest.raises(ValueError, match="Unknown predicate"):
        Predicate("bogus?", ())


def test_predicate_arity() -> None:
    with pytest.raises(ValueError, match="expects 1 arguments"):
        Predicate("gt?", ())


def test_rule_is_abstract() -> None:
    with pytest.raises(TypeError):
        Rule()

    class NoAst(Rule):
        def __call__(self, input: object) -> bool:
            return True

    with pytest.raises(TypeError):
        NoAst()


def test_and_short_circuits() -> None:
    # gt? on a str would raise; type? guards it
    rule = Predicate("type?", (int,)) & Predicate("gt?", (0,))
    assert isinstance(rule, And)
    assert rule(5)
    assert not rule("five")


def test_or() -> None:
    rule = Predicate("nil?") | Predicate("type?", (str,))
    assert isinstance(rule, Or)
    assert rule(None)
    assert rule("x")
    assert not rule(1)


def test_rule_ast() -> None:
    rule = Predicate("nil?") | (Predicate("type?", (int,)) & Predicate("gt?", (0,)))
    assert rule.to_ast() == (
        "or",
        (
            ("predicate", ("nil?", ())),
            ("and", (("predicate", ("type?", (int,))), ("predicate", ("gt?", (0,))))),
        ),
    )


def test_rule_str() -> None:
    rule = Predicate("nil?") | Predicate("gt?", (0,))
    assert str(rule) == "(nil?() OR gt?(0))"


def test_rule_from_options_single() -> None:
    assert rule_from_options(gt=0) == Predicate("gt?", (0,))


def test_rule_from_options_conjunction_in_order() -> None:
    assert rule_from_options(gt=0, lteq=10, filled=True) == And(
        And(Predicate("gt?", (0,)), Predicate("lteq?", (10,))),
        Predicate("filled?", ()),
    )


def test_rule_from_options_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown constraint option: shiny"):
        rule_from_options(shiny=True)


def test_rule_from_options_requires_options() -> None:
    with pytest.raises(ValueError):
        rule_from_options()


def test_instance_of_bool_is_not_int() -> None:
    assert not instance_of(int, False)
    assert instance_of(bool, False)
