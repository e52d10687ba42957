import math
import operator
from functools import reduce

import pytest
from hypothesis import given, strategies as st

from lemon.builtin.env_builtin import make_global_env
from lemon.errors import LemonArityError, LemonDivideByZero, LemonTypeError
from lemon.evaluation.evaluator import evaluate
from lemon.types.symbol import Symbol

numbers = st.one_of(
    st.integers(min_value=-10**30, max_value=10**30),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7.0 2)", 3.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(- 5)", -5),
        ("(/ 4)", 0.25),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+ #x10 #b11 #o7 #d1)", 27),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(= 2 2 2)", True),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2.5 1)", True),
        ("(>= 3 3 4)", False),
        ("(not #f)", True),
        ("(not 0)", False),
        ("(not #t)", False),
    ]
)
def test_comparison_and_not(run, source, expected):
    assert run(source) is expected


def test_integer_arithmetic_is_exact(run):
    assert run("(* 99999999999999999999 99999999999999999999)") == 99999999999999999999 ** 2
    assert run("(+ 18446744073709551615 1)") == 2 ** 64


def test_mixed_arithmetic_promotes_to_float(run):
    for source in ("(+ 1 2.0)", "(- 3.0 1)", "(* 2 0.5)", "(/ 1 2.0)"):
        assert isinstance(run(source), float)
    assert isinstance(run("(+ 1 2)"), int)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 1 0.0)", "(/ 0)", "(/ 10 2 0)", "(/ 0.0)", "(/ 1 -0.0)"])
def test_division_by_zero(run, source):
    with pytest.raises(LemonDivideByZero):
        run(source)


@pytest.mark.parametrize("source", ["(-)", "(/)", "(=)", "(<)", "(not)", "(not 1 2)"])
def test_builtin_arity(run, source):
    with pytest.raises(LemonArityError):
        run(source)


@pytest.mark.parametrize("source", ['(+ 1 "a")', "(* #t 2)", "(= 1 'x)", "(< 1 #f)"])
def test_builtin_type_errors(run, source):
    with pytest.raises(LemonTypeError) as exc:
        run(source)
    assert exc.value.expected == "numeric"


@given(st.lists(numbers, max_size=8))
def test_addition_is_left_fold_from_zero(ns):
    env = make_global_env()
    assert evaluate([Symbol("+"), *ns], env) == reduce(operator.add, ns, 0)


@given(st.lists(st.integers(min_value=-10**30, max_value=10**30), max_size=8))
def test_multiplication_is_left_fold_from_one(ns):
    env = make_global_env()
    assert evaluate([Symbol("*"), *ns], env) == reduce(operator.mul, ns, 1)


@given(numbers)
def test_unary_minus_is_zero_minus(n):
    env = make_global_env()
    assert evaluate([Symbol("-"), n], env) == 0 - n


@given(numbers.filter(lambda n: n != 0))
def test_unary_division_is_reciprocal(n):
    env = make_global_env()
    assert evaluate([Symbol("/"), n], env) == 1.0 / n


@given(st.integers(), st.lists(st.integers(), max_size=3), st.integers(min_value=0, max_value=3))
def test_zero_divisor_in_any_position_fails(first, rest, position):
    env = make_global_env()
    divisors = [d if d != 0 else 1 for d in rest]
    divisors.insert(min(position, len(divisors)), 0)
    with pytest.raises(LemonDivideByZero):
        evaluate([Symbol("/"), first, *divisors], env)


@given(st.integers(min_value=-10**30, max_value=10**30), st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_integer_float_mix_is_float(i, f):
    env = make_global_env()
    assert isinstance(evaluate([Symbol("+"), i, f], env), float)


@pytest.mark.parametrize(
    "source, expected",
    [
        (f"(+ {10**400} 1.5)", math.inf),
        (f"(- -{10**400} 1.5)", -math.inf),
        (f"(* {10**400} 0.5)", math.inf),
        (f"(/ 1.5 {10**400})", 0.0),
        (f"(/ {10**400})", 0.0),
        (f"(/ -{10**400} 2.0)", -math.inf),
    ]
)
def test_huge_integers_mixed_with_floats_saturate(run, source, expected):
    assert run(source) == expected


def test_huge_integer_arithmetic_stays_exact(run):
    assert run(f"(/ {10**400} {10**399})") == 10
