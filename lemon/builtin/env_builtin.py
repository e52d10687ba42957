"""Built-in functions for the Lemon runtime environment.

This module defines the arithmetic and comparison builtins and the
registration step that seeds a top-level scope with them. Every builtin takes
the caller's environment and the list of already evaluated arguments.
"""
from __future__ import annotations

from functools import reduce
from typing import Callable

from lemon import LispValue
from lemon.errors import LemonArityError
from lemon.types.environment import Environment
from lemon.types.internal_function import InternalFunction, BuiltinFn
from lemon.types.symbol import Symbol
from lemon.types import numeric
from lemon.types.numeric import Numeric, as_numeric


def _numbers(args: list[LispValue]) -> list[Numeric]:
    return [as_numeric(a) for a in args]


def _require_args(name: str, args: list[LispValue], expected: int = 1) -> None:
    if len(args) < expected:
        raise LemonArityError(expected, len(args), name)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> Numeric:
    """(+ a b ...) => 0 + a + b + ..."""
    return reduce(numeric.add, _numbers(args), 0)


def sub(env: Environment, args: list[LispValue]) -> Numeric:
    """(- a) => 0 - a; (- a b c) => a - b - c"""
    _require_args("-", args)
    nums = _numbers(args)
    if len(nums) == 1:
        return numeric.sub(0, nums[0])
    return reduce(numeric.sub, nums[1:], nums[0])


def mul(env: Environment, args: list[LispValue]) -> Numeric:
    """(* a b ...) => 1 * a * b * ..."""
    return reduce(numeric.mul, _numbers(args), 1)


def div(env: Environment, args: list[LispValue]) -> Numeric:
    """(/ a) => 1.0 / a; (/ a b c) => a / b / c"""
    _require_args("/", args)
    nums = _numbers(args)
    if len(nums) == 1:
        return numeric.div(1.0, nums[0])
    return reduce(numeric.div, nums[1:], nums[0])


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable[[Numeric, Numeric], bool]) -> BuiltinFn:
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _require_args(name, args)
        nums = _numbers(args)
        return all(op(a, b) for a, b in zip(nums, nums[1:]))

    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"({name} a b ...): #t if every adjacent pair satisfies {name}."
    return compare


numeric_equal = _chain("=", numeric.numeric_equal)
lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(env: Environment, args: list[LispValue]) -> bool:
    """(not x): #t only when x is #f, matching the language's truthiness."""
    if len(args) != 1:
        raise LemonArityError(1, len(args), "not")
    return args[0] is False


# Negation used by the tail-call rewrite. `#not` never comes out of the reader.
NEGATE = Symbol("#not")


BUILTINS: dict[str, BuiltinFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": numeric_equal,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, fn in BUILTINS.items():
        env.set(Symbol(name), InternalFunction(name, fn))
    env.set(NEGATE, InternalFunction("not", logical_not))


def make_global_env() -> Environment:
    """Build a fresh top-level environment seeded with the builtins."""
    env = Environment()
    register(env)
    return env
