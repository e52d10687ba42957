"""Core evaluator for the Lemon interpreter.

Dispatches on the shape of an expression: symbols are looked up, quoted
values are returned as-is, lists are calls or special forms, and the
remaining literals evaluate to themselves. Function values appearing bare in
expression position evaluate to Void; they are only meaningful when called.
"""

from __future__ import annotations

from typing import Iterable

from lemon import SExpression, LispValue
from lemon.errors import LemonEmptyList, LemonNonCallableValue, LemonUndefinedVariable
from lemon.types.closure import Closure
from lemon.types.environment import Environment
from lemon.types.internal_function import InternalFunction
from lemon.types.keyword import Keyword
from lemon.types.quoted import Quoted
from lemon.types.symbol import Symbol
from lemon.types.tail_call import TailCall
from lemon.types.void import Void, VoidType
from lemon.evaluation.apply import apply
from lemon.evaluation.special_forms import SPECIAL_FORMS

CALLABLES = (Closure, TailCall, InternalFunction)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a single expression tree in `env`."""
    match expr:
        case VoidType() | Closure() | TailCall() | InternalFunction():
            return Void
        case Symbol():
            value = env.get(expr)
            if value is None:
                raise LemonUndefinedVariable(expr.id)
            return value
        case Quoted():
            return expr.value
        case list():
            return evaluate_list(expr, env)

    # --- Atoms return as-is ---
    return expr


def evaluate_list(expr: list[SExpression], env: Environment) -> LispValue:
    if not expr:
        raise LemonEmptyList("Cannot evaluate an empty list")

    head, *tail = expr

    # --- Special forms handling ---
    if isinstance(head, Keyword):
        return SPECIAL_FORMS[head](tail, env, evaluate)

    # A closure value placed directly in head position (built programmatically)
    if isinstance(head, Closure):
        return apply(head, tail, env, evaluate)

    if isinstance(head, (Symbol, list)):
        fn = evaluate(head, env)
        if not isinstance(fn, CALLABLES):
            raise LemonNonCallableValue(fn)
        return apply(fn, tail, env, evaluate)

    raise LemonNonCallableValue(head)


def evaluate_program(exprs: Iterable[SExpression], env: Environment) -> LispValue:
    """Evaluate expressions in order, returning the last value (Void if none)."""
    result: LispValue = Void
    for expr in exprs:
        result = evaluate(expr, env)
    return result
