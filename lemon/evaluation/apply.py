"""Application engine for Lemon.

This module centralizes function application semantics for the interpreter:
- Closures: arity check, fresh child scope over the captured environment,
  positional binding, then the body in sequence.
- TailCalls: the same binding, then an iterative loop in place of the
  self-recursive call, so iteration count never grows the Python stack.
- InternalFunctions: evaluated arguments are handed to the Python builtin.

Arguments are always evaluated left to right in the caller's environment.
"""

from __future__ import annotations

from lemon import LispValue, SExpression, EvaluatorFn
from lemon.errors import LemonArityError, LemonEmptyList, LemonNonCallableValue
from lemon.types.closure import Closure
from lemon.types.environment import Environment
from lemon.types.internal_function import InternalFunction
from lemon.types.symbol import Symbol
from lemon.types.tail_call import TailCall


def evaluate_args(
    arg_exprs: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    return [evaluate_fn(arg, env) for arg in arg_exprs]


def check_arity(closure: Closure, provided: int) -> None:
    if closure.arity != provided:
        raise LemonArityError(closure.arity, provided, closure.name)


def bind_arguments(scope: Environment, params: list[Symbol], args: list[LispValue]) -> None:
    for param, arg in zip(params, args):
        scope.set(param, arg)


def run_body(
    body: list[SExpression], scope: Environment, evaluate_fn: EvaluatorFn
) -> None:
    """Evaluate every expression in `body` for its side effects."""
    for expr in body:
        evaluate_fn(expr, scope)


def apply_closure(
    closure: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Closure to already evaluated arguments."""
    check_arity(closure, len(args))
    if not closure.body:
        raise LemonEmptyList(f"closure {closure.name or '<anonymous>'} has an empty body")

    scope = Environment(outer=closure.environment)
    bind_arguments(scope, closure.params, args)

    *preceding, last = closure.body
    run_body(preceding, scope, evaluate_fn)
    return evaluate_fn(last, scope)


def apply_tail_call(
    tail_call: TailCall, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Run a self-tail-recursive function as a loop.

    The residual body runs once on the initial arguments. Each iteration
    then evaluates every update against the current bindings, rebinds the
    parameters, runs the residual body and tests the break condition.
    All update expressions see the previous iteration's bindings.
    """
    closure = tail_call.closure
    check_arity(closure, len(args))

    scope = Environment(outer=closure.environment)
    bind_arguments(scope, closure.params, args)

    run_body(closure.body, scope, evaluate_fn)

    while True:
        next_args = evaluate_args(tail_call.updates, scope, evaluate_fn)
        bind_arguments(scope, closure.params, next_args)
        run_body(closure.body, scope, evaluate_fn)
        if evaluate_fn(tail_call.break_condition, scope) is not False:
            return evaluate_fn(tail_call.return_expr, scope)


def apply(
    fn: LispValue,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a callable value to unevaluated argument expressions from `env`."""
    if isinstance(fn, Closure):
        check_arity(fn, len(arg_exprs))
        return apply_closure(fn, evaluate_args(arg_exprs, env, evaluate_fn), evaluate_fn)
    if isinstance(fn, TailCall):
        check_arity(fn.closure, len(arg_exprs))
        return apply_tail_call(fn, evaluate_args(arg_exprs, env, evaluate_fn), evaluate_fn)
    if isinstance(fn, InternalFunction):
        return fn(env, evaluate_args(arg_exprs, env, evaluate_fn))
    raise LemonNonCallableValue(fn)
