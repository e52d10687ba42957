from lemon import EvaluatorFn
from lemon import SExpression, LispValue
from lemon.errors import LemonArityError, LemonEmptyList, LemonTypeError
from lemon.types.closure import Closure
from lemon.types.environment import Environment
from lemon.types.symbol import Symbol
from lemon.types.void import Void
from lemon.evaluation.special_forms.lambda_form import parse_params
from lemon.evaluation.tail_call_optimizer import optimize_closure


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)
    Both shapes bind in the current scope and evaluate to Void.
    """
    if not tail:
        raise LemonEmptyList("define requires a name and a value")

    head, *rest = tail

    if isinstance(head, Symbol):
        if len(rest) != 1:
            raise LemonArityError(2, len(tail), "define")
        env.set(head, evaluate_fn(rest[0], env))
        return Void

    if isinstance(head, list):
        if not head:
            raise LemonEmptyList("define requires a function name")
        name, *params = head
        if not isinstance(name, Symbol):
            raise LemonTypeError("symbol", name)
        if not rest:
            raise LemonEmptyList(f"define of {name} requires at least one body expression")
        closure = Closure(name.id, parse_params(params), rest, env)
        env.set(name, optimize_closure(closure))
        return Void

    raise LemonTypeError("symbol or list", head)
