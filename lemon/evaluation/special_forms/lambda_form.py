from lemon import EvaluatorFn
from lemon import SExpression, LispValue
from lemon.errors import LemonEmptyList, LemonTypeError
from lemon.types.closure import Closure
from lemon.types.environment import Environment
from lemon.types.symbol import Symbol


def parse_params(params: list[SExpression]) -> list[Symbol]:
    """Check that every formal parameter is a Symbol."""
    for p in params:
        if not isinstance(p, Symbol):
            raise LemonTypeError("symbol", p)
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body...)
    (lambda param body...)   ; single-parameter shorthand
    Builds an anonymous closure over `env`; never tail-call optimized since it has no name.
    """
    if not tail:
        raise LemonEmptyList("lambda requires a parameter list and a body")

    head, *body = tail
    if isinstance(head, list):
        params = parse_params(head)
    elif isinstance(head, Symbol):
        params = [head]
    else:
        raise LemonTypeError("symbol or list", head)

    if not body:
        raise LemonEmptyList("lambda requires at least one body expression")

    return Closure(None, params, body, env)
