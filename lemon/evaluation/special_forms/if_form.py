from lemon import EvaluatorFn
from lemon import SExpression, LispValue
from lemon.errors import LemonArityError
from lemon.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise LemonArityError(3, len(tail), "if")

    cond_expr, then_expr, else_expr = tail
    # Only boolean false is falsy; 0, "" and () all select the then-branch
    if evaluate_fn(cond_expr, env) is False:
        return evaluate_fn(else_expr, env)
    return evaluate_fn(then_expr, env)
