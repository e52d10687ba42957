"""Static self-tail-call optimization.

When a named function is defined, its final body expression is inspected once.
Two shapes are rewritten into a TailCall that the evaluator runs as a loop:

    (define (f x) ... (f next-x))                     ; direct self-call
    (define (f x) ... (if c (f next-x) done))         ; self-call in either branch
    (define (f x) ... (if c done (f next-x)))

Anything else, including self-calls that are not in tail position, is left as
an ordinary Closure and recurses on the Python stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from lemon import LispValue, SExpression
from lemon import config
from lemon.builtin.env_builtin import NEGATE
from lemon.types.closure import Closure
from lemon.types.keyword import Keyword
from lemon.types.symbol import Symbol
from lemon.types.tail_call import TailCall
from lemon.types.void import Void

_logger = logging.getLogger("TailCallOptimizer")


@dataclass
class TailCallInfo:
    updates: list[SExpression]
    break_condition: SExpression = False
    return_expr: SExpression = Void

    @property
    def is_direct(self) -> bool:
        return self.break_condition is False


def self_call_args(expr: SExpression, name: str) -> Optional[list[SExpression]]:
    """Return the argument expressions if `expr` is `(name args...)`."""
    if isinstance(expr, list) and expr and expr[0] == Symbol(name):
        return expr[1:]
    return None


def detect_tail_call(expr: SExpression, name: str) -> Optional[TailCallInfo]:
    updates = self_call_args(expr, name)
    if updates is not None:
        return TailCallInfo(updates)

    if isinstance(expr, list) and len(expr) == 4 and expr[0] is Keyword.IF:
        _, condition, then_expr, else_expr = expr

        # loop while the condition holds, leave through the else branch
        updates = self_call_args(then_expr, name)
        if updates is not None:
            return TailCallInfo(updates, [NEGATE, condition], else_expr)

        # loop while the condition fails, leave through the then branch
        updates = self_call_args(else_expr, name)
        if updates is not None:
            return TailCallInfo(updates, condition, then_expr)

    return None


def optimize_closure(closure: Closure) -> LispValue:
    """Rewrite a named, self-tail-recursive closure into a TailCall.

    Returns the closure unchanged when it is anonymous or its last body
    expression is not a self-call in tail position.
    """
    if closure.name is None or not closure.body:
        return closure

    *preceding, last = closure.body
    info = detect_tail_call(last, closure.name)
    if info is None:
        return closure

    if info.is_direct:
        if config.warn_on_unbounded_loops():
            _logger.warning(
                "%s calls itself unconditionally in tail position; it will loop forever",
                closure.name,
            )
    else:
        _logger.debug("%s rewritten into a conditional tail-call loop", closure.name)

    return TailCall(
        closure=closure.with_body(preceding),
        updates=info.updates,
        break_condition=info.break_condition,
        return_expr=info.return_expr,
    )
