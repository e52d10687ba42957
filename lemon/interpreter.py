from __future__ import annotations

import logging
import sys
from typing import Optional

from lemon import SExpression, LispValue
from lemon import config
from lemon.builtin.env_builtin import make_global_env
from lemon.evaluation.evaluator import evaluate, evaluate_program
from lemon.reader.parser import parse
from lemon.types.environment import Environment


class Interpreter:
    """
    Reads and evaluates Lemon source text.
    Maintains one top-level Environment across calls, so definitions persist.
    """

    def __init__(self, env: Optional[Environment] = None):
        self._logger = logging.getLogger("Interpreter")
        # The interpreter is the owner of the top-level scope; closures only refer to it weakly.
        self.env: Environment = env if env is not None else make_global_env()

        limit = config.get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            self._logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

    def read(self, code: str) -> list[SExpression]:
        return parse(code)

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`, returning the value of the last one.

        Raises a LemonError subclass on the first failure. Bindings made by
        earlier expressions remain in place.
        """
        exprs = self.read(code)
        self._logger.debug("evaluating %d expression(s)", len(exprs))
        return evaluate_program(exprs, self.env)
