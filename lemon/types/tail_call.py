from __future__ import annotations

from dataclasses import dataclass, field

from lemon import SExpression
from lemon.types.closure import Closure
from lemon.types.void import Void


@dataclass(eq=True)
class TailCall:
    """A self-recursive named closure rewritten into a loop.

    `closure` keeps the parameters and environment with the trailing self-call
    removed from the body. Each iteration re-evaluates `updates` as the new
    arguments. The loop ends once `break_condition` evaluates to anything other
    than boolean false, and `return_expr` then produces the result.
    """

    closure: Closure
    updates: list[SExpression] = field(default_factory=list)
    break_condition: SExpression = False
    return_expr: SExpression = Void

    @property
    def name(self):
        return self.closure.name

    def __repr__(self) -> str:
        return repr(self.closure)
