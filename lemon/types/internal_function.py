from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from lemon import LispValue

if TYPE_CHECKING:
    from lemon.types.environment import Environment

# Builtins receive the caller's environment and the fully evaluated arguments.
BuiltinFn = Callable[["Environment", list[LispValue]], LispValue]


@dataclass(frozen=True)
class InternalFunction:
    """A builtin, identified by name and implemented in Python."""

    name: str
    function: BuiltinFn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.function(env, args)

    def __repr__(self) -> str:
        return f"#<procedure:{self.name}>"
