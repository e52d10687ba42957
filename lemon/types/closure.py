"""Closure representation for Lemon."""

from __future__ import annotations

import weakref
from typing import Optional

from lemon import SExpression
from lemon.errors import LemonInvalidClosure
from lemon.types.environment import Environment
from lemon.types.symbol import Symbol


class Closure:
    """A function value: optional name, parameters, body and defining environment.

    The defining environment is held through a weak reference. A named closure
    is stored in the very environment it captures, and a strong reference would
    make that a cycle. Equality ignores the environment.
    """

    __slots__ = ("name", "params", "body", "_env_ref")

    def __init__(
        self,
        name: Optional[str],
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
    ):
        self.name: Optional[str] = name
        self.params: list[Symbol] = list(params)
        self.body: list[SExpression] = list(body)
        self._env_ref: weakref.ref[Environment] = weakref.ref(env)

    @property
    def environment(self) -> Environment:
        """The defining environment; raises LemonInvalidClosure once it is gone."""
        env = self._env_ref()
        if env is None:
            raise LemonInvalidClosure(self.name)
        return env

    @property
    def arity(self) -> int:
        return len(self.params)

    def with_body(self, body: list[SExpression]) -> Closure:
        """Copy of this closure with a different body and the same environment reference."""
        clone = Closure.__new__(Closure)
        clone.name = self.name
        clone.params = list(self.params)
        clone.body = list(body)
        clone._env_ref = self._env_ref
        return clone

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Closure)
            and self.name == other.name
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None  # mutable body list, structural equality

    def __repr__(self) -> str:
        if self.name is None:
            return "#<procedure>"
        return f"#<procedure:{self.name}>"
