"""Runtime environment for Lemon.

An Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The `outer` link is an owning reference,
so a parent lives at least as long as any child scope built on it. Closures
refer back to their defining Environment only weakly (see
lemon.types.closure), which is why Environment supports weak references.
"""

from __future__ import annotations

from typing import Optional

from lemon import LispValue
from lemon.errors import LemonUndefinedVariable
from lemon.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Look up `name` from the innermost scope outward.

        Returns None when no scope binds it. Lemon values are never None.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this (innermost) scope, replacing any existing binding here."""
        self.vars[name] = value

    def update(self, name: Symbol, value: LispValue) -> None:
        """Replace the nearest existing binding for `name`.

        Raises LemonUndefinedVariable if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LemonUndefinedVariable(str(name))
        env.vars[name] = value

    def __repr__(self) -> str:
        """Every frame from this one outward, values in Lisp notation."""
        from lemon.types.printer import to_string

        frames = []
        env: Optional[Environment] = self
        while env is not None:
            bindings = ", ".join(f"{name}: {to_string(value)}" for name, value in env.vars.items())
            frames.append("{" + bindings + "}")
            env = env.outer
        return f"<Environment chain: {' -> '.join(frames)}>"
