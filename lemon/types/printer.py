"""Lisp-style rendering of runtime values."""

from __future__ import annotations

from lemon import LispValue
from lemon.types.closure import Closure
from lemon.types.internal_function import InternalFunction
from lemon.types.keyword import Keyword
from lemon.types.quoted import Quoted
from lemon.types.symbol import Symbol
from lemon.types.tail_call import TailCall
from lemon.types.void import VoidType


def _procedure(name: str | None) -> str:
    return f"#<procedure:{name}>" if name is not None else "#<procedure>"


def to_string(value: LispValue) -> str:
    match value:
        case VoidType():
            return "#<void>"
        case bool():
            return "#t" if value else "#f"
        case int() | float():
            return repr(value)
        case Symbol():
            return value.id
        case str():
            return f'"{value}"'
        case list():
            return "(" + " ".join(to_string(v) for v in value) + ")"
        case Quoted(value=inner):
            return "'" + to_string(inner)
        case Keyword():
            return f"#<keyword:{value.value}>"
        case Closure() | TailCall():
            return _procedure(value.name)
        case InternalFunction():
            return _procedure(value.name)
    return repr(value)
