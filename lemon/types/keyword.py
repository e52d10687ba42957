from __future__ import annotations

from enum import Enum


class Keyword(Enum):
    """The fixed set of special forms."""

    DEFINE = "define"
    LAMBDA = "lambda"
    IF = "if"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Keyword | None:
        try:
            return cls(name)
        except ValueError:
            return None
