from __future__ import annotations

from dataclasses import dataclass

from lemon import LispValue


@dataclass(frozen=True)
class Quoted:
    """A value shielded from evaluation: 'expr evaluates to expr."""

    value: LispValue
