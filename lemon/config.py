from __future__ import annotations
import os
from typing import Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def warn_on_unbounded_loops() -> bool:
    return flag_from_env('LEMON_WARN_UNBOUNDED_LOOPS', True)


def get_recursion_limit() -> Optional[int]:
    limit = int_from_env('LEMON_RECURSION_LIMIT')
    # non-positive values are treated as unset
    if limit is not None and limit <= 0:
        return None
    return limit
