# Core type aliases for Lemon's data model.
# Runtime values are plain Python types where one fits (int, float, bool, str, list)
# and small classes in lemon.types for the rest (Symbol, Quoted, Keyword, Closure, ...).
#
# Naming guidance:
# - SExpression: Use in reader/optimizer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; the value set is closed by convention, not by the type system.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue, since code is data)
SExpression = LispValue

# Evaluator function type: passed into special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
