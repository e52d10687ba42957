from lemon.types.void import Void, VoidType
from lemon.types.symbol import Symbol
from lemon.types.keyword import Keyword
from lemon.types.quoted import Quoted
from lemon.types.environment import Environment
from lemon.types.closure import Closure
from lemon.types.tail_call import TailCall
from lemon.types.internal_function import InternalFunction

__all__ = [
    "Void",
    "VoidType",
    "Symbol",
    "Keyword",
    "Quoted",
    "Environment",
    "Closure",
    "TailCall",
    "InternalFunction",
]
