from gexpr.types.symbol import Symbol
from gexpr.types.values import GList, values_equal, is_number
from gexpr.types.pattern import LiteralPattern, ReferencePattern, ElsePattern, ELSE, Pattern
from gexpr.types.expression import (
    Literal,
    Reference,
    Application,
    Vector,
    Lambda,
    Fix,
    Match,
    Expression,
    EXPRESSION_TYPES,
)
from gexpr.types.environment import Environment
from gexpr.types.closure import Closure, Builtin, FixUnfolding
