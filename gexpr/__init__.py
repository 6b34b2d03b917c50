# Core type aliases for the G-Expression data model.
# Expressions are frozen dataclasses (gexpr.types.expression); runtime values are
# plain Python objects (int, float, bool, str, None) plus Symbol, GList, Closure
# and Builtin.
#
# Naming guidance:
# - Expression: use in codec/printer/evaluator code for G-Expression nodes.
# - Value:      use in evaluator/runtime code for unfurled values.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Native function carried by a Builtin: receives the positional argument list
NativeFn = Callable[[list], Value]

__version__ = "0.1.0"
