# Core type aliases for the ok language.
# Runtime values are instances of ok.types.value.Value and syntax is a tree of
# ok.types.nodes.Node. The aliases below are kept loose so that modules low in
# the import graph can annotate without importing the concrete classes.
#
# Naming guidance:
# - OkNode:  Use in reader/macro code to denote unevaluated syntax.
# - OkValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
OkValue = Any
# Syntax tree alias
OkNode = Any

# Native builtin: (env, evaluated args) -> value
BuiltinFn = Callable[..., OkValue]
# Native macro: (env, raw argument nodes) -> replacement node
MacroFn = Callable[..., OkNode]
