"""Opaque native values: builtins receive evaluated arguments, macros receive
raw argument nodes and return a replacement node.

Neither carries introspectable state beyond a display name; two natives are
equal only if they are the same object.
"""

from __future__ import annotations

from ok import BuiltinFn, MacroFn, OkNode, OkValue
from ok.types.value import Value


class Builtin(Value):
    __slots__ = ("name", "fn")

    type_name = "builtin"
    is_callable = True

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def call(self, env, args: list[OkValue]) -> OkValue:
        return self.fn(env, args)

    def render(self) -> str:
        return f"<{self.name}>@{self.type_name}"

    def __repr__(self):
        return f"Builtin({self.name!r})"


class Macro(Value):
    __slots__ = ("name", "fn")

    type_name = "macro"
    is_expander = True

    def __init__(self, name: str, fn: MacroFn):
        self.name = name
        self.fn = fn

    def expand(self, env, args: list[OkNode]) -> OkNode:
        return self.fn(env, args)

    def render(self) -> str:
        return f"<{self.name}>@{self.type_name}"

    def __repr__(self):
        return f"Macro({self.name!r})"
