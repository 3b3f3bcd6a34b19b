"""User-defined function values for ok."""

from __future__ import annotations

import hashlib
from io import StringIO

from ok import OkNode, OkValue
from ok.types.environment import Env
from ok.types.value import Value

# Longest body text shown verbatim when rendering a function
MAX_CODE_DISPLAY = 32


class Func(Value):
    """A first-class function: ordered parameter names and a body node.

    There is no captured environment. Calling a Func pushes one fresh scope on
    top of the caller's stack, so free names in the body resolve against
    whatever is visible at call time.
    """

    __slots__ = ("params", "code")

    type_name = "func"
    is_callable = True

    def __init__(self, params: list[str] | tuple[str, ...], code: OkNode):
        self.params: tuple[str, ...] = tuple(params)
        self.code: OkNode = code

    def call(self, env: Env, args: list[OkValue]) -> OkValue:
        """Bind the first len(args) parameters positionally and evaluate the body.

        Parameters without a matching argument stay unbound in the new scope;
        surplus arguments are ignored.
        """
        frame = dict(zip(self.params, args))
        with env.scope(frame):
            return self.code.eval(env)

    def render(self) -> str:
        with StringIO() as buffer:
            buffer.write("((")
            buffer.write(", ".join(self.params))
            buffer.write(") => ")
            code = f"{{ {self.code} }}"
            if len(code) > MAX_CODE_DISPLAY:
                code = hashlib.sha256(code.encode("utf-8")).hexdigest()[:MAX_CODE_DISPLAY]
            buffer.write(code)
            buffer.write(f")@{self.type_name}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Func({list(self.params)!r}, {self.code!r})"
