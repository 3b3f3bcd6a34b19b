"""Call protocol for ok.

This module holds the one decision table for evaluating a call:

- The callee is evaluated first (by the Call node) to a value `fn`.
- If `fn` is an expander (a Macro) it receives the raw, unevaluated argument
  nodes and returns a replacement node, which is evaluated against the same
  environment. Arguments are never pre-evaluated for an expander.
- Otherwise every argument is evaluated left to right, stopping at the first
  error. If `fn` is callable (Func or Builtin) it is invoked with the values;
  anything else is not callable.

Keeping this in one place prevents the node model, the builtins and the host
from growing diverging ideas of what a call means.
"""

from __future__ import annotations

from typing import Sequence

from ok import OkNode, OkValue
from ok.errors import OkNotCallable
from ok.types.environment import Env


def expand(fn: OkValue, args: Sequence[OkNode], env: Env) -> OkNode:
    """Expand a macro call into its replacement node without evaluating it."""
    return fn.expand(env, list(args))


def apply(fn: OkValue, args: list[OkValue], env: Env) -> OkValue:
    """Invoke a callable value with already-evaluated arguments."""
    if not fn.is_callable:
        raise OkNotCallable(fn)
    return fn.call(env, args)


def call(fn: OkValue, args: Sequence[OkNode], env: Env) -> OkValue:
    """Evaluate a call whose callee has already been resolved to `fn`."""
    if fn.is_expander:
        return expand(fn, args, env).eval(env)
    values = [arg.eval(env) for arg in args]
    return apply(fn, values, env)
