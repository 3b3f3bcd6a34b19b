"""Built-in functions and the default environment for ok.

The default environment is deliberately small: the three macro forms (func,
switch, let) plus two builtins (id, list). Operators are supplied by the
embedding host; see ok.builtin.host_builtin for the set the CLI installs.
"""
from __future__ import annotations

from ok import OkValue
from ok.evaluation.special_forms import SPECIAL_FORMS
from ok.types.environment import Env, Scope
from ok.types.native import Builtin
from ok.types.nil import Nil
from ok.types.value import Array


def identity(env: Env, args: list[OkValue]) -> OkValue:
    """Return the first argument, or nil when called with none."""
    if not args:
        return Nil
    return args[0]


def make_list(env: Env, args: list[OkValue]) -> Array:
    """Collect every argument, in order, into an array."""
    return Array(tuple(args))


BUILTINS: dict[str, Builtin] = {
    "id": Builtin("id", identity),
    "list": Builtin("list", make_list),
}


def base_scope() -> Scope:
    """Return a fresh scope holding the built-in forms."""
    scope: Scope = {}
    scope.update(SPECIAL_FORMS)
    scope.update(BUILTINS)
    return scope


def register(env: Env) -> None:
    """Install the built-in forms into the innermost scope of `env`."""
    env.update(base_scope())


def default_environment(max_depth: int | None = None) -> Env:
    """Build a fresh two-scope environment: built-ins, then an empty user scope.

    Every call returns a new stack; sessions never share one.
    """
    return Env([base_scope(), {}], max_depth=max_depth)
