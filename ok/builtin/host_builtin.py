"""Operators installed by the ok command line host.

The core default environment ships no arithmetic or comparison; a host adds
whatever it needs with `register_host_builtins`. Arithmetic is on signed
64-bit integers and wraps on overflow, division truncates toward zero.
"""
from __future__ import annotations

import sys
from functools import reduce
from typing import Callable, TextIO

from ok import OkValue
from ok.errors import OkArityError, OkRuntimeError, OkTypeError
from ok.types.environment import Env
from ok.types.native import Builtin
from ok.types.nil import Nil
from ok.types.value import Bool, Number, String


def _numbers(name: str, args: list[OkValue]) -> list[int]:
    out = []
    for arg in args:
        if not isinstance(arg, Number):
            raise OkTypeError(f"{name} expects numbers, got {arg}")
        out.append(arg.value)
    return out


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Env, args: list[OkValue]) -> Number:
    """Sum of all arguments; (+) is 0."""
    return Number.wrap(sum(_numbers("+", args)))


def sub(env: Env, args: list[OkValue]) -> Number:
    """Subtract the rest from the first; unary negation for one argument."""
    nums = _numbers("-", args)
    if not nums:
        raise OkArityError("- requires at least 1 argument")
    if len(nums) == 1:
        return Number.wrap(-nums[0])
    return Number.wrap(nums[0] - sum(nums[1:]))


def mul(env: Env, args: list[OkValue]) -> Number:
    """Product of all arguments; (*) is 1."""
    return Number.wrap(reduce(lambda a, b: a * b, _numbers("*", args), 1))


def _divider(name: str, op: Callable[[int, int], int]):
    def divide(env: Env, args: list[OkValue]) -> Number:
        nums = _numbers(name, args)
        if len(nums) < 2:
            raise OkArityError(f"{name} requires at least 2 arguments")
        result = nums[0]
        for n in nums[1:]:
            if n == 0:
                raise OkRuntimeError("division by zero")
            result = op(result, n)
        return Number.wrap(result)
    return divide


div = _divider("/", _trunc_div)
mod = _divider("%", _trunc_mod)


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Env, args: list[OkValue]) -> Bool:
    """True if all arguments are structurally equal (or there are fewer than two)."""
    return Bool(all(a == b for a, b in zip(args, args[1:])))


def not_equals(env: Env, args: list[OkValue]) -> Bool:
    return Bool(not equals(env, args).value)


def _comparison(name: str, op: Callable[[int, int], bool]):
    def compare(env: Env, args: list[OkValue]) -> Bool:
        nums = _numbers(name, args)
        if len(nums) < 2:
            raise OkArityError(f"{name} requires at least 2 arguments")
        return Bool(all(op(a, b) for a, b in zip(nums, nums[1:])))
    return compare


less = _comparison("<", lambda a, b: a < b)
greater = _comparison(">", lambda a, b: a > b)
less_equal = _comparison("<=", lambda a, b: a <= b)
greater_equal = _comparison(">=", lambda a, b: a >= b)


def logical_not(env: Env, args: list[OkValue]) -> Bool:
    if len(args) != 1:
        raise OkArityError(f"! takes 1 argument, got {len(args)}")
    return Bool(not args[0].truthy())


# -------------------------------
# Output
# -------------------------------
def make_print(stream: TextIO | None = None):
    """Build a print builtin writing to `stream` (stdout when None, looked up per call)."""
    def print_(env: Env, args: list[OkValue]) -> OkValue:
        out = stream if stream is not None else sys.stdout
        out.write(" ".join(a.value if isinstance(a, String) else a.render() for a in args))
        out.write("\n")
        return Nil
    return print_


def host_builtins(stream: TextIO | None = None) -> dict[str, Builtin]:
    table = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "%": mod,
        "=": equals,
        "!=": not_equals,
        "<": less,
        ">": greater,
        "<=": less_equal,
        ">=": greater_equal,
        "!": logical_not,
        "print": make_print(stream),
    }
    return {name: Builtin(name, fn) for name, fn in table.items()}


def register_host_builtins(env: Env, stream: TextIO | None = None) -> None:
    """Install the host operators into the base (outermost) scope of `env`."""
    env.scopes[0].update(host_builtins(stream))
