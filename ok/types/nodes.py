"""Syntax tree for ok.

Each node evaluates itself against an Env. Errors raised by a sub-evaluation
propagate unchanged; composite nodes stop at the first one and never return
partial results.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ok import OkValue
from ok.evaluation.apply import call
from ok.types.environment import Env
from ok.types.nil import Nil
from ok.types.value import Bool, Number, String


class Node:
    """Base class of every syntax tree node."""

    __slots__ = ()

    def eval(self, env: Env) -> OkValue:
        raise NotImplementedError


def _literal(value: OkValue) -> str:
    match value:
        case Number():
            return str(value.value)
        case String():
            return json.dumps(value.value, ensure_ascii=False)
        case Bool():
            return "true" if value.value else "false"
        case _:
            return str(value)


@dataclass(frozen=True)
class Const(Node):
    value: OkValue

    def eval(self, env: Env) -> OkValue:
        return self.value

    def __str__(self):
        return _literal(self.value)


@dataclass(frozen=True)
class Ref(Node):
    name: str

    def eval(self, env: Env) -> OkValue:
        # Unbound names evaluate to Nil rather than failing.
        value = env.get(self.name)
        return Nil if value is None else value

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Call(Node):
    callee: Node
    args: tuple[Node, ...] = ()

    def eval(self, env: Env) -> OkValue:
        return call(self.callee.eval(env), self.args, env)

    def __str__(self):
        return "(" + " ".join(str(n) for n in (self.callee, *self.args)) + ")"


@dataclass(frozen=True)
class Assign(Node):
    key: str
    value: Node

    def eval(self, env: Env) -> OkValue:
        result = self.value.eval(env)
        env.set(self.key, result)
        return result

    def __str__(self):
        return f"(let {self.key} {self.value})"


NIL_CONST = Const(Nil)


@dataclass(frozen=True)
class Branch:
    cond: Node
    body: Node = NIL_CONST


@dataclass(frozen=True)
class Switch(Node):
    branches: tuple[Branch, ...] = ()

    def eval(self, env: Env) -> OkValue:
        for branch in self.branches:
            if branch.cond.eval(env).truthy():
                return branch.body.eval(env)
        return Nil

    def __str__(self):
        parts = ["switch"]
        for branch in self.branches:
            parts.append(str(branch.cond))
            parts.append(str(branch.body))
        return "(" + " ".join(parts) + ")"


@dataclass(frozen=True)
class Block(Node):
    nodes: tuple[Node, ...] = ()

    def eval(self, env: Env) -> OkValue:
        result = Nil
        for node in self.nodes:
            result = node.eval(env)
        return result

    def __str__(self):
        return " ".join(str(n) for n in self.nodes)
