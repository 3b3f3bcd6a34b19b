"""Runtime values for ok.

Every value is one of a closed set of variants sharing the `Value` contract:
a stable type name, a human-readable rendering (used for REPL echo and error
messages), truthiness, and a nil test distinct from truthiness. Two class-level
capability flags tell the call protocol what a value can do when it appears in
callee position.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ok.errors import OkTypeError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Value:
    """Base class of every runtime value."""

    __slots__ = ()

    type_name: str = "value"
    # Func and Builtin receive evaluated arguments; Macro receives raw nodes.
    is_callable: bool = False
    is_expander: bool = False

    def render(self) -> str:
        raise NotImplementedError

    def truthy(self) -> bool:
        return True

    def is_nil(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return self.truthy()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    type_name = "bool"

    def render(self) -> str:
        return f"{'true' if self.value else 'false'}@{self.type_name}"

    def truthy(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    """A signed 64-bit integer."""

    value: int

    type_name = "number"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise OkTypeError(f"number payload must be an int, got {self.value!r}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OkTypeError(f"number {self.value} does not fit in 64 bits")

    @classmethod
    def wrap(cls, value: int) -> Number:
        """Build a Number, wrapping `value` into the signed 64-bit range."""
        value &= (1 << 64) - 1
        if value > INT64_MAX:
            value -= 1 << 64
        return cls(value)

    def render(self) -> str:
        return f"{self.value}@{self.type_name}"

    def truthy(self) -> bool:
        return self.value != 0


@dataclass(frozen=True)
class String(Value):
    value: str

    type_name = "string"

    def render(self) -> str:
        return f"{json.dumps(self.value, ensure_ascii=False)}@{self.type_name}"

    def truthy(self) -> bool:
        return self.value != ""


@dataclass(frozen=True)
class Array(Value):
    """Fixed-length ordered sequence of values, built by `list`."""

    items: tuple[Value, ...] = ()

    type_name = "array"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def render(self) -> str:
        return f"[{' '.join(item.render() for item in self.items)}]@{self.type_name}"

    def truthy(self) -> bool:
        return len(self.items) != 0
