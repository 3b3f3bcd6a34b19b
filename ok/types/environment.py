"""Runtime environment for ok.

The Env is an ordered stack of scopes, innermost last. Lookups walk the stack
from the innermost scope outwards; definitions and deletions only ever touch
the innermost scope. Function calls push a fresh scope on top of whatever the
stack looks like at call time, so name resolution follows the call stack rather
than a captured definition-time chain.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from ok import OkValue
from ok.config import get_max_depth
from ok.errors import OkStackExhausted

Scope = dict[str, OkValue]


class Env:
    """Stack of scopes mapping names to values."""

    __slots__ = ("scopes", "max_depth", "_base")

    def __init__(self, scopes: Optional[list[Scope]] = None, max_depth: int | None = None):
        # Avoid sharing a default list across instances
        self.scopes: list[Scope] = scopes if scopes is not None else [{}]
        if not self.scopes:
            raise ValueError("an environment needs at least one scope")
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        # Depth is counted from the stack the environment was built with
        self._base: int = len(self.scopes)

    @property
    def depth(self) -> int:
        """Number of scopes pushed on top of the construction-time stack."""
        return len(self.scopes) - self._base

    def get(self, key: str) -> Optional[OkValue]:
        """Return the innermost binding of `key`, or None if it is unbound.

        None is never a language value, so it unambiguously means "not found";
        a name bound to Nil returns Nil.
        """
        for scope in reversed(self.scopes):
            if key in scope:
                return scope[key]
        return None

    def __contains__(self, key: str) -> bool:
        return any(key in scope for scope in self.scopes)

    def set(self, key: str, value: OkValue) -> None:
        """Bind `key` in the innermost scope."""
        self.scopes[-1][key] = value

    def delete(self, key: str) -> None:
        """Remove `key` from the innermost scope; absent keys are ignored."""
        self.scopes[-1].pop(key, None)

    def update(self, mapping: dict[str, OkValue]) -> None:
        """Bulk-bind a mapping of names in the innermost scope."""
        self.scopes[-1].update(mapping)

    def push(self, scope: Optional[Scope] = None) -> None:
        if self.depth >= self.max_depth:
            raise OkStackExhausted(f"maximum call depth of {self.max_depth} exceeded")
        self.scopes.append(scope if scope is not None else {})

    def pop(self) -> Scope:
        if len(self.scopes) <= 1:
            raise RuntimeError("cannot pop the last scope of an environment")
        return self.scopes.pop()

    @contextmanager
    def scope(self, frame: Optional[Scope] = None) -> Iterator[Scope]:
        """Push `frame` for the duration of the block and pop it on every exit path."""
        self.push(frame)
        try:
            yield self.scopes[-1]
        finally:
            self.pop()

    def _write_scope(self, buffer: StringIO, scope: Scope) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope only, with an indicator for outer scopes."""
        with StringIO() as buffer:
            self._write_scope(buffer, self.scopes[-1])
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Env stack: ")
            for i, scope in enumerate(self.scopes):
                if i:
                    buffer.write(" -> ")
                self._write_scope(buffer, scope)
            buffer.write(">")
            return buffer.getvalue()
