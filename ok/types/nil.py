from __future__ import annotations

from ok.types.value import Value


class NilType(Value):
    """The absence of a value. Falsy, and the only value that is nil."""

    __slots__ = ()

    type_name = "nil"

    def render(self) -> str:
        return "nil"

    def truthy(self) -> bool:
        return False

    def is_nil(self) -> bool:
        return True

    def __repr__(self):
        return "Nil"

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
