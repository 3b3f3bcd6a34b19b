from ok import OkNode
from ok.errors import OkArityError, OkTypeError
from ok.types.environment import Env
from ok.types.nodes import Assign, Ref


def let_form(env: Env, tail: list[OkNode]) -> OkNode:
    if len(tail) != 2:
        raise OkArityError(f"let takes 2 arguments, got {len(tail)}")
    name, value = tail
    if not isinstance(name, Ref):
        raise OkTypeError(f"expected parameter name, got {name}")
    return Assign(name.name, value)
