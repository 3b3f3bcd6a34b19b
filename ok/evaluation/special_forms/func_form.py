from ok import OkNode
from ok.errors import OkTypeError
from ok.types.environment import Env
from ok.types.func import Func
from ok.types.nodes import Const, NIL_CONST, Ref


def func_form(env: Env, tail: list[OkNode]) -> OkNode:
    """
    (func param1 ... paramN body)
    Every argument but the last must be a bare name; the last is the body,
    kept unevaluated. With no arguments at all the body is nil.
    The result is wrapped in Const so the function value is not re-evaluated.
    """
    if not tail:
        return Const(Func([], NIL_CONST))

    *params, body = tail
    names = []
    for param in params:
        if not isinstance(param, Ref):
            raise OkTypeError(f"expected parameter name, got {param}")
        names.append(param.name)
    return Const(Func(names, body))
