from ok import OkNode
from ok.types.environment import Env
from ok.types.nodes import Branch, Switch


def switch_form(env: Env, tail: list[OkNode]) -> OkNode:
    """
    (switch cond1 body1 cond2 body2 ...)
    Pairs consecutive arguments into branches; a trailing unpaired condition
    gets a nil body. Nothing is evaluated here, the Switch node picks a
    branch lazily when it is evaluated.
    """
    branches = []
    for i in range(0, len(tail), 2):
        if i + 1 < len(tail):
            branches.append(Branch(tail[i], tail[i + 1]))
        else:
            branches.append(Branch(tail[i]))
    return Switch(tuple(branches))
