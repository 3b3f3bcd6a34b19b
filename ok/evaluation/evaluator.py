"""Evaluation entry points for ok.

`evaluate` runs an already-parsed tree; `eval_source` reads text with the
reader and evaluates the resulting root node.

Every ok call costs a dozen or so interpreter frames, so `evaluate` raises
the interpreter recursion limit to cover the environment's `max_depth`
before running. Anything that still overflows surfaces as OkStackExhausted.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ok import OkNode, OkValue
from ok.errors import OkStackExhausted
from ok.reader.parser import parse
from ok.types.environment import Env

logger = logging.getLogger(__name__)

# Interpreter frames budgeted per ok call scope
FRAMES_PER_CALL = 16
_FRAME_MARGIN = 500
# Upper bound on the interpreter recursion limit; the C stack runs out beyond it
_MAX_RECURSION_LIMIT = 20_000


def ensure_recursion_limit(max_depth: int) -> int:
    """Raise (never lower) the interpreter recursion limit for `max_depth` scopes."""
    wanted = min(max_depth * FRAMES_PER_CALL + _FRAME_MARGIN, _MAX_RECURSION_LIMIT)
    current = sys.getrecursionlimit()
    if current < wanted:
        logger.debug("raising recursion limit from %d to %d", current, wanted)
        sys.setrecursionlimit(wanted)
        return wanted
    return current


def evaluate(node: OkNode, env: Env) -> OkValue:
    """Evaluate `node` against `env` and return the resulting value."""
    ensure_recursion_limit(env.max_depth)
    try:
        return node.eval(env)
    except RecursionError:
        raise OkStackExhausted(
            f"interpreter stack exhausted below the call depth limit of {env.max_depth}"
        ) from None


def eval_source(name: str, source: str, env: Env) -> OkValue:
    """Parse `source` (labelled `name` in syntax errors) and evaluate it."""
    node = parse(name, source)
    logger.debug("evaluating %s: %s", name, node)
    return evaluate(node, env)


def eval_stream(name: str, stream: TextIO, env: Env) -> OkValue:
    """Read a whole text stream and evaluate it as one program."""
    return eval_source(name, stream.read(), env)
