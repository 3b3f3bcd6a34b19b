"""Command line entry point for ok.

    ok [FILES]...          evaluate files in order against one environment
    ok                     evaluate standard input
    ok --repl [FILES]...   evaluate files, then start an interactive session
"""

from __future__ import annotations

import logging
import sys

import click

from ok.builtin.env_builtin import default_environment
from ok.builtin.host_builtin import register_host_builtins
from ok.config import get_log_level
from ok.errors import OkError
from ok.evaluation.evaluator import eval_stream
from ok.repl import Repl
from ok.types.environment import Env

logger = logging.getLogger("ok")

_VERBOSITY = {0: None, 1: logging.INFO, 2: logging.DEBUG}


def host_environment() -> Env:
    """Default environment plus the host operators."""
    env = default_environment()
    register_host_builtins(env)
    return env


def _configure_logging(verbose: int) -> None:
    level = _VERBOSITY.get(min(verbose, 2)) or get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.command()
@click.argument('files', nargs=-1, type=click.File('r'))
@click.option('--repl', '-i', is_flag=True, help='Start an interactive session after evaluating files.')
@click.option('--verbose', '-v', default=0, count=True, help='Increase logging verbosity (-v info, -vv debug).')
def main(files: tuple, repl: bool, verbose: int):
    _configure_logging(verbose)
    env = host_environment()

    if files:
        inputs = [(f.name, f) for f in files]
    elif not repl:
        inputs = [("<stdin>", click.get_text_stream('stdin'))]
    else:
        inputs = []

    for name, stream in inputs:
        try:
            eval_stream(name, stream, env)
        except OkError as ex:
            logger.error("%s", ex)
            sys.exit(1)

    if repl:
        Repl(env).run()


if __name__ == "__main__":
    main()
