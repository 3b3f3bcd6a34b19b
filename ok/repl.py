"""Interactive read-eval-print loop for ok.

Lines are accumulated until they form a complete program. When a parse fails
and the accumulated text still has unclosed delimiters, the loop keeps the
buffer and prompts for more; any other failure discards the buffer and is
reported.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional

import click

from ok import OkValue
from ok.config import get_history_file
from ok.errors import OkError, OkSyntaxError
from ok.evaluation.evaluator import eval_source
from ok.reader.balance import analyze_balance
from ok.types.environment import Env

readline: Optional[ModuleType]
try:
    # Line editing and history where the platform provides it.
    import readline
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

PROMPT = "ok> "
EDIT_PROMPT = "ok* "
SOURCE_NAME = "<stdin>"


class Repl:
    """Incremental evaluator keeping a partial-input buffer and its balance."""

    def __init__(self, env: Env):
        self.env = env
        self.pending: list[str] = []
        self.balance = 0

    @property
    def prompt(self) -> str:
        if not self.pending:
            return PROMPT
        # indent continuation lines by the number of open delimiters
        return EDIT_PROMPT + "  " * self.balance

    def reset(self) -> None:
        self.pending = []
        self.balance = 0

    def feed(self, line: str) -> Optional[OkValue]:
        """Add one line of input.

        Returns the value of the completed program, or None while the input is
        still incomplete. Errors discard the buffer and propagate.
        """
        lines = self.pending + [line]
        source = " ".join(lines)
        try:
            result = eval_source(SOURCE_NAME, source, self.env)
        except OkSyntaxError:
            balance = analyze_balance(source)
            if balance > 0:
                self.pending, self.balance = lines, balance
                return None
            self.reset()
            raise
        except OkError:
            self.reset()
            raise
        self.reset()
        self.env.set("_", result)
        return result

    def run(
        self,
        read_line: Callable[[str], str] = input,
        echo: Callable[[str], None] = click.echo,
        history_file: Path | None = None,
    ) -> None:
        """Prompt, evaluate and echo until end of input."""
        history = history_file if history_file is not None else get_history_file()
        _load_history(history)
        try:
            while True:
                try:
                    line = read_line(self.prompt)
                except KeyboardInterrupt:
                    echo("")
                    if self.pending:
                        self.reset()
                        continue
                    return
                except EOFError:
                    echo("")
                    return
                try:
                    result = self.feed(line)
                except OkError as ex:
                    logger.debug("repl error", exc_info=True)
                    echo(f"error: {ex}")
                    continue
                if result is not None:
                    echo(str(result))
        finally:
            _save_history(history)


def _load_history(path: Path) -> None:
    if readline is None or not path.exists():
        return
    try:
        readline.read_history_file(str(path))
    except OSError as ex:
        logger.warning("could not read history file %s: %s", path, ex)


def _save_history(path: Path) -> None:
    if readline is None:
        return
    try:
        readline.write_history_file(str(path))
    except OSError as ex:
        logger.warning("could not write history file %s: %s", path, ex)
