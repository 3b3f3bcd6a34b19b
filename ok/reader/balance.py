"""Open-delimiter balance for incremental readers.

An interactive loop uses the balance to decide whether a failed parse is
merely incomplete (keep reading lines) or genuinely malformed (report it).
"""

from __future__ import annotations

from ok.errors import OkSyntaxError
from ok.reader.parser import CLOSE, OPEN, lex

# Balance cannot be determined: the text does not lex, or it closes more
# delimiters than it opens.
INDETERMINATE = -1


def analyze_balance(source: str) -> int:
    """Return how many '(' are still open in `source`, or INDETERMINATE."""
    try:
        tokens = list(lex(source, "<internal>"))
    except OkSyntaxError:
        return INDETERMINATE
    balance = 0
    for tok in tokens:
        if tok.type == OPEN:
            balance += 1
        elif tok.type == CLOSE:
            balance -= 1
            if balance < 0:
                return INDETERMINATE
    return balance
