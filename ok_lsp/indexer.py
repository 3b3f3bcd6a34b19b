from __future__ import annotations

"""
Lightweight indexer for ok source files without evaluating code.

We scan for top-level forms and build an index for:
- definitions: (let name ...), where (let name (func ...)) is a function
- delimiter balance, as computed for the interactive reader
- the first syntax error reported by the parser, with its position

The scan is tolerant: it works from whatever tokens lex before the first bad
character, so partial buffers still yield symbols.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ok.errors import OkSyntaxError
from ok.reader.balance import analyze_balance
from ok.reader.parser import CLOSE, OPEN, Token, lex, parse


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    # 0-based positions of '(' never closed
    unclosed: List[tuple[int, int]] = field(default_factory=list)
    syntax_error: Optional[SyntaxProblem] = None


def _lex_tolerant(text: str) -> List[Token]:
    tokens: List[Token] = []
    try:
        for tok in lex(text, "<document>"):
            tokens.append(tok)
    except OkSyntaxError:
        pass
    return tokens


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex(paren_balance=analyze_balance(text))
    tokens = _lex_tolerant(text)

    try:
        parse("<document>", text)
    except OkSyntaxError as ex:
        idx.syntax_error = SyntaxProblem(ex.message, ex.line - 1, ex.column - 1)

    opens: List[Token] = []
    for i, tok in enumerate(tokens):
        if tok.type == OPEN:
            opens.append(tok)
            # (let name value) at top level
            if len(opens) == 1 and i + 2 < len(tokens):
                head, name = tokens[i + 1], tokens[i + 2]
                if head.value == "let" and name.type == "ident":
                    kind = "var"
                    if i + 4 < len(tokens) and tokens[i + 3].type == OPEN and tokens[i + 4].value == "func":
                        kind = "function"
                    idx.symbols[name.value] = SymbolDef(
                        name=name.value, kind=kind, line=name.line - 1, col=name.column - 1
                    )
        elif tok.type == CLOSE and opens:
            opens.pop()
    idx.unclosed = [(t.line - 1, t.column - 1) for t in opens]
    return idx


# Signatures of the built-in forms and host operators for hover/completion
BUILTIN_SIGNATURES: Dict[str, str] = {
    "func": "(func param... body)",
    "switch": "(switch cond body ...)",
    "let": "(let name value)",
    "id": "(id x)",
    "list": "(list x...)",
    "+": "(+ n...)",
    "-": "(- n m...)",
    "*": "(* n...)",
    "/": "(/ n m...)",
    "%": "(% n m...)",
    "=": "(= x y...)",
    "!=": "(!= x y...)",
    "<": "(< n m...)",
    ">": "(> n m...)",
    "<=": "(<= n m...)",
    ">=": "(>= n m...)",
    "!": "(! x)",
    "print": "(print x...)",
}
