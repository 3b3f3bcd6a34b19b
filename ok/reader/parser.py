"""
  ok Reader: Lexer and Parser

- Regex lexer producing position-tagged tokens
- Recursive-descent parser producing ok.types.nodes directly

    program   := (statement ';'?)*
    statement := '(' tag statement* ')' | string | number | tag
    tag       := ident | op

    - empty program       -> Const(Nil)
    - single statement    -> that statement
    - several statements  -> Block
    - (tag args...)       -> Call(Ref(tag), args)
    - "text"              -> Const(String)   (taken verbatim, no escapes)
    - 123                 -> Const(Number)   (signed 64-bit)
    - tag                 -> Ref(tag)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from ok.errors import OkSyntaxError
from ok.types.nodes import Block, Call, Const, NIL_CONST, Node, Ref
from ok.types.value import INT64_MAX, Number, String


TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<open>\()"
    r"|(?P<close>\))"
    r'|(?P<string>"[^"]*")'
    r"|(?P<number>\d+)"
    r"|(?P<ident>[a-zA-Z_][a-zA-Z0-9_]*)"
    r"|(?P<op>[-+*/%<>=!&|^]+)"
    r"|(?P<semi>;)",
    re.ASCII,
)

OPEN = "open"
CLOSE = "close"

# Deepest "(" nesting the recursive parser accepts
MAX_NESTING = 256


class Token(NamedTuple):
    type: str
    value: str
    offset: int
    line: int
    column: int


def lex(source: str, name: str = "<input>") -> Iterator[Token]:
    """Token generator: yields every token except whitespace.

    Raises OkSyntaxError at the first character no rule matches.
    """
    pos = 0
    line, line_start = 1, 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise OkSyntaxError(
                f"invalid input text {source[pos:pos + 10]!r}", name, line, pos - line_start + 1
            )
        kind = m.lastgroup
        text = m.group()
        if kind != "ws":
            yield Token(kind, text, pos, line, pos - line_start + 1)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rfind("\n") + 1
        pos = m.end()


class TokenStream:
    def __init__(self, source: str, name: str = "<input>"):
        self.source = source
        self.name = name
        self.tokens = lex(source, name)
        self.buffer: list[Token] = []
        self.nesting = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            tok = next(self.tokens, None)
            if tok is None:
                return None
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _error(self, message: str, tok: Optional[Token]) -> OkSyntaxError:
        if tok is None:
            line = self.source.count("\n") + 1
            column = len(self.source) - (self.source.rfind("\n") + 1) + 1
            return OkSyntaxError(message, self.name, line, column)
        return OkSyntaxError(message, self.name, tok.line, tok.column)

    def _describe(self, tok: Optional[Token]) -> str:
        return "end of input" if tok is None else f"{tok.value!r}"

    def parse_statement(self) -> Node:
        tok = self.peek()
        if tok is None:
            raise self._error("unexpected end of input", tok)

        if tok.type == OPEN:
            if self.nesting >= MAX_NESTING:
                raise self._error("nesting too deep", tok)
            self.advance()
            head = self.advance()
            if head is None or head.type not in ("ident", "op"):
                raise self._error(f"unexpected {self._describe(head)}, expected a tag", head)
            args = []
            while True:
                nxt = self.peek()
                if nxt is not None and nxt.type == CLOSE:
                    self.advance()
                    break
                if nxt is None or nxt.type == "semi":
                    raise self._error(f"unexpected {self._describe(nxt)}, expected ')'", nxt)
                self.nesting += 1
                args.append(self.parse_statement())
                self.nesting -= 1
            return Call(Ref(head.value), tuple(args))

        if tok.type == "string":
            self.advance()
            return Const(String(tok.value[1:-1]))

        if tok.type == "number":
            self.advance()
            value = int(tok.value)
            if value > INT64_MAX:
                raise self._error(f"number {tok.value} is out of range", tok)
            return Const(Number(value))

        if tok.type in ("ident", "op"):
            self.advance()
            return Ref(tok.value)

        raise self._error(f"unexpected {self._describe(tok)}", tok)

    def parse_program(self) -> Node:
        statements = []
        while self.peek() is not None:
            statements.append(self.parse_statement())
            nxt = self.peek()
            if nxt is not None and nxt.type == "semi":
                self.advance()
        if not statements:
            return NIL_CONST
        if len(statements) == 1:
            return statements[0]
        return Block(tuple(statements))


def parse(name: str, source: str) -> Node:
    """Parse a whole program into exactly one root node."""
    return TokenStream(source, name).parse_program()
