"""Recursive-descent parser for sl S-expressions.

One `Parser.parse()` call yields one top-level node, or None at end of
input or at a closing paren (the paren is held back for the caller).
Nested lists are built on an explicit stack, so depth is bounded by
memory rather than the interpreter stack.
"""

import logging
from typing import Optional, TextIO, Union

from .errors import (
    IllegalToken,
    InvalidEscape,
    InvalidIntLiteral,
    NestingTooDeep,
    UnexpectedCloseParen,
    UnterminatedList,
    UnterminatedString,
)
from .nodes import Basic, Comment, GenericLiteral, IntLiteral, List, Node, StringLiteral, Symbol
from .scanner import BASICS, SYMBOLS, Scanner, Token
from .types import ParseOptions

log = logging.getLogger(__name__)

_ESCAPES = {"n": "\n", '"': '"', "\\": "\\"}


class Parser:
    def __init__(self, source: Union[str, TextIO], options: Optional[ParseOptions] = None):
        self.scanner = Scanner(source)
        self.options = options or ParseOptions()
        self._held: Optional[tuple[Token, str]] = None
        self._last: tuple[Token, str] = (Token.EOF, "")

    @property
    def held(self) -> Optional[tuple[Token, str]]:
        """The token pushed back by the last `unscan()`, if any."""
        return self._held

    def scan(self) -> tuple[Token, str]:
        if self._held is not None:
            held, self._held = self._held, None
            return held
        self._last = self.scanner.scan()
        return self._last

    def unscan(self) -> None:
        self._held = self._last

    def scan_ignore_whitespace(self) -> tuple[Token, str]:
        tok, lit = self.scan()
        if tok is Token.WS:
            tok, lit = self.scan()
        return tok, lit

    def parse(self) -> Optional[Node]:
        tok, lit = self.scan_ignore_whitespace()

        if tok is Token.EOF:
            return None
        if tok is Token.PAREN_CLOSE:
            self.unscan()
            return None
        if tok is Token.PAREN_OPEN:
            return self._parse_list()
        return self._parse_atom(tok, lit)

    def _parse_atom(self, tok: Token, lit: str) -> Node:
        if tok in BASICS:
            return Basic(lit)
        if tok in SYMBOLS:
            return Symbol(lit)
        if tok is Token.INT:
            return self._parse_int(lit)
        if tok is Token.COMMENT:
            return Comment(lit)
        if tok is Token.QUOTE:
            return self._parse_string()
        if tok is Token.LITERAL:
            return GenericLiteral(lit)

        raise self._error(IllegalToken, f'Invalid token "{lit}".')

    def _parse_int(self, lit: str) -> IntLiteral:
        try:
            return IntLiteral.from_text(lit)
        except ValueError as e:
            raise self._error(InvalidIntLiteral, f"Invalid INT literal: {e}") from e

    def _parse_string(self) -> StringLiteral:
        # String bodies are read raw; the general token rules do not apply.
        s = self.scanner
        buf = []
        while True:
            ch = s.read_char()
            if ch is None:
                raise self._error(UnterminatedString, "Invalid STRING. Missing closing '\"'")
            if ch == '"':
                break
            if ch == "\\":
                esc = s.read_char()
                if esc is None:
                    raise self._error(UnterminatedString, "Invalid STRING. Missing closing '\"'")
                if esc not in _ESCAPES:
                    raise self._error(
                        InvalidEscape,
                        f'Invalid escaped STRING character "{esc}". '
                        'Only \\n, \\", and \\\\ are allowed.',
                    )
                buf.append(_ESCAPES[esc])
                continue
            buf.append(ch)
        return StringLiteral("".join(buf))

    def _parse_list(self) -> List:
        # The opening paren is already consumed. One item list per open paren.
        stack: list[list[Node]] = []
        self._open_list(stack)
        while True:
            tok, lit = self.scan_ignore_whitespace()
            if tok is Token.PAREN_OPEN:
                self._open_list(stack)
            elif tok is Token.PAREN_CLOSE:
                done = List(tuple(stack.pop()))
                if not stack:
                    return done
                stack[-1].append(done)
            elif tok is Token.EOF:
                raise self._error(UnterminatedList, 'Invalid list. Missing closing parens ")"')
            else:
                stack[-1].append(self._parse_atom(tok, lit))

    def _open_list(self, stack: list[list[Node]]) -> None:
        limit = self.options.max_depth
        if limit is not None and len(stack) >= limit:
            raise self._error(NestingTooDeep, f"List nesting deeper than {limit}")
        stack.append([])

    def _error(self, cls, message: str):
        line, offset = self.scanner.position
        log.debug("parse error at %d:%d: %s", line, offset, message)
        return cls(message, line, offset)


def parse(src: Union[str, TextIO], options: Optional[ParseOptions] = None) -> Optional[Node]:
    """Parse the first form in src. Input after it is not read."""
    return Parser(src, options).parse()


def parse_line(line: str, options: Optional[ParseOptions] = None) -> Optional[Node]:
    """Parse one input line for the interactive front end.

    Returns None for blank input, the parsed node otherwise. Raises a
    ParseError subclass on malformed input, including a stray ")".
    """
    p = Parser(line, options)
    node = p.parse()
    if node is None and p.held is not None and p.held[0] is Token.PAREN_CLOSE:
        raise p._error(UnexpectedCloseParen, 'Unexpected closing parens ")"')
    return node
