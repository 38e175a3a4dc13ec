"""Lexical scanner for sl S-expressions.

The scanner classifies one lexical unit per `scan()` call and tracks the
(line, offset) of the read head for diagnostics. String bodies are not
scanned here: after a QUOTE token the string node reads raw characters
through `read_char()` itself.
"""

import io
from enum import Enum, auto
from typing import Optional, TextIO, Union


class Token(Enum):
    ILLEGAL = auto()
    EOF = auto()
    WS = auto()

    # List
    PAREN_OPEN = auto()  # (
    PAREN_CLOSE = auto()  # )

    # Symbols
    COLON = auto()  # :
    PLUS = auto()  # +
    MINUS = auto()  # -
    MULT = auto()  # *
    DIV = auto()  # /

    COMMENT = auto()  # ;

    QUOTE = auto()  # " opening a string

    LIST = auto()

    INT = auto()
    FLOAT = auto()
    STRING = auto()

    NIL = auto()
    TRUE = auto()
    FALSE = auto()

    KEYWORD = auto()

    LITERAL = auto()

    def __str__(self) -> str:
        return self.name


SYMBOLS = frozenset({Token.PLUS, Token.MINUS, Token.MULT, Token.DIV})
BASICS = frozenset({Token.NIL, Token.TRUE, Token.FALSE})

_WHITESPACE = frozenset(" \t\r\n,")
_SPECIAL = frozenset("()")
_KEYWORDS = {"NIL": Token.NIL, "TRUE": Token.TRUE, "FALSE": Token.FALSE}
_SINGLE = {
    "(": Token.PAREN_OPEN,
    ")": Token.PAREN_CLOSE,
    "+": Token.PLUS,
    "*": Token.MULT,
    "/": Token.DIV,
    '"': Token.QUOTE,
}


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_ident(ch: str) -> bool:
    return not is_whitespace(ch) and ch not in _SPECIAL


class Scanner:
    """Scanner over a string or text stream.

    `line` is 1-based; `offset` is the number of characters consumed on
    the current line. End of input is reported as None by `read_char()`.
    """

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._src = source
        self.line = 1
        self.offset = 0
        self._pending: Optional[str] = None
        self._last: Optional[str] = None
        self._prev_pos = (1, 0)

    @property
    def position(self) -> tuple[int, int]:
        return self.line, self.offset

    def read_char(self) -> Optional[str]:
        if self._pending is not None:
            ch, self._pending = self._pending, None
        else:
            ch = self._src.read(1) or None
        self._last = ch
        if ch is None:
            return None
        self._prev_pos = (self.line, self.offset)
        if ch == "\n":
            self.line += 1
            self.offset = 0
        else:
            self.offset += 1
        return ch

    def unread_char(self) -> None:
        """Push back the last character read. Only one level is kept."""
        if self._last is None:
            return
        self._pending, self._last = self._last, None
        self.line, self.offset = self._prev_pos

    def scan(self) -> tuple[Token, str]:
        ch = self.read_char()
        if ch is None:
            return Token.EOF, ""

        if is_whitespace(ch):
            self.unread_char()
            return self._scan_whitespace()
        if is_digit(ch):
            self.unread_char()
            return self._scan_number()
        if is_letter(ch):
            self.unread_char()
            return self._scan_ident()

        tok = _SINGLE.get(ch)
        if tok is not None:
            return tok, ch

        if ch == ";":
            self.unread_char()
            return self._scan_comment()

        if ch == "-":
            nxt = self.read_char()
            if nxt is not None and is_digit(nxt):
                self.unread_char()
                tok, lit = self._scan_number()
                return tok, "-" + lit
            if nxt is None or is_whitespace(nxt):
                self.unread_char()
                return Token.MINUS, ch
            self.unread_char()
            return self._scan_ident(prefix="-")

        return Token.ILLEGAL, ch

    def _scan_whitespace(self) -> tuple[Token, str]:
        buf = [self.read_char()]
        while True:
            ch = self.read_char()
            if ch is None:
                break
            if not is_whitespace(ch):
                self.unread_char()
                break
            buf.append(ch)
        return Token.WS, "".join(buf)

    def _scan_comment(self) -> tuple[Token, str]:
        # The terminating newline is consumed but not part of the literal.
        buf = [self.read_char()]
        while True:
            ch = self.read_char()
            if ch is None or ch == "\n":
                break
            buf.append(ch)
        return Token.COMMENT, "".join(buf)

    def _scan_ident(self, prefix: str = "") -> tuple[Token, str]:
        buf = [prefix] if prefix else [self.read_char()]
        while True:
            ch = self.read_char()
            if ch is None:
                break
            if not is_ident(ch):
                self.unread_char()
                break
            buf.append(ch)
        lit = "".join(buf)
        return _KEYWORDS.get(lit.upper(), Token.LITERAL), lit

    def _scan_number(self) -> tuple[Token, str]:
        # Greedy and unvalidated: "1.2.3-4" is a single FLOAT literal.
        buf = [self.read_char()]
        while True:
            ch = self.read_char()
            if ch is None:
                break
            if not is_digit(ch) and ch != "." and ch != "-":
                self.unread_char()
                break
            buf.append(ch)
        lit = "".join(buf)
        if "." in lit:
            return Token.FLOAT, lit
        return Token.INT, lit
