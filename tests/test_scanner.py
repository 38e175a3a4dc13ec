import io

import pytest
from sl.scanner import Scanner, Token


def scan_all(src):
    s = Scanner(src)
    out = []
    while True:
        tok, lit = s.scan()
        out.append((tok, lit))
        if tok is Token.EOF:
            return out


def test_scan_list():
    assert scan_all("(foo)") == [
        (Token.PAREN_OPEN, "("),
        (Token.LITERAL, "foo"),
        (Token.PAREN_CLOSE, ")"),
        (Token.EOF, ""),
    ]


def test_whitespace_is_one_token():
    s = Scanner("  \t,\r\n x")
    assert s.scan() == (Token.WS, "  \t,\r\n ")
    assert s.position == (2, 1)
    assert s.scan() == (Token.LITERAL, "x")


@pytest.mark.parametrize("src,tok", [
    ("nil", Token.NIL),
    ("NIL", Token.NIL),
    ("True", Token.TRUE),
    ("fAlSe", Token.FALSE),
    ("nils", Token.LITERAL),
])
def test_keywords_case_insensitive(src, tok):
    assert Scanner(src).scan() == (tok, src)


@pytest.mark.parametrize("src,tok", [
    ("+", Token.PLUS),
    ("*", Token.MULT),
    ("/", Token.DIV),
    ('"', Token.QUOTE),
    ("(", Token.PAREN_OPEN),
    (")", Token.PAREN_CLOSE),
])
def test_single_characters(src, tok):
    assert Scanner(src).scan() == (tok, src)


def test_negative_number():
    assert Scanner("-42").scan() == (Token.INT, "-42")


def test_minus_before_whitespace():
    assert scan_all("- 1") == [
        (Token.MINUS, "-"),
        (Token.WS, " "),
        (Token.INT, "1"),
        (Token.EOF, ""),
    ]


def test_minus_at_end_of_input():
    assert scan_all("-") == [(Token.MINUS, "-"), (Token.EOF, "")]


def test_minus_starts_identifier():
    assert Scanner("-foo").scan() == (Token.LITERAL, "-foo")


def test_number_lexing_is_permissive():
    assert Scanner("1.2.3-4").scan() == (Token.FLOAT, "1.2.3-4")
    assert Scanner("12-3").scan() == (Token.INT, "12-3")


def test_float():
    assert scan_all("3.14)") == [
        (Token.FLOAT, "3.14"),
        (Token.PAREN_CLOSE, ")"),
        (Token.EOF, ""),
    ]


def test_identifier_swallows_operators():
    assert scan_all("a+b:c)") == [
        (Token.LITERAL, "a+b:c"),
        (Token.PAREN_CLOSE, ")"),
        (Token.EOF, ""),
    ]


def test_comment_runs_to_end_of_line():
    s = Scanner("; a comment\nx")
    assert s.scan() == (Token.COMMENT, "; a comment")
    assert s.position == (2, 0)
    assert s.scan() == (Token.LITERAL, "x")


def test_comment_at_end_of_input():
    assert scan_all(";") == [(Token.COMMENT, ";"), (Token.EOF, "")]


@pytest.mark.parametrize("ch", [":", "#", "'", "\x00", "é"])
def test_illegal_characters(ch):
    assert Scanner(ch).scan() == (Token.ILLEGAL, ch)


def test_eof_is_sticky():
    s = Scanner("")
    assert s.scan() == (Token.EOF, "")
    assert s.scan() == (Token.EOF, "")


def test_position_tracking():
    s = Scanner("ab\ncd")
    s.scan()
    assert s.position == (1, 2)
    s.scan()
    assert s.position == (2, 0)
    s.scan()
    assert s.position == (2, 2)


def test_unread_restores_position():
    s = Scanner("a\nb")
    assert s.read_char() == "a"
    assert s.read_char() == "\n"
    assert s.position == (2, 0)
    s.unread_char()
    assert s.position == (1, 1)
    assert s.read_char() == "\n"
    assert s.read_char() == "b"
    assert s.read_char() is None


def test_reads_from_stream():
    assert scan_all(io.StringIO("(1)")) == [
        (Token.PAREN_OPEN, "("),
        (Token.INT, "1"),
        (Token.PAREN_CLOSE, ")"),
        (Token.EOF, ""),
    ]
