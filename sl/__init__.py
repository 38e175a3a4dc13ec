from .errors import ParseError
from .nodes import render
from .parser import Parser, parse, parse_line
from .scanner import Scanner, Token

__all__ = ["parse", "parse_line", "render", "Parser", "Scanner", "Token", "ParseError"]
