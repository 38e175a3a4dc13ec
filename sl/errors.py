"""Parse errors. Every error carries the (line, offset) where it was detected."""


class ParseError(SyntaxError):
    def __init__(self, message: str, line: int, offset: int):
        super().__init__(message)
        self.message = message
        self.line = line
        self.offset = offset

    @property
    def position(self) -> tuple[int, int]:
        return self.line, self.offset

    def __str__(self) -> str:
        return f"{self.message} ({self.line}:{self.offset})"


class IllegalToken(ParseError):
    pass


class InvalidIntLiteral(ParseError):
    pass


class UnterminatedString(ParseError):
    pass


class InvalidEscape(ParseError):
    pass


class UnterminatedList(ParseError):
    pass


class UnexpectedCloseParen(ParseError):
    pass


class NestingTooDeep(ParseError):
    pass
