"""Syntax nodes produced by the parser and their canonical rendering."""

import re
from dataclasses import dataclass
from typing import Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INT_RE = re.compile(r"-?[0-9]+")


class _Renders:
    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class List(_Renders):
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class IntLiteral(_Renders):
    value: int
    raw: str

    @classmethod
    def from_text(cls, raw: str) -> "IntLiteral":
        """Parse base-10 text into a signed 64-bit literal.

        Raises ValueError if the text is not an integer or is out of range.
        """
        if not _INT_RE.fullmatch(raw):
            raise ValueError(f"not a base-10 integer: {raw!r}")
        value = int(raw, 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"value out of range: {raw}")
        return cls(value, raw)


@dataclass(frozen=True)
class StringLiteral(_Renders):
    value: str


@dataclass(frozen=True)
class Symbol(_Renders):
    raw: str


@dataclass(frozen=True)
class Basic(_Renders):
    raw: str


@dataclass(frozen=True)
class GenericLiteral(_Renders):
    raw: str


@dataclass(frozen=True)
class Comment(_Renders):
    raw: str


Node = Union[List, IntLiteral, StringLiteral, Symbol, Basic, GenericLiteral, Comment]


def escape_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class _Fragment(str):
    pass


_OPEN = _Fragment("( ")
_CLOSE = _Fragment(" )")
_SEP = _Fragment(" ")
_EOL = _Fragment("\n")


def render(node: Node) -> str:
    """Render a node in canonical form.

    A comment inside a list is followed by a newline so the list's
    closing paren is not swallowed when the text is parsed again.
    """
    out: list[str] = []
    # Pending nodes and fragments, in reverse output order.
    stack: list = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, _Fragment):
            out.append(item)
        elif isinstance(item, List):
            stack.append(_CLOSE)
            for i in range(len(item.children) - 1, -1, -1):
                child = item.children[i]
                if isinstance(child, Comment):
                    stack.append(_EOL)
                stack.append(child)
                if i > 0:
                    stack.append(_SEP)
            stack.append(_OPEN)
        else:
            out.append(_render_leaf(item))
    return "".join(out)


def _render_leaf(node: Node) -> str:
    if isinstance(node, StringLiteral):
        return '"' + escape_string(node.value) + '"'
    if isinstance(node, Basic):
        return node.raw.upper()
    if isinstance(node, (IntLiteral, Symbol, GenericLiteral, Comment)):
        return node.raw
    raise TypeError(f"not a syntax node: {node!r}")


def children(node: Node) -> tuple[Node, ...]:
    if isinstance(node, List):
        return node.children
    return ()

