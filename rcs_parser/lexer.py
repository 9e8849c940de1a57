"""Lexical rules of the comma-v grammar.

Every rule takes the whole input and an offset and returns the offset just past
what it consumed together with the decoded value. A rule that cannot match
raises ``RcsLexicalError`` tagged with the primitive that failed; enclosing
rules add their own names as the error propagates.
"""

from __future__ import annotations

from typing import Callable

from rcs_parser.errors import RcsLexicalError, rule
from rcs_parser.nodes import Num

SPECIAL_CHARS = frozenset("$,.:;@")
MULTISPACE = frozenset(" \t\r\n")
SPACES = frozenset(" \t")
DIGITS = frozenset("0123456789")


def is_special(char: str) -> bool:
    return char in SPECIAL_CHARS


def is_visible(char: str) -> bool:
    """Visible graphic characters are (octal) codes 041-176 and 240-377."""
    return "\x21" <= char <= "\x7e" or "\xa0" <= char <= "\xff"


def is_idchar(char: str) -> bool:
    return is_visible(char) and not is_special(char)


def _is_idchar_or_period(char: str) -> bool:
    return char == "." or is_idchar(char)


def _take_while(text: str, pos: int, predicate: Callable[[str], bool]) -> int:
    end = pos
    while end < len(text) and predicate(text[end]):
        end += 1
    return end


def take_while1(text: str, pos: int, predicate: Callable[[str], bool], name: str) -> tuple[int, str]:
    end = _take_while(text, pos, predicate)
    if end == pos:
        error = RcsLexicalError(f"expected {name}", pos, "take_while1")
        error.add_context(pos, name)
        raise error
    return end, text[pos:end]


def whitespace0(text: str, pos: int) -> int:
    return _take_while(text, pos, MULTISPACE.__contains__)


def whitespace1(text: str, pos: int) -> int:
    end = whitespace0(text, pos)
    if end == pos:
        raise RcsLexicalError("expected whitespace", pos, "multispace1")
    return end


def spaces0(text: str, pos: int) -> int:
    return _take_while(text, pos, SPACES.__contains__)


def literal(text: str, pos: int, expected: str) -> int:
    if not text.startswith(expected, pos):
        raise RcsLexicalError(f"expected {expected!r}", pos, "tag")
    return pos + len(expected)


def line_ending(text: str, pos: int) -> int:
    if text.startswith("\n", pos):
        return pos + 1
    if text.startswith("\r\n", pos):
        return pos + 2
    raise RcsLexicalError("expected line ending", pos, "crlf")


def parse_digits(text: str, pos: int = 0) -> tuple[int, int]:
    end = _take_while(text, pos, DIGITS.__contains__)
    if end == pos:
        raise RcsLexicalError("expected digits", pos, "digit")
    return end, int(text[pos:end])


def parse_num(text: str, pos: int = 0) -> tuple[int, Num]:
    """num ::= digit+ ("." digit+)*

    A period that is not followed by a digit is left for the caller.
    """
    with rule("Num", pos):
        pos, number = parse_digits(text, pos)
    numbers = [number]
    while text.startswith(".", pos) and pos + 1 < len(text) and text[pos + 1] in DIGITS:
        pos, number = parse_digits(text, pos + 1)
        numbers.append(number)
    return pos, Num(numbers=tuple(numbers))


def parse_sym(text: str, pos: int = 0) -> tuple[int, str]:
    return take_while1(text, pos, is_idchar, "sym")


def parse_id(text: str, pos: int = 0) -> tuple[int, str]:
    return take_while1(text, pos, _is_idchar_or_period, "id")


def parse_string(text: str, pos: int = 0) -> tuple[int, str]:
    """string ::= "@" { any character, with @ doubled }* "@" """
    start = pos
    with rule("string", start):
        pos = literal(text, pos, "@")
        chunks: list[str] = []
        while True:
            at = text.find("@", pos)
            if at < 0:
                raise RcsLexicalError("unterminated string", len(text), "tag")
            chunks.append(text[pos:at])
            if text.startswith("@@", at):
                chunks.append("@")
                pos = at + 2
                continue
            return at + 1, "".join(chunks)


def parse_intstring(text: str, pos: int = 0) -> tuple[int, str]:
    """The integrity value is never escaped, so it simply runs to the next ``@``."""
    start = pos
    with rule("intstring", start):
        pos = literal(text, pos, "@")
        at = text.find("@", pos)
        if at < 0:
            raise RcsLexicalError("unterminated intstring", pos, "take_until")
        return at + 1, text[pos:at]
