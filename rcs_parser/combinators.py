"""Reusable grammar shapes shared by the admin and delta sections.

Every field of those sections is one of four shapes::

    value          keyword value ;
    value_opt      keyword [value] ;
    value_all_opt  [keyword value ;]
    value_many0    keyword value* ;

Each shape is built from a context label, the keyword and the parser for its
payload. Whitespace is allowed before the keyword, the payload and the ``;``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from rcs_parser.errors import RcsParseError, RcsSyntaxError, rule
from rcs_parser.lexer import whitespace0, whitespace1

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], tuple[int, T]]


def keyword(text: str, pos: int, key: str) -> int:
    if not text.startswith(key, pos):
        raise RcsSyntaxError(f"expected {key!r}", pos, "tag")
    return pos + len(key)


def context(name: str, parser: Parser[T]) -> Parser[T]:
    def parse(text: str, pos: int = 0) -> tuple[int, T]:
        with rule(name, pos):
            return parser(text, pos)

    return parse


def opt(parser: Parser[T]) -> Parser[T | None]:
    """Run ``parser``; on a non-fatal failure return ``None`` without consuming input."""

    def parse(text: str, pos: int = 0) -> tuple[int, T | None]:
        try:
            return parser(text, pos)
        except RcsParseError as error:
            if error.fatal:
                raise
            return pos, None

    return parse


def many0(parser: Parser[T]) -> Parser[list[T]]:
    def parse(text: str, pos: int = 0) -> tuple[int, list[T]]:
        values: list[T] = []
        while True:
            try:
                end, value = parser(text, pos)
            except RcsParseError as error:
                if error.fatal:
                    raise
                return pos, values
            if end == pos:
                # a parser that matches nothing would loop forever
                return pos, values
            values.append(value)
            pos = end

    return parse


def preceded_ws(parser: Parser[T], required: bool = False) -> Parser[T]:
    skip = whitespace1 if required else whitespace0

    def parse(text: str, pos: int = 0) -> tuple[int, T]:
        return parser(text, skip(text, pos))

    return parse


def separated_pair(first: Parser[T], separator: str, second: Parser[U]) -> Parser[tuple[T, U]]:
    def parse(text: str, pos: int = 0) -> tuple[int, tuple[T, U]]:
        pos, left = first(text, pos)
        if not text.startswith(separator, pos):
            raise RcsSyntaxError(f"expected {separator!r}", pos, "tag")
        pos, right = second(text, pos + len(separator))
        return pos, (left, right)

    return parse


def _clause(key: str, payload: Parser[T]) -> Parser[T]:
    def parse(text: str, pos: int = 0) -> tuple[int, T]:
        pos = keyword(text, whitespace0(text, pos), key)
        pos, result = payload(text, pos)
        pos = keyword(text, whitespace0(text, pos), ";")
        return pos, result

    return parse


def value(ctx: str, key: str, parser: Parser[T]) -> Parser[T]:
    return context(ctx, _clause(key, preceded_ws(parser)))


def value_opt(ctx: str, key: str, parser: Parser[T]) -> Parser[T | None]:
    return context(ctx, _clause(key, opt(preceded_ws(parser))))


def value_all_opt(ctx: str, key: str, parser: Parser[T]) -> Parser[T | None]:
    return context(ctx, opt(_clause(key, preceded_ws(parser))))


def value_many0(ctx: str, key: str, parser: Parser[T]) -> Parser[list[T]]:
    return context(ctx, _clause(key, many0(preceded_ws(parser, required=True))))


def flag(ctx: str, key: str) -> Parser[bool]:
    """A bare ``keyword ;`` clause whose presence is the value."""
    clause = opt(_clause(key, lambda text, pos: (pos, True)))

    def parse(text: str, pos: int = 0) -> tuple[int, bool]:
        pos, present = clause(text, pos)
        return pos, bool(present)

    return context(ctx, parse)
