"""Decoder for the RCS diff instruction stream.

The format is the one GNU diff writes with ``--rcs``: ``a<pos> <count>``
followed by ``count`` lines to insert after line ``pos``, or ``d<pos> <count>``
to remove ``count`` lines starting at ``pos``.
"""

from __future__ import annotations

from rcs_parser.errors import RcsLexicalError, rule
from rcs_parser.lexer import line_ending, literal, parse_digits, spaces0, whitespace0, whitespace1
from rcs_parser.nodes import DiffAdd, DiffCommand, DiffDelete, DiffText

CONTEXT = "Diff"
OPCODES = "ad"


def parse_diff_line(text: str, pos: int = 0) -> tuple[int, str]:
    """Read one line up to its ``\\n`` or ``\\r\\n``, turning ``@@`` into ``@``.

    Diff lines live inside an ``@``-delimited string, so a lone ``@`` ends the
    enclosing string and therefore means the line was never terminated.
    """
    with rule(CONTEXT, pos):
        chunks: list[str] = []
        run = pos
        while pos < len(text):
            char = text[pos]
            if char == "\n" or char == "\r":
                chunks.append(text[run:pos])
                return line_ending(text, pos), "".join(chunks)
            if char == "@":
                if not text.startswith("@@", pos):
                    break
                chunks.append(text[run : pos + 1])
                pos += 2
                run = pos
                continue
            pos += 1
        raise RcsLexicalError("expected line ending", pos, "crlf")


def parse_diff_lines(text: str, pos: int, count: int) -> tuple[int, list[str]]:
    lines: list[str] = []
    for _ in range(count):
        pos, line = parse_diff_line(text, pos)
        lines.append(line)
    return pos, lines


def parse_diff_command(text: str, pos: int = 0) -> tuple[int, DiffCommand]:
    with rule(CONTEXT, pos):
        if pos >= len(text) or text[pos] not in OPCODES:
            raise RcsLexicalError(f"expected one of {OPCODES!r}", pos, "one_of")
        opcode = text[pos]
        pos, position = parse_digits(text, whitespace0(text, pos + 1))
        pos, count = parse_digits(text, whitespace1(text, pos))
        pos = line_ending(text, spaces0(text, pos))
    if opcode == "a":
        pos, lines = parse_diff_lines(text, pos, count)
        return pos, DiffAdd(position=position, lines=lines)
    return pos, DiffDelete(position=position, count=count)


def parse_diff_string(text: str, pos: int = 0) -> tuple[int, DiffText]:
    """An ``@``-delimited string whose body is a stream of diff commands."""
    with rule("string", pos):
        pos = literal(text, pos, "@")
        commands: list[DiffCommand] = []
        while pos < len(text) and text[pos] != "@":
            pos, command = parse_diff_command(text, pos)
            commands.append(command)
        pos = literal(text, pos, "@")
    return pos, DiffText(commands=commands)
