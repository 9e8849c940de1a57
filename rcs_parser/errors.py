"""Parse failures and their rule traces."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from rcs_parser.utils import line_column

if TYPE_CHECKING:
    from rcs_parser.nodes import Num


@dataclass(frozen=True, slots=True)
class ErrorFrame:
    offset: int
    rule: str

    def remaining(self, text: str) -> str:
        return text[self.offset :]


class RcsParseError(Exception):
    """Base class for every comma-v parse failure.

    ``frames`` runs from the innermost failure (the primitive that could not
    match) to the outermost rule that was active when it happened. A ``fatal``
    error was raised after a rule committed to its input, so optional and
    repeated rules must not swallow it.
    """

    def __init__(self, message: str, offset: int, rule: str):
        self.message = message
        self.frames: list[ErrorFrame] = [ErrorFrame(offset, rule)]
        self.fatal = False
        super().__init__(message)

    @property
    def offset(self) -> int:
        return self.frames[0].offset

    @property
    def rules(self) -> list[str]:
        return [frame.rule for frame in self.frames]

    def add_context(self, offset: int, rule: str) -> None:
        self.frames.append(ErrorFrame(offset, rule))

    def __str__(self) -> str:
        trace = " <- ".join(f"{frame.rule}@{frame.offset}" for frame in self.frames)
        return f"{self.message} ({trace})"


class RcsLexicalError(RcsParseError):
    """A literal, digit run, string or diff line could not be read."""


class RcsSyntaxError(RcsParseError):
    """A keyword or terminator is missing or out of order."""


class RcsMergeError(RcsParseError):
    """Delta headers and delta bodies could not be paired."""

    def __init__(self, message: str, offset: int, num: Num):
        super().__init__(message, offset, "merge")
        self.num = num


@contextmanager
def rule(name: str, offset: int) -> Iterator[None]:
    """Tag any parse failure raised inside the block with ``name``."""
    try:
        yield
    except RcsParseError as error:
        error.add_context(offset, name)
        raise


@contextmanager
def cut() -> Iterator[None]:
    """Mark any parse failure raised inside the block as fatal."""
    try:
        yield
    except RcsParseError as error:
        error.fatal = True
        raise


def format_error(text: str, error: RcsParseError) -> str:
    lines = [f"error: {error.message}"]
    # split on \n only, so lines agree with line_column
    source_lines = text.split("\n")
    for index, frame in enumerate(error.frames):
        line, column = line_column(text, frame.offset)
        source = source_lines[line - 1].rstrip("\r")
        label = "expected" if index == 0 else "in"
        lines.append(f"{index}: at line {line}, column {column}, {label} {frame.rule}:")
        lines.append(source)
        lines.append(" " * (column - 1) + "^")
    return "\n".join(lines) + "\n"
