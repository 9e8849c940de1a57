"""CLI for reading RCS comma-v files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from rcs_parser import DiffAdd, HeadText, ParserManager, RcsData, RcsParseError, format_error
from rcs_parser.nodes import Delta


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse RCS comma-v files and print what they contain.")
    parser.add_argument("paths", nargs="+", help="Paths to comma-v files (e.g. foo.c,v).")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed document as JSON instead of a summary.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the files (default: utf-8).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser progress to stderr.",
    )
    return parser.parse_args(argv)


def describe_text(delta: Delta) -> str:
    text = delta.text
    if isinstance(text, HeadText):
        return f"{len(text.text.splitlines())} line(s) of text"
    added = sum(len(command.lines) for command in text.commands if isinstance(command, DiffAdd))
    deleted = sum(command.count for command in text.commands if not isinstance(command, DiffAdd))
    return f"+{added} -{deleted}"


def summarize(document: RcsData) -> list[str]:
    lines = [f"head: {document.head}"]
    if document.branch is not None:
        lines.append(f"branch: {document.branch}")
    if document.access:
        lines.append(f"access: {' '.join(document.access)}")
    if document.symbols:
        lines.append("symbols: " + " ".join(f"{name}:{num}" for name, num in document.symbols))
    if document.locks:
        lines.append("locks: " + " ".join(f"{owner}:{num}" for owner, num in document.locks) + ("; strict" if document.strict else ""))
    lines.append(f"description: {document.desc.strip()}")
    for num, delta in reversed(document.deltas.items()):
        date = ".".join(f"{part:02d}" for part in delta.date.numbers)
        state = delta.state or "-"
        lines.append(f"{num}\t{date}\t{delta.author}\t{state}\t{describe_text(delta)}")
    return lines


def read(paths: Iterable[Path], encoding: str, as_json: bool, verbose: bool) -> int:
    status = 0
    for path in paths:
        manager = ParserManager(
            path,
            config={"encoding": encoding, "parser_config": {"enable_logger": verbose, "parse": False}},
        )
        try:
            document = manager.parser.parse()
        except RcsParseError as error:
            print(f"{path}:", file=sys.stderr)
            print(format_error(manager.input, error), file=sys.stderr, end="")
            status = 1
            continue
        if as_json:
            print(document.model_dump_json(indent=2))
        else:
            print(f"{path}:")
            print("\n".join(summarize(document)))
    return status


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    paths = [Path(path) for path in args.paths]
    for path in paths:
        if not path.is_file():
            raise FileNotFoundError(f"Input path does not exist: {path}")
    status = read(paths, encoding=args.encoding, as_json=args.json, verbose=args.verbose)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
