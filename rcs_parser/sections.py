"""Grammar rules for the admin, delta and deltatext sections of a comma-v file."""

from __future__ import annotations

from rcs_parser.combinators import (
    Parser,
    flag,
    keyword,
    separated_pair,
    value,
    value_all_opt,
    value_many0,
    value_opt,
)
from rcs_parser.diff import parse_diff_string
from rcs_parser.errors import cut, rule
from rcs_parser.lexer import parse_id, parse_intstring, parse_num, parse_string, parse_sym, whitespace0
from rcs_parser.nodes import Delta, DeltaText, HeadText, RcsData, Text

ADMIN = "Admin"
DELTA = "Delta"
DELTATEXT = "DeltaText"

# admin ::= "head" {num} ";"
#           { "branch" {num} ";" }
#           "access" {id}* ";"
#           "symbols" { sym ":" num }* ";"
#           "locks" { id ":" num }* ";"
#           { "strict" ";" }
#           { "integrity" {intstring} ";" }
#           { "comment" {string} ";" }
#           { "expand" {string} ";" }
_head = value(ADMIN, "head", parse_num)
_branch = value_all_opt(ADMIN, "branch", parse_num)
_access = value_many0(ADMIN, "access", parse_id)
_symbols = value_many0(ADMIN, "symbols", separated_pair(parse_sym, ":", parse_num))
_locks = value_many0(ADMIN, "locks", separated_pair(parse_id, ":", parse_num))
_strict = flag(ADMIN, "strict")
_integrity = value_all_opt(ADMIN, "integrity", parse_intstring)
_comment = value_all_opt(ADMIN, "comment", parse_string)
_expand = value_all_opt(ADMIN, "expand", parse_string)


def parse_admin(text: str, pos: int = 0) -> tuple[int, RcsData]:
    """Parse the admin block into a document with no description or deltas yet."""
    pos, head = _head(text, pos)
    pos, branch = _branch(text, pos)
    pos, access = _access(text, pos)
    pos, symbols = _symbols(text, pos)
    pos, locks = _locks(text, pos)
    pos, strict = _strict(text, pos)
    pos, integrity = _integrity(text, pos)
    pos, comment = _comment(text, pos)
    pos, expand = _expand(text, pos)
    return pos, RcsData(
        head=head,
        branch=branch,
        access=access,
        symbols=symbols,
        locks=locks,
        strict=strict,
        integrity=integrity,
        comment=comment,
        expand=expand,
    )


# delta ::= num
#           "date" num ";"
#           "author" id ";"
#           "state" {id} ";"
#           "branches" {num}* ";"
#           "next" {num} ";"
#           { "commitid" sym ";" }
_date = value(DELTA, "date", parse_num)
_author = value(DELTA, "author", parse_id)
_state = value_opt(DELTA, "state", parse_id)
_branches = value_many0(DELTA, "branches", parse_num)
_next = value_opt(DELTA, "next", parse_num)
_commitid = value_all_opt(DELTA, "commitid", parse_sym)


def parse_delta(text: str, pos: int = 0) -> tuple[int, Delta]:
    with rule(DELTA, pos):
        pos, num = parse_num(text, whitespace0(text, pos))
    pos, date = _date(text, pos)
    pos, author = _author(text, pos)
    pos, state = _state(text, pos)
    pos, branches = _branches(text, pos)
    pos, next_num = _next(text, pos)
    pos, commitid = _commitid(text, pos)
    return pos, Delta(
        num=num,
        date=date,
        author=author,
        state=state,
        branches=branches,
        next=next_num,
        commitid=commitid,
    )


def _parse_deltatext(text: str, pos: int, body: Parser[Text]) -> tuple[int, DeltaText]:
    with rule(DELTATEXT, pos):
        pos, num = parse_num(text, whitespace0(text, pos))
        pos = keyword(text, whitespace0(text, pos), "log")
        pos, log = parse_string(text, whitespace0(text, pos))
        # a block whose revision and log have been read is committed to
        with cut():
            pos = keyword(text, whitespace0(text, pos), "text")
            pos, body_text = body(text, whitespace0(text, pos))
    return pos, DeltaText(num=num, log=log, text=body_text)


def _head_text(text: str, pos: int) -> tuple[int, HeadText]:
    pos, contents = parse_string(text, pos)
    return pos, HeadText(text=contents)


def parse_deltatext_head(text: str, pos: int = 0) -> tuple[int, DeltaText]:
    """The first deltatext of a file carries the full text of its revision."""
    return _parse_deltatext(text, pos, _head_text)


def parse_deltatext(text: str, pos: int = 0) -> tuple[int, DeltaText]:
    """Every later deltatext carries a diff against the revision before it."""
    return _parse_deltatext(text, pos, parse_diff_string)

