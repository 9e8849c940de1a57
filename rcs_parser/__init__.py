"""Parser for RCS comma-v files."""

from .nodes import (
    Delta,
    DeltaText,
    DiffAdd,
    DiffCommand,
    DiffDelete,
    DiffText,
    HeadText,
    Num,
    RcsData,
    Text,
)
from .errors import (
    ErrorFrame,
    RcsLexicalError,
    RcsMergeError,
    RcsParseError,
    RcsSyntaxError,
    format_error,
)
from .lexer import is_idchar, is_special, is_visible, parse_id, parse_intstring, parse_num, parse_string, parse_sym
from .diff import parse_diff_command, parse_diff_line, parse_diff_lines, parse_diff_string
from .combinators import value, value_all_opt, value_many0, value_opt
from .sections import parse_admin, parse_delta, parse_deltatext, parse_deltatext_head
from .document import build_deltas
from .parser import ParserConfig, RcsParser, parse_rcs
from .parser_manager import ParserManager, ParserManagerConfig

__all__ = [
    "Delta",
    "DeltaText",
    "DiffAdd",
    "DiffCommand",
    "DiffDelete",
    "DiffText",
    "HeadText",
    "Num",
    "RcsData",
    "Text",
    "ErrorFrame",
    "RcsLexicalError",
    "RcsMergeError",
    "RcsParseError",
    "RcsSyntaxError",
    "format_error",
    "is_idchar",
    "is_special",
    "is_visible",
    "parse_id",
    "parse_intstring",
    "parse_num",
    "parse_string",
    "parse_sym",
    "parse_diff_command",
    "parse_diff_line",
    "parse_diff_lines",
    "parse_diff_string",
    "value",
    "value_all_opt",
    "value_many0",
    "value_opt",
    "parse_admin",
    "parse_delta",
    "parse_deltatext",
    "parse_deltatext_head",
    "build_deltas",
    "ParserConfig",
    "RcsParser",
    "parse_rcs",
    "ParserManager",
    "ParserManagerConfig",
]
