from typing import Callable, NotRequired, Optional, TypedDict, TypeVar

from rcs_parser.combinators import keyword
from rcs_parser.document import Located, LocatedText, assemble_document
from rcs_parser.errors import RcsParseError, rule
from rcs_parser.lexer import line_ending, parse_string, whitespace0, whitespace1
from rcs_parser.logger import Logger
from rcs_parser.nodes import RcsData
from rcs_parser.sections import parse_admin, parse_delta, parse_deltatext, parse_deltatext_head
from rcs_parser.utils import resolve_config

T = TypeVar("T")

CONTEXT = "RCS"


class ParserConfig(TypedDict):
    parse: NotRequired[bool]
    enable_logger: NotRequired[bool]


class ParserConfigRequired(TypedDict):
    parse: bool
    enable_logger: bool


DEFAULT_CONFIG: ParserConfigRequired = {"parse": True, "enable_logger": False}


def parse_desc(text: str, pos: int = 0) -> tuple[int, str]:
    with rule("desc", pos):
        pos = keyword(text, whitespace1(text, pos), "desc")
        return parse_string(text, whitespace1(text, pos))


def _final_line_ending(text: str, pos: int) -> tuple[int, None]:
    return line_ending(text, pos), None


class RcsParser:
    """Drives the section parsers over a whole comma-v file.

    admin, delta*, desc, the head deltatext, deltatext*, then one line ending.
    Whatever follows that line ending is left in ``remainder``.
    """

    def __init__(self, text: str, config: Optional[ParserConfig] = None):
        self.text = text
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(config={"name": "RCS Parser", "is_enabled": self.config["enable_logger"]}).logger
        self.position = 0
        self.document: RcsData | None = None
        if self.config["parse"]:
            self.document = self.parse()

    @property
    def remainder(self) -> str:
        return self.text[self.position :]

    def _run(self, parser: Callable[[str, int], tuple[int, T]]) -> T:
        with rule(CONTEXT, self.position):
            self.position, result = parser(self.text, self.position)
        return result

    def _try(self, parser: Callable[[str, int], tuple[int, T]]) -> tuple[int, T] | None:
        """Run an optional block; on a non-fatal failure rewind and return ``None``."""
        start = self.position
        try:
            self.position, result = parser(self.text, self.position)
        except RcsParseError as error:
            if error.fatal:
                raise
            self.position = start
            return None
        return whitespace0(self.text, start), result

    def parse(self) -> RcsData:
        self.position = 0
        try:
            return self._parse_document()
        except RcsParseError as error:
            self.logger.error(f"Parsing failed: {error}")
            raise

    def _parse_document(self) -> RcsData:
        admin = self._run(parse_admin)
        self.logger.info(f"Parsed admin section, head is {admin.head}")

        headers: list[Located] = []
        while (header := self._try(parse_delta)) is not None:
            self.logger.debug(f"Parsed delta {header[1].num} at offset {header[0]}")
            headers.append(header)
        self.logger.info(f"Parsed {len(headers)} delta header(s)")

        desc = self._run(parse_desc)

        bodies: list[LocatedText] = []
        start = whitespace0(self.text, self.position)
        bodies.append((start, self._run(parse_deltatext_head)))
        while (body := self._try(parse_deltatext)) is not None:
            self.logger.debug(f"Parsed deltatext {body[1].num}")
            bodies.append(body)
        self.logger.info(f"Parsed {len(bodies)} deltatext block(s)")

        self._run(_final_line_ending)

        document = assemble_document(admin, desc, headers, bodies)
        self.logger.info(f"Assembled document with {len(document.deltas)} delta(s)")
        return document


def parse_rcs(text: str, config: Optional[ParserConfig] = None) -> tuple[str, RcsData]:
    """Parse a whole comma-v file, returning the unconsumed input and the document."""
    parser = RcsParser(text, config={**(config or {}), "parse": False})
    document = parser.parse()
    return parser.remainder, document
