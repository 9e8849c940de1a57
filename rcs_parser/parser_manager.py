from pathlib import Path
from typing import NotRequired, Optional, TypedDict
from rcs_parser.logger import Logger
from rcs_parser.nodes import RcsData
from rcs_parser.parser import ParserConfig, RcsParser
from rcs_parser.utils import resolve_config


class ParserManagerConfig(TypedDict):
    encoding: NotRequired[str]
    parser_config: NotRequired[ParserConfig]


class ParserManagerConfigRequired(TypedDict):
    encoding: str
    parser_config: ParserConfig


DEFAULT_CONFIG: ParserManagerConfigRequired = {
    "encoding": "utf-8",
    "parser_config": {},
}


class ParserManager:
    """Reads a comma-v file from disk and parses it."""

    def __init__(self, path: str | Path, config: Optional[ParserManagerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.path = Path(path)
        parser_config = self.config["parser_config"]
        self.logger = Logger(
            config={"name": "RCS Parser Manager", "is_enabled": parser_config.get("enable_logger", False)}
        ).logger
        self.logger.info(f"Reading {self.path} as {self.config['encoding']}")
        self.input = self.path.read_text(encoding=self.config["encoding"])
        self.parser = RcsParser(text=self.input, config=parser_config)

    @property
    def document(self) -> RcsData | None:
        return self.parser.document

    @property
    def remainder(self) -> str:
        return self.parser.remainder
