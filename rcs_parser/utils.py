from typing import Any, Mapping, TypeVar

T = TypeVar("T", bound=Mapping[str, Any])


def resolve_config(config: Mapping[str, Any], default_config: T) -> T:
    """Overlay the known keys of ``config`` on a copy of ``default_config``."""
    _config = dict(default_config)
    for key in _config:
        if key in config:
            _config[key] = config[key]
    return _config  # type: ignore[return-value]


def line_column(text: str, offset: int) -> tuple[int, int]:
    """1-based line and column of ``offset`` inside ``text``."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column
