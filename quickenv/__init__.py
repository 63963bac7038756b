from quickenv.config import DEFAULT_MAX_LEVELS, DEFAULT_PATHNAME, LoadOptions, resolve_options
from quickenv.env import get_env, require_env
from quickenv.errors import (
    MissingVariableError,
    NotFoundError,
    ParseError,
    QuickEnvError,
    ReadError,
    SetError,
)
from quickenv.loader import LoadResult, load, load_stream, mask_value, must_load
from quickenv.locator import find_env_file
from quickenv.parser import ParsedEntry, is_valid_key, parse_line, parse_stream, parse_text, unquote_value

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_MAX_LEVELS",
    "DEFAULT_PATHNAME",
    "LoadOptions",
    "LoadResult",
    "MissingVariableError",
    "NotFoundError",
    "ParseError",
    "ParsedEntry",
    "QuickEnvError",
    "ReadError",
    "SetError",
    "find_env_file",
    "get_env",
    "is_valid_key",
    "load",
    "load_stream",
    "mask_value",
    "must_load",
    "parse_line",
    "parse_stream",
    "parse_text",
    "require_env",
    "resolve_options",
    "unquote_value",
]
