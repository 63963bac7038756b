import io
from typing import Dict, Iterable, Iterator, NamedTuple, Tuple, Union

from quickenv.errors import ParseError


_EXPORT_PREFIX = "export"
_QUOTES = ('"', "'")


class ParsedEntry(NamedTuple):
    key: str
    value: str


def is_valid_key(key: str) -> bool:
    """
    Environment variable name rule:
      - non-empty
      - first character is a letter or underscore
      - the rest are letters, decimal digits or underscores
    Letters and digits are Unicode-aware.
    """
    if not key:
        return False
    first = key[0]
    if not (first.isalpha() or first == "_"):
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch == "_" for ch in key[1:])


def unquote_value(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _find_delimiter(line: str) -> int:
    # A quote is escaped when preceded by an odd run of backslashes.
    quote = ""
    backslashes = 0
    for i, ch in enumerate(line):
        if ch in _QUOTES and backslashes % 2 == 0:
            if not quote:
                quote = ch
            elif ch == quote:
                quote = ""
        elif ch == "=" and not quote:
            return i
        backslashes = backslashes + 1 if ch == "\\" else 0
    return -1


def parse_line(line: str) -> ParsedEntry:
    """
    Parse one `KEY=VALUE` line (already trimmed, not a comment).

    A leading literal `export` is dropped, the first `=` outside quotes splits
    key from value, and one layer of matching quotes is removed from the value.
    Raises ParseError with reason "missing delimiter", "empty key" or "invalid key".
    """
    source = line
    if line.startswith(_EXPORT_PREFIX):
        line = line[len(_EXPORT_PREFIX):]

    idx = _find_delimiter(line)
    if idx == -1:
        raise ParseError("missing delimiter", source)

    key = line[:idx].strip()
    value = line[idx + 1 :].strip()

    if not key:
        raise ParseError("empty key", source)
    if not is_valid_key(key):
        raise ParseError("invalid key", source)

    return ParsedEntry(key, unquote_value(value))


def parse_stream(lines: Iterable[str]) -> Iterator[Tuple[int, Union[ParsedEntry, ParseError]]]:
    """
    Yield (line_number, entry_or_error) for every assignment-looking line.
    Blank lines and `#` comments are skipped silently; line numbers are 1-based.
    """
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            yield lineno, parse_line(line)
        except ParseError as exc:
            yield lineno, exc


def parse_text(text: str) -> Dict[str, str]:
    """Parse a whole .env document without touching os.environ (later keys win)."""
    out: Dict[str, str] = {}
    for _, item in parse_stream(io.StringIO(text or "")):
        if isinstance(item, ParsedEntry):
            out[item.key] = item.value
    return out
