import os
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Union

from loguru import logger

from quickenv.config import LoadOptions, resolve_options
from quickenv.errors import NotFoundError, ParseError, QuickEnvError, ReadError, SetError
from quickenv.locator import find_env_file
from quickenv.parser import parse_line


class LoadResult(NamedTuple):
    count: int
    error: Optional[QuickEnvError] = None


def mask_value(value: str) -> str:
    if len(value) < 4:
        return "*" * len(value)
    return "***"


def load_stream(
    stream: Iterable[str],
    options: Optional[LoadOptions] = None,
    *,
    source: Optional[Union[str, Path]] = None,
) -> LoadResult:
    """
    Apply every valid `KEY=VALUE` line of `stream` to os.environ.

    Invalid lines are skipped (and logged when debug is on). A variable is only
    set when overwrite is enabled or it is currently unset/empty; the returned
    count includes only variables actually set. Read and set failures stop the
    load and are returned together with the partial count.
    """
    opts = resolve_options(options)
    loaded = 0
    lines = iter(stream)

    while True:
        try:
            raw = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            return LoadResult(loaded, ReadError(source, exc))

        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        try:
            key, value = parse_line(line)
        except ParseError as exc:
            if opts.debug:
                logger.debug(f"quickenv: skip invalid line {line!r}: {exc.reason}")
            continue

        if not opts.overwrite and os.environ.get(key, ""):
            continue

        try:
            os.environ[key] = value
        except (OSError, ValueError) as exc:
            return LoadResult(loaded, SetError(key, exc))
        loaded += 1

        if opts.debug:
            logger.debug(f"quickenv: set {key}={mask_value(value)}")

    return LoadResult(loaded)


def load(options: Optional[LoadOptions] = None) -> LoadResult:
    """
    Locate the env file (see find_env_file) and load it into os.environ.

    Never raises quickenv errors: returns LoadResult(count, error). A missing
    file yields count 0 and a NotFoundError.

    os.environ is process-wide and no locking is done here; callers loading
    from several threads must serialize the calls themselves.
    """
    opts = resolve_options(options)

    try:
        path = find_env_file(opts.pathname, opts.max_levels)
    except NotFoundError as exc:
        return LoadResult(0, exc)

    try:
        handle = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        return LoadResult(0, ReadError(path, exc))

    with handle:
        result = load_stream(handle, opts, source=path)

    if opts.debug and result.error is None:
        logger.debug(f"quickenv: loaded {result.count} variable(s) from {path}")
    return result


def must_load(options: Optional[LoadOptions] = None) -> int:
    """Like load(), but raises the error instead of returning it. Meant for program start-up."""
    count, err = load(options)
    if err is not None:
        raise err
    return count
