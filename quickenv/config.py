import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from loguru import logger


DEFAULT_PATHNAME = ".env"
DEFAULT_MAX_LEVELS = 3

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: Optional[str]) -> bool:
    return str(value or "").strip().lower() in _TRUTHY


def _env_levels(value: Optional[str]) -> int:
    raw = str(value or "").strip()
    if not raw:
        return DEFAULT_MAX_LEVELS
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"quickenv: ignoring invalid QUICKENV_MAX_LEVELS={raw!r}, using {DEFAULT_MAX_LEVELS}")
        return DEFAULT_MAX_LEVELS


@dataclass(frozen=True)
class LoadOptions:
    # Name (or relative path) of the file to look for
    pathname: str = DEFAULT_PATHNAME
    # Replace variables that are already set to a non-empty value
    overwrite: bool = False
    # Emit loguru debug records for skipped lines and set variables
    debug: bool = False
    # Parent directories to climb when the file is not in the working directory
    max_levels: Optional[int] = DEFAULT_MAX_LEVELS

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> "LoadOptions":
        allowed = set(LoadOptions.__dataclass_fields__.keys())
        filtered = {k: v for k, v in (data or {}).items() if k in allowed}
        return LoadOptions(**filtered)

    @staticmethod
    def from_environ(env: Optional[Mapping[str, str]] = None) -> "LoadOptions":
        """
        Build options from QUICKENV_* variables:
          - QUICKENV_PATH
          - QUICKENV_OVERWRITE / QUICKENV_DEBUG (1/true/yes/on)
          - QUICKENV_MAX_LEVELS
        Unset variables keep the dataclass defaults; a non-integer
        QUICKENV_MAX_LEVELS is logged and replaced by the default.
        """
        env = os.environ if env is None else env
        return LoadOptions(
            pathname=env.get("QUICKENV_PATH") or DEFAULT_PATHNAME,
            overwrite=_env_flag(env.get("QUICKENV_OVERWRITE")),
            debug=_env_flag(env.get("QUICKENV_DEBUG")),
            max_levels=_env_levels(env.get("QUICKENV_MAX_LEVELS")),
        )


def resolve_options(options: Optional[LoadOptions] = None) -> LoadOptions:
    """
    Return a copy of `options` with missing fields defaulted:
      - empty pathname -> ".env"
      - max_levels None or <= 0 -> 3
    The caller's record is left untouched.
    """
    if options is None:
        return LoadOptions()

    result = replace(options)
    if not result.pathname:
        result = replace(result, pathname=DEFAULT_PATHNAME)
    if result.max_levels is None or result.max_levels <= 0:
        result = replace(result, max_levels=DEFAULT_MAX_LEVELS)
    return result
