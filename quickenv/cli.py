import argparse
import json
from typing import Any, Dict, List, Optional

from loguru import logger

from quickenv.config import LoadOptions, resolve_options
from quickenv.env import get_env, require_env
from quickenv.errors import QuickEnvError, ReadError
from quickenv.loader import load, mask_value
from quickenv.locator import find_env_file
from quickenv.parser import ParsedEntry, parse_stream


def _add_common_args(parser: argparse.ArgumentParser, defaults: LoadOptions) -> None:
    parser.add_argument(
        "--file",
        dest="pathname",
        default=defaults.pathname,
        help="Env file name or relative path (default: .env or env QUICKENV_PATH).",
    )
    parser.add_argument(
        "--max-levels",
        type=int,
        default=defaults.max_levels,
        help="Parent directories to search when the file is not in the working directory (default: 3).",
    )


def build_parser(defaults: Optional[LoadOptions] = None) -> argparse.ArgumentParser:
    defaults = defaults or LoadOptions.from_environ()
    parser = argparse.ArgumentParser(prog="quickenv", description="Load .env files into the process environment.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_load = sub.add_parser("load", help="Load the env file and report how many variables were set.")
    _add_common_args(p_load, defaults)
    p_load.add_argument("--overwrite", action="store_true", default=defaults.overwrite, help="Replace variables that are already set.")
    p_load.add_argument("--debug", action="store_true", default=defaults.debug, help="Log skipped lines and (masked) set variables.")

    p_check = sub.add_parser("check", help="Validate the env file without touching the environment.")
    _add_common_args(p_check, defaults)

    p_get = sub.add_parser("get", help="Load the env file, then print one variable.")
    _add_common_args(p_get, defaults)
    p_get.add_argument("key")
    p_get.add_argument("--default", default="", help="Value printed when the variable is unset or empty.")
    p_get.add_argument("--required", action="store_true", help="Fail when the variable is unset or empty.")

    return parser


def _check_file(pathname: str, max_levels: int) -> Dict[str, Any]:
    path = find_env_file(pathname, max_levels)
    valid: List[Dict[str, Any]] = []
    invalid: List[Dict[str, Any]] = []
    try:
        with path.open("r", encoding="utf-8", errors="replace") as f:
            for lineno, item in parse_stream(f):
                if isinstance(item, ParsedEntry):
                    valid.append({"line": lineno, "key": item.key, "value": mask_value(item.value)})
                else:
                    invalid.append({"line": lineno, "reason": item.reason})
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, exc) from exc
    return {"ok": not invalid, "path": str(path), "valid": valid, "invalid": invalid}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "load":
        opts = LoadOptions(
            pathname=args.pathname,
            overwrite=args.overwrite,
            debug=args.debug,
            max_levels=args.max_levels,
        )
        count, err = load(opts)
        if err is not None:
            logger.error(str(err))
        print(json.dumps({"ok": err is None, "count": count, "error": str(err) if err else None}, ensure_ascii=False, indent=2))
        return 0 if err is None else 1

    if args.command == "check":
        try:
            opts = resolve_options(LoadOptions(pathname=args.pathname, max_levels=args.max_levels))
            out = _check_file(opts.pathname, opts.max_levels)
        except QuickEnvError as exc:
            logger.error(str(exc))
            return 1
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0 if out["ok"] else 1

    if args.command == "get":
        _, err = load(LoadOptions(pathname=args.pathname, max_levels=args.max_levels))
        if err is not None:
            logger.warning(str(err))
        if args.required:
            try:
                print(require_env(args.key))
            except QuickEnvError as exc:
                logger.error(str(exc))
                return 1
            return 0
        print(get_env(args.key, args.default))
        return 0

    raise SystemExit(f"Unknown command: {args.command}")
