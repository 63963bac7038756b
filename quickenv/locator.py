from pathlib import Path
from typing import Optional, Union

from quickenv.errors import NotFoundError


def find_env_file(pathname: str, max_levels: int, *, cwd: Optional[Union[str, Path]] = None) -> Path:
    """
    Look for `pathname` in the working directory, then in up to `max_levels`
    parent directories. The nearest match wins.

    Example (max_levels=3, cwd=/home/user/project/cmd/api):
      /home/user/project/cmd/api/.env
      /home/user/project/cmd/.env
      /home/user/project/.env
      /home/user/.env
    """
    if max_levels < 0:
        raise ValueError(f"max_levels must be >= 0, got {max_levels}")

    directory = Path(cwd if cwd is not None else Path.cwd()).resolve()

    candidate = directory / pathname
    if candidate.is_file():
        return candidate.resolve()

    for _ in range(max_levels):
        parent = directory.parent
        if parent == directory:
            break  # filesystem root
        directory = parent
        candidate = directory / pathname
        if candidate.is_file():
            return candidate.resolve()

    raise NotFoundError(pathname)
