import os

from quickenv.errors import MissingVariableError


def get_env(key: str, default: str = "") -> str:
    """Return os.environ[key], or `default` when the variable is unset or empty."""
    value = os.environ.get(key)
    if value:
        return value
    return default


def require_env(key: str) -> str:
    value = os.environ.get(key)
    if value:
        return value
    raise MissingVariableError(key)
