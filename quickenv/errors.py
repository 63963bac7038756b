from pathlib import Path
from typing import Optional, Union


class QuickEnvError(Exception):
    """Base class for every error raised by quickenv. Messages carry a `quickenv:` prefix."""

    def __str__(self) -> str:
        return f"quickenv: {super().__str__()}"


class ParseError(QuickEnvError):
    def __init__(self, reason: str, line: str = ""):
        self.reason = reason
        self.line = line
        super().__init__(reason)


class NotFoundError(QuickEnvError):
    def __init__(self, pathname: str):
        self.pathname = pathname
        super().__init__(f"env file not found: {pathname}")


class ReadError(QuickEnvError):
    def __init__(self, path: Optional[Union[str, Path]], cause: BaseException):
        self.path = path
        self.cause = cause
        self.__cause__ = cause
        where = f" {path}" if path else ""
        super().__init__(f"read error{where}: {cause}")


class SetError(QuickEnvError):
    def __init__(self, key: str, cause: BaseException):
        self.key = key
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"failed to set {key}: {cause}")


class MissingVariableError(QuickEnvError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"required environment variable {key} is not set")
