from __future__ import annotations

from typing import Any, Optional


class LoadError(Exception):
    """Base class for failures produced by the loaders themselves.

    Exceptions raised inside caller hooks are not wrapped into this class,
    they reach the caller unchanged.
    """

    status: Optional[int] = None
    path: Optional[str] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FileLoadError(LoadError):
    def __init__(self, code: str, description: str, path: str, errno: Optional[int] = None) -> None:
        super().__init__(f"{code}: {description}, open '{path}'")
        self.code = code
        self.errno = errno
        self.path = path


class UnsupportedEnvironmentError(LoadError):
    def __init__(self, what: str = "file loading") -> None:
        super().__init__(f"{what} is not supported in this environment")


class HTTPStatusError(LoadError):
    def __init__(self, status: int, reason: str, method: str, url: str, response: Any = None) -> None:
        reason = reason or "HTTP error"
        super().__init__(f"{status} {reason} ({method} {url})")
        self.status = status
        self.reason = reason
        self.method = method
        self.url = url
        self.response = response


class ContentProcessingError(LoadError):
    """process_content finished without reporting a result."""
