from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional, Union

from path_loader.app.wiring import default_loader
from path_loader.domain.errors import (
    ContentProcessingError,
    FileLoadError,
    HTTPStatusError,
    LoadError,
    UnsupportedEnvironmentError,
)
from path_loader.domain.models import LoadCallback, LoadOptions
from path_loader.use_cases.dispatcher import OptionsArg


def load(
    target: Any,
    options_or_callback: OptionsArg = None,
    callback: Optional[LoadCallback] = None,
) -> "asyncio.Task[Any]":
    """Load a filesystem path, file:// URL or http(s) URL as text.

    Must be called with an event loop running; the returned task can be
    awaited, and callback (if any) is called once with (error, result).
    """
    return default_loader().load(target, options_or_callback, callback)


def load_sync(target: Any, options: Union[LoadOptions, Mapping[str, Any], None] = None) -> Any:
    return default_loader().load_sync(target, options)


__all__ = [
    "load",
    "load_sync",
    "LoadOptions",
    "LoadError",
    "FileLoadError",
    "HTTPStatusError",
    "UnsupportedEnvironmentError",
    "ContentProcessingError",
]
