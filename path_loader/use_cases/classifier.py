from __future__ import annotations

import os
from urllib.request import url2pathname

from path_loader.domain.models import ResolvedTarget

_HTTP_SCHEMES = ("http://", "https://")
_FILE_SCHEME = "file://"


def file_url_to_path(url: str) -> str:
    rest = url[len(_FILE_SCHEME):]
    if rest.lower().startswith("localhost/"):
        rest = rest[len("localhost"):]
    return url2pathname(rest)


def classify(target: object) -> ResolvedTarget:
    """Decide which loader handles target. No I/O."""
    if isinstance(target, os.PathLike):
        return ResolvedTarget(kind="file", location=os.fspath(target))
    if not isinstance(target, str):
        raise TypeError(f"location must be a string, got {type(target).__name__}")

    lowered = target[:8].lower()
    if lowered.startswith(_HTTP_SCHEMES):
        return ResolvedTarget(kind="http", location=target)
    if lowered.startswith(_FILE_SCHEME):
        return ResolvedTarget(kind="file", location=file_url_to_path(target))
    return ResolvedTarget(kind="file", location=target)
