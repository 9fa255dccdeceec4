from __future__ import annotations

from threading import Lock
from typing import Dict, Optional

from path_loader.app.settings import LoaderSettings
from path_loader.ports.loaders import FileLoader
from path_loader.use_cases.dispatcher import PathLoader

from path_loader.adapters.loader_http import HttpLoader

_cache_lock = Lock()
_shared: Dict[LoaderSettings, PathLoader] = {}


def _build_file_loader(settings: LoaderSettings) -> FileLoader:
    if settings.environment == "browser":
        from path_loader.adapters.loader_fs_browser import UnsupportedFileLoader
        return UnsupportedFileLoader()

    from path_loader.adapters.loader_fs import FsFileLoader
    return FsFileLoader(encoding=settings.encoding)


def build_loader(settings: LoaderSettings) -> PathLoader:
    return PathLoader(
        file_loader=_build_file_loader(settings),
        url_loader=HttpLoader(
            timeout_s=settings.http_timeout_s,
            user_agent=settings.user_agent,
        ),
    )


def default_loader(settings: Optional[LoaderSettings] = None) -> PathLoader:
    """Shared PathLoader per settings, so the HTTP session is reused between calls."""
    if settings is None:
        settings = LoaderSettings.from_env()

    with _cache_lock:
        loader = _shared.get(settings)
        if loader is None:
            loader = build_loader(settings)
            _shared[settings] = loader
    return loader
