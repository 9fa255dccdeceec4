from __future__ import annotations

from typing import Protocol, runtime_checkable

from path_loader.domain.models import LoadOptions


@runtime_checkable
class FileLoader(Protocol):
    """Reads a filesystem path as text. One implementation per environment."""

    async def load(self, path: str, options: LoadOptions) -> str:
        ...


@runtime_checkable
class UrlLoader(Protocol):
    """Fetches an http(s) URL; result is the text or whatever process_content produced."""

    async def load(self, url: str, options: LoadOptions) -> object:
        ...
