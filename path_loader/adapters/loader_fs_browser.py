from __future__ import annotations

from path_loader.domain.errors import UnsupportedEnvironmentError
from path_loader.domain.models import LoadOptions
from path_loader.ports.loaders import FileLoader


class UnsupportedFileLoader(FileLoader):
    """Stand-in for restricted (browser) builds that have no filesystem."""

    async def load(self, path: str, options: LoadOptions) -> str:
        raise UnsupportedEnvironmentError("file loading")
