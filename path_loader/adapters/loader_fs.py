from __future__ import annotations

import asyncio
import errno as errno_mod
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from path_loader.domain.errors import FileLoadError
from path_loader.domain.models import LoadOptions
from path_loader.ports.loaders import FileLoader

log = logging.getLogger(__name__)


def _describe(e: OSError) -> tuple[str, str]:
    code = errno_mod.errorcode.get(e.errno, "EIO") if e.errno is not None else "EIO"
    description = (e.strerror or str(e) or "i/o error").lower()
    return code, description


@dataclass
class FsFileLoader(FileLoader):
    """Filesystem loader for environments that have a local disk."""

    base_dir: Optional[str] = None
    encoding: str = "utf-8"

    def resolve(self, path: str) -> str:
        base = self.base_dir if self.base_dir is not None else os.getcwd()
        return os.path.normpath(os.path.join(base, path))

    def _read(self, full_path: str, encoding: str) -> str:
        try:
            return Path(full_path).read_text(encoding=encoding)
        except OSError as e:
            code, description = _describe(e)
            raise FileLoadError(code, description, full_path, errno=e.errno) from e
        except UnicodeDecodeError as e:
            raise FileLoadError("EILSEQ", f"cannot decode as {encoding}", full_path, errno=errno_mod.EILSEQ) from e
        except LookupError as e:
            raise FileLoadError("EINVAL", f"unknown encoding {encoding!r}", full_path, errno=errno_mod.EINVAL) from e

    async def load(self, path: str, options: LoadOptions) -> str:
        full_path = self.resolve(path)
        encoding = options.encoding or self.encoding
        log.debug("reading %s (%s)", full_path, encoding)
        return await asyncio.to_thread(self._read, full_path, encoding)
