from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from path_loader.domain.models import LoadCallback, LoadOptions, LoadRequest
from path_loader.ports.loaders import FileLoader, UrlLoader
from path_loader.use_cases.classifier import classify

log = logging.getLogger(__name__)

OptionsArg = Union[LoadOptions, Mapping[str, Any], LoadCallback, None]


def split_arguments(
    options_or_callback: OptionsArg = None,
    callback: Optional[LoadCallback] = None,
) -> Tuple[Any, Optional[LoadCallback]]:
    """(options), (callback) and (options, callback) all map to (options, callback)."""
    if callable(options_or_callback) and not isinstance(options_or_callback, (LoadOptions, Mapping)):
        if callback is not None:
            raise TypeError("callback given twice")
        return None, options_or_callback
    if callback is not None and not callable(callback):
        raise TypeError("callback must be a function")
    return options_or_callback, callback


def attach_callback(task: "asyncio.Future[Any]", callback: LoadCallback) -> None:
    fired = False

    def _settled(t: "asyncio.Future[Any]") -> None:
        nonlocal fired
        if fired:
            return
        fired = True

        if t.cancelled():
            callback(asyncio.CancelledError(), None)
            return
        # exception() also marks the failure as retrieved
        err = t.exception()
        if err is not None:
            callback(err, None)
        else:
            callback(None, t.result())

    task.add_done_callback(_settled)


@dataclass
class PathLoader:
    file_loader: FileLoader
    url_loader: UrlLoader

    async def load_content(self, request: LoadRequest) -> Any:
        resolved = classify(request.target)
        log.debug("loading %s via %s loader", resolved.location, resolved.kind)

        if resolved.kind == "http":
            return await self.url_loader.load(resolved.location, request.options)
        return await self.file_loader.load(resolved.location, request.options)

    async def _run(self, target: Any, options: Any) -> Any:
        request = LoadRequest(target=target, options=LoadOptions.coerce(options))
        return await self.load_content(request)

    def load(
        self,
        target: Any,
        options_or_callback: OptionsArg = None,
        callback: Optional[LoadCallback] = None,
    ) -> "asyncio.Task[Any]":
        """Start loading target on the running event loop.

        The returned task settles with the content or the failure. When a
        callback is given it is also called, once, as callback(error, result).
        """
        options, callback = split_arguments(options_or_callback, callback)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError("load() needs a running event loop, use load_sync() from synchronous code") from None

        task = loop.create_task(self._run(target, options))
        if callback is not None:
            attach_callback(task, callback)
        return task

    def load_sync(self, target: Any, options: Union[LoadOptions, Mapping[str, Any], None] = None) -> Any:
        return asyncio.run(self._run(target, options))
