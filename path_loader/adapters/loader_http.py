from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Dict, Optional

import requests

from path_loader.domain.errors import ContentProcessingError, HTTPStatusError, LoadError
from path_loader.domain.models import LoadOptions, ProcessContent
from path_loader.ports.loaders import UrlLoader

log = logging.getLogger(__name__)


def _as_exception(error: Any) -> BaseException:
    if isinstance(error, BaseException):
        return error
    return LoadError(str(error))


def run_process_content(hook: ProcessContent, response: requests.Response) -> Any:
    """Invoke process_content and return what it passed to its completion callback."""
    outcome: Dict[str, Any] = {}

    def done(error: Any = None, content: Any = None) -> None:
        if outcome:
            log.warning("process_content completion called more than once for %s, ignoring", response.url)
            return
        outcome["error"] = error
        outcome["content"] = content

    hook(response, done)

    if not outcome:
        raise ContentProcessingError("process_content returned without calling its completion callback")
    if outcome["error"]:
        raise _as_exception(outcome["error"])
    return outcome["content"]


@dataclass
class HttpLoader(UrlLoader):
    timeout_s: float = 30.0
    user_agent: Optional[str] = None

    session: Optional[requests.Session] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
        # no cookies kept between loads; the session is only a connection pool
        self.session.cookies.clear()
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        if self.user_agent:
            self.session.headers["User-Agent"] = self.user_agent

    def build_request(self, url: str, options: LoadOptions) -> requests.Request:
        return requests.Request(
            method=options.http_method,
            url=url,
            headers=dict(options.headers),
            auth=options.auth,
            params=options.params,
        )

    def _send(self, req: requests.Request, options: LoadOptions) -> requests.Response:
        assert self.session is not None

        prepped = self.session.prepare_request(req)
        send_kwargs = self.session.merge_environment_settings(prepped.url, {}, None, options.verify, None)
        timeout = options.timeout if options.timeout is not None else self.timeout_s
        return self.session.send(prepped, timeout=timeout, allow_redirects=True, **send_kwargs)

    async def load(self, url: str, options: LoadOptions) -> Any:
        req = self.build_request(url, options)
        if options.prepare_request is not None:
            options.prepare_request(req)

        log.debug("%s %s", req.method, req.url)
        r = await asyncio.to_thread(self._send, req, options)

        if not 200 <= r.status_code < 300:
            raise HTTPStatusError(r.status_code, r.reason, str(req.method).upper(), r.url or url, response=r)

        if options.encoding:
            r.encoding = options.encoding
        elif "charset" not in r.headers.get("content-type", "").lower():
            r.encoding = "utf-8"

        if options.process_content is not None:
            return run_process_content(options.process_content, r)
        return r.text
