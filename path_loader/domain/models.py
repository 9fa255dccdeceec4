from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Literal, Mapping, Optional, Union

log = logging.getLogger(__name__)

TargetKind = Literal["file", "http"]

PrepareRequest = Callable[[Any], None]
Done = Callable[[Optional[BaseException], Any], None]
ProcessContent = Callable[[Any, Done], None]
LoadCallback = Callable[[Optional[BaseException], Any], None]

_ALIASES = {
    "prepareRequest": "prepare_request",
    "processContent": "process_content",
}


@dataclass(frozen=True)
class LoadOptions:
    method: str = "GET"
    prepare_request: Optional[PrepareRequest] = None
    process_content: Optional[ProcessContent] = None
    encoding: Optional[str] = None

    # passed straight to requests
    headers: Dict[str, str] = field(default_factory=dict)
    auth: Any = None
    params: Any = None
    timeout: Optional[float] = None
    verify: Any = None

    def __post_init__(self) -> None:
        if self.prepare_request is not None and not callable(self.prepare_request):
            raise TypeError("options.prepare_request must be a function")
        if self.process_content is not None and not callable(self.process_content):
            raise TypeError("options.process_content must be a function")
        if not isinstance(self.method, str) or not self.method.strip():
            raise TypeError("options.method must be a non-empty string")

    @staticmethod
    def coerce(options: Union["LoadOptions", Mapping[str, Any], None]) -> "LoadOptions":
        if options is None:
            return LoadOptions()
        if isinstance(options, LoadOptions):
            return options
        if not isinstance(options, Mapping):
            raise TypeError("options must be a mapping or LoadOptions")

        known = {f.name for f in fields(LoadOptions)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                log.debug("ignoring unknown load option %r", key)
                continue
            kwargs[name] = value

        if kwargs.get("method") is None:
            kwargs.pop("method", None)
        if kwargs.get("headers") is None:
            kwargs.pop("headers", None)
        return LoadOptions(**kwargs)

    @property
    def http_method(self) -> str:
        return self.method.strip().upper()


@dataclass(frozen=True)
class ResolvedTarget:
    kind: TargetKind
    location: str


@dataclass(frozen=True)
class LoadRequest:
    target: Any
    options: LoadOptions = field(default_factory=LoadOptions)
