from __future__ import annotations

import os
import sys
from dataclasses import dataclass

RESTRICTED_PLATFORMS = {"emscripten", "wasi"}


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        val = float(v)
    except ValueError:
        return default
    return val if val > 0 else default


def _env_choice(name: str, default: str, allowed: set[str]) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    val = v.strip().lower()
    return val if val in allowed else default


def default_environment(platform: str = sys.platform) -> str:
    return "browser" if platform in RESTRICTED_PLATFORMS else "server"


@dataclass(frozen=True)
class LoaderSettings:
    environment: str = "server"   # server | browser
    encoding: str = "utf-8"
    http_timeout_s: float = 30.0
    user_agent: str = "path-loader"

    @staticmethod
    def from_env() -> "LoaderSettings":
        return LoaderSettings(
            environment=_env_choice("PL_ENVIRONMENT", default_environment(), {"server", "browser"}),
            encoding=_env_str("PL_ENCODING", LoaderSettings.encoding),
            http_timeout_s=_env_float("PL_HTTP_TIMEOUT", LoaderSettings.http_timeout_s),
            user_agent=_env_str("PL_USER_AGENT", LoaderSettings.user_agent),
        )
