from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Dict, List, Optional

import requests

from path_loader.app.settings import LoaderSettings
from path_loader.app.wiring import build_loader
from path_loader.domain.errors import LoadError
from path_loader.domain.models import LoadOptions

log = logging.getLogger("path_loader")


def _parse_headers(values: List[str]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"bad header {raw!r}, expected 'Name: value'")
        headers[name.strip()] = value.strip()
    return headers


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="path-loader", description="Print the content of a path or URL")
    parser.add_argument("target", help="Filesystem path, file:// URL or http(s):// URL")
    parser.add_argument("--method", default="GET")
    parser.add_argument("--header", action="append", default=[], help="Extra HTTP header, 'Name: value'")
    parser.add_argument("--user", default=None, help="Basic auth user")
    parser.add_argument("--password", default="", help="Basic auth password")
    parser.add_argument("--encoding", default=None)
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--environment", choices=["server", "browser"], default=None)
    parser.add_argument("--json", action="store_true", help="Parse the content as JSON and pretty-print it")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(message)s")

    settings = LoaderSettings.from_env()
    if args.environment is not None:
        settings = replace(settings, environment=args.environment)
    if args.timeout is not None:
        settings = replace(settings, http_timeout_s=args.timeout)

    try:
        headers = _parse_headers(args.header)
    except ValueError as e:
        parser.error(str(e))

    def prepare(req: requests.Request) -> None:
        req.auth = (args.user, args.password)

    options = LoadOptions(
        method=args.method,
        encoding=args.encoding,
        headers=headers,
        prepare_request=prepare if args.user is not None else None,
    )

    loader = build_loader(settings)
    try:
        content = loader.load_sync(args.target, options)
    except (LoadError, requests.RequestException) as e:
        log.debug("load failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        try:
            content = json.dumps(json.loads(content), ensure_ascii=False, indent=2)
        except json.JSONDecodeError as e:
            print(f"error: content is not JSON: {e}", file=sys.stderr)
            return 1

    print(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
