"""
Builders for the deep links attached to alerts in notification templates: dashboard and panel views and the prefilled silence form. Every link is derived from a parsed copy of the configured external URL; the base path is kept and only the path suffix and query change per link.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import posixpath
import re
from typing import Iterable, Mapping
from urllib.parse import SplitResult, quote, quote_plus, unquote, urlsplit, urlunsplit

from .errors import InvalidConfigURL

SILENCE_NEW_PATH = "/alerting/silence/new"
SILENCE_ALERTMANAGER = "grafana"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")
_WHITESPACE = re.compile(r"\s")
# sub-delims left unescaped in URL paths
_PATH_SAFE = "/$&+,:;=@"


def parse_external_url(value: str) -> SplitResult:
    if _CONTROL_CHARS.search(value):
        raise InvalidConfigURL(value, "invalid control character in URL")
    if value.startswith(":"):
        raise InvalidConfigURL(value, "missing protocol scheme")
    if not _SCHEME.match(value) and ":" in value.split("/", 1)[0]:
        raise InvalidConfigURL(value, "first path segment in URL cannot contain colon")

    try:
        parsed = urlsplit(value)
        parsed.port
    except ValueError as exc:
        raise InvalidConfigURL(value, str(exc)) from exc
    if _WHITESPACE.search(parsed.netloc):
        raise InvalidConfigURL(value, f"invalid character in host name {parsed.netloc!r}")

    for part in (parsed.netloc, parsed.path, parsed.fragment):
        if _BAD_ESCAPE.search(part):
            raise InvalidConfigURL(value, f"invalid URL escape in {part!r}")
    return parsed


def join_path(*elems: str) -> str:
    joined = "/".join(elem for elem in elems if elem)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _build(base: SplitResult, path: str, query: str) -> str:
    return urlunsplit((base.scheme, base.netloc, quote(path, safe=_PATH_SAFE), query, base.fragment))


def _base_path(base: SplitResult) -> str:
    return unquote(base.path)


def dashboard_url(base: SplitResult, dashboard_uid: str) -> str:
    return _build(base, join_path(_base_path(base), "/d/", dashboard_uid), base.query)


def panel_url(base: SplitResult, dashboard_uid: str, panel_id: str) -> str:
    return _build(base, join_path(_base_path(base), "/d/", dashboard_uid), "viewPanel=" + panel_id)


def silence_matchers(labels: Mapping[str, str]) -> list[str]:
    return sorted(f"{key}={value}" for key, value in labels.items())


def silence_url(base: SplitResult, matchers: Iterable[str]) -> str:
    query = f"alertmanager={SILENCE_ALERTMANAGER}&matchers=" + quote_plus(",".join(matchers))
    return _build(base, join_path(_base_path(base), SILENCE_NEW_PATH), query)
