# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Compile endpoint descriptors into wire-level requests."""

from __future__ import annotations

import logging
import re
from urllib.parse import quote, urlunsplit

import httpx

from ..codec import encode_json
from ..config import SessionConfig
from ..endpoint import HttpEndpoint, HttpMethod, JsonBody, QueryParams, RawBody, RequestBody, TextBody, canonical_str
from ..errors import EncodingError, InvalidURLError
from .models import HttpRequest

logger = logging.getLogger(__name__)

# RFC 3986 reg-name / IPv4 plus bracketed IPv6 literals.
_HOST_RE = re.compile(r"^(?:[A-Za-z0-9\-._~%!$&'()*+,;=]+|\[[0-9A-Fa-f:.]+\])$")
# Characters left unescaped inside query keys and values.
_QUERY_SAFE = "-._~!$'()*,;:@/?"
_PATH_SAFE = "/-._~!$&'()*+,;=:@%"


def _encode_query(params: QueryParams) -> str:
    items = []
    for key, value in params.items():
        name = quote(canonical_str(key), safe=_QUERY_SAFE)
        if value is None:
            items.append(name)
        else:
            items.append(f"{name}={quote(canonical_str(value), safe=_QUERY_SAFE)}")
    return "&".join(items)


def build_url(endpoint: HttpEndpoint, config: SessionConfig) -> str:
    """Build the absolute URL for `endpoint`; raises InvalidURLError when impossible."""
    host = config.host or ""
    path = endpoint.path or ""
    if not _HOST_RE.match(host):
        raise InvalidURLError()
    if path and not path.startswith("/"):
        raise InvalidURLError()
    if config.port is not None and not 0 <= config.port <= 65535:
        raise InvalidURLError()

    netloc = host if config.port is None else f"{host}:{config.port}"
    query = _encode_query(endpoint.params) if endpoint.params else ""
    url = urlunsplit((config.scheme.value, netloc, quote(path, safe=_PATH_SAFE), query, ""))

    try:
        httpx.URL(url)
    except (httpx.InvalidURL, ValueError) as exc:
        raise InvalidURLError() from exc
    return url


def _set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set a header, replacing any existing field whose name matches case-insensitively."""
    lower = name.lower()
    for existing in [key for key in headers if key.lower() == lower]:
        del headers[existing]
    headers[name] = value


def _encode_body(request_data: RequestBody | None) -> bytes | None:
    if request_data is None:
        return None
    if isinstance(request_data, JsonBody):
        try:
            return encode_json(request_data.value)
        except EncodingError as exc:
            logger.warning("json encoding error: %s", exc)
            return None
    if isinstance(request_data, TextBody):
        return request_data.text.encode("utf-8")
    if isinstance(request_data, RawBody):
        return bytes(request_data.data)
    raise TypeError(f"Unsupported request body: {type(request_data).__name__}")


def compile_request(endpoint: HttpEndpoint, config: SessionConfig) -> HttpRequest:
    """
    Turn an endpoint plus session config into an HttpRequest.

    Header precedence: Authorization, then Content-Type, then the endpoint's own
    header fields, which win on collision.
    """
    url = build_url(endpoint, config)

    headers: dict[str, str] = {}
    if config.authentication is not None:
        headers["Authorization"] = config.authentication.authorization_header

    request_data = endpoint.request_data
    if request_data is not None:
        headers["Content-Type"] = request_data.content_type

    for name, value in (endpoint.header_fields or {}).items():
        _set_header(headers, name, canonical_str(value))

    return HttpRequest(
        url=url,
        method=HttpMethod(endpoint.method).value,
        headers=headers,
        body=_encode_body(request_data),
    )


__all__ = ["build_url", "compile_request"]
