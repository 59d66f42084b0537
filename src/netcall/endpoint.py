# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Endpoint descriptors.

An endpoint is a pure, declarative description of one API call. Anything exposing
`path`, `method`, `params`, `header_fields` and `request_data` satisfies
`HttpEndpoint`, so a service can model its catalogue as a class with properties
while simple call sites use the `Endpoint` dataclass directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Protocol, Union


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


def canonical_str(value: Any) -> str:
    """Render a query or header value the way it appears on the wire."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class JsonBody:
    """A value serialized with the JSON codec."""

    value: Any
    content_type: ClassVar[str] = "application/json"


@dataclass(frozen=True)
class TextBody:
    text: str
    content_type: ClassVar[str] = "text/plain"


@dataclass(frozen=True)
class RawBody:
    data: bytes
    content_type: ClassVar[str] = "application/octet-stream"


RequestBody = Union[JsonBody, TextBody, RawBody]
QueryParams = Mapping[str, Any]


class HttpEndpoint(Protocol):
    """Capability interface consumed by the request compiler."""

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HttpMethod: ...

    @property
    def params(self) -> QueryParams | None: ...

    @property
    def header_fields(self) -> Mapping[str, Any]: ...

    @property
    def request_data(self) -> RequestBody | None: ...


@dataclass(frozen=True)
class Endpoint:
    """Plain endpoint value; `params=None` means no query string at all."""

    path: str
    method: HttpMethod = HttpMethod.GET
    params: QueryParams | None = None
    header_fields: Mapping[str, Any] = field(default_factory=dict)
    request_data: RequestBody | None = None


__all__ = [
    "Endpoint",
    "HttpEndpoint",
    "HttpMethod",
    "JsonBody",
    "QueryParams",
    "RawBody",
    "RequestBody",
    "TextBody",
    "canonical_str",
]
