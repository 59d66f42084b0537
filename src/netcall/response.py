# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome types and the interpretation of raw transport results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Union

from .codec import decode_json
from .errors import DecodingError
from .http.models import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    CLIENT = "client"
    SERVER = "server"


@dataclass(frozen=True)
class HttpError:
    """
    Classified failure of a call.

    Client errors carry an optional message; server errors carry the HTTP status.
    """

    kind: ErrorKind
    message: str | None = None
    status: int | None = None

    @classmethod
    def client(cls, message: str | None = None) -> HttpError:
        return cls(kind=ErrorKind.CLIENT, message=message)

    @classmethod
    def server(cls, status: int) -> HttpError:
        return cls(kind=ErrorKind.SERVER, status=status)


@dataclass(frozen=True)
class Success:
    data: bytes | None = None

    @property
    def succeeded(self) -> bool:
        return True

    def map(self, target: type[T]) -> T | None:
        """Decode the payload into `target`; None for an empty body or undecodable payload."""
        if self.data is None:
            return None
        try:
            return decode_json(self.data, target)
        except DecodingError as exc:
            logger.warning("json decoding error: %s", exc)
            return None


@dataclass(frozen=True)
class Failure:
    error: HttpError

    @property
    def succeeded(self) -> bool:
        return False

    def map(self, target: type[T]) -> T | None:  # noqa: ARG002
        return None


Outcome = Union[Success, Failure]


def interpret(raw: RawResponse) -> Outcome:
    """Classify a raw transport result."""
    if raw.error is not None:
        return Failure(HttpError.client(raw.error.message))
    if raw.status_code is None:
        return Failure(HttpError.client("wrong response type"))
    if not 200 <= raw.status_code < 300:
        return Failure(HttpError.server(raw.status_code))
    return Success(raw.content)


__all__ = ["ErrorKind", "Failure", "HttpError", "Outcome", "Success", "interpret"]
