# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JSON codec boundary backed by pydantic."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import pydantic_core
from pydantic import TypeAdapter, ValidationError

from .errors import DecodingError, EncodingError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def encode_json(value: Any) -> bytes:
    """Serialize dicts, lists, dataclasses and pydantic models to compact JSON bytes."""
    try:
        return pydantic_core.to_json(value)
    except pydantic_core.PydanticSerializationError as exc:
        raise EncodingError(str(exc)) from exc


def decode_json(data: bytes, target: type[T]) -> T:
    """Decode JSON bytes into `target` without coercing types (`"5"` is not an int)."""
    try:
        return _adapter(target).validate_json(data, strict=True)
    except ValidationError as exc:
        raise DecodingError(str(exc)) from exc


__all__ = ["decode_json", "encode_json"]
