# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging for netcall.

The library only emits records on loggers under `netcall`; it never installs
handlers on the root logger unless an application asks for it through
`setup_logging`.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "netcall"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv("NETCALL_LOG_LEVEL") or "WARNING").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | int | None = None, *, configure_root: bool = True) -> logging.Logger:
    """
    Set the `netcall` logger level and, unless told otherwise, give the process a
    basic stderr handler. Thread names are included because completions and
    transport work run on different threads.
    """
    effective_level = _resolve_level(level)
    if configure_root:
        logging.basicConfig(level=effective_level, format=LOG_FORMAT)
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(effective_level)
    return package_logger


__all__ = ["LOGGER_NAME", "setup_logging"]
