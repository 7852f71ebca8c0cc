"""Shared utilities for ArenaMatch."""

# ArenaMatch
# Copyright (C) 2025  ArenaMatch developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import uuid
from datetime import datetime, timezone

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger with the application's handler attached once.

    Args:
        name: Logger name, normally ``__name__`` of the calling module
        level: Level applied to the package root logger on first setup

    Returns:
        The configured logger
    """
    root = logging.getLogger("arenamatch")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)
    return logging.getLogger(name)


def utc_now() -> datetime:
    """Default clock for creation timestamps."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Default id factory for players and matches."""
    return str(uuid.uuid4())


__all__ = ["setup_logger", "utc_now", "new_id", "LOG_FORMAT"]
