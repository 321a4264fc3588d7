"""Shared helpers for Swiss Pairing: logging setup and id generation."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return the module logger for ``name``.

    Handlers are left to the application; the library only names its loggers
    so that a driver can configure them in one place.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level to set on this logger

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def generate_id(prefix: str) -> str:
    """Generate a process-unique identifier such as ``Player-1f0c...``."""
    return f"{prefix}-{uuid.uuid4().hex}"


__all__ = ["LOG_FORMAT", "configure_logging", "generate_id", "setup_logger"]
