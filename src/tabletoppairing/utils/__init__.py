"""Shared helpers: logging, identifiers and timestamps."""

# Tabletop Pairing
# Copyright (C) 2025  Tabletop Pairing developers
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
from datetime import date, datetime, timezone
from typing import Optional, Union

from dateutil import parser as date_parser

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    The engine never configures handlers itself; hosts (or the testing CLI,
    through :func:`configure_logging`) decide where records go.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def configure_logging(level: int = logging.INFO) -> None:
    """Send package log records to stderr at the given level."""
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.getLogger("tabletoppairing").setLevel(level)


def generate_id() -> str:
    """Generate a unique identifier for pairings and tournaments."""
    return str(uuid.uuid4())


def utc_now() -> str:
    """Current time as an ISO-8601 string in UTC."""
    return datetime.now(timezone.utc).isoformat()


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Coerce an ISO date (or datetime) string into a ``date``.

    Accepts ``date`` instances unchanged and ``None`` as missing.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.isoparse(value).date()
